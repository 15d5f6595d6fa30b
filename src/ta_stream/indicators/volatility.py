"""
Volatility Indicators Module

Streaming volatility indicators built from the moving-average and
windowed-statistics primitives.

Available indicators:
- True Range and Average True Range (Wilder smoothing)
- Bollinger Bands
- Keltner Channel
- Chandelier Exit
"""

from typing import NamedTuple, Optional

from ..base import CloseObservation, Indicator, RangeObservation, close_of, high_of, low_of
from ..registry import register_indicator
from ..utils.math_utils import validate_multiplier, validate_period
from .moving_average import ExponentialMovingAverage, SimpleMovingAverage, WilderMovingAverage
from .statistics import Maximum, Minimum, StandardDeviation


# Result types
class BollingerBandsResult(NamedTuple):
    """Bollinger Bands result"""
    upper_band: float
    middle_band: float
    lower_band: float


class KeltnerChannelResult(NamedTuple):
    """Keltner Channel result"""
    upper_channel: float
    middle_line: float
    lower_channel: float


class ChandelierExitResult(NamedTuple):
    """Chandelier Exit result"""
    long_exit: float
    short_exit: float


@register_indicator("tr")
class TrueRange(Indicator):
    """
    True Range

    Formula: max(high - low, |high - prev_close|, |low - prev_close|)

    The first bar has no previous close, so its true range is high - low.
    For bare numbers this reduces to |x_t - x_{t-1}|.
    """

    def __init__(self):
        super().__init__()
        self._prev_close: Optional[float] = None

    def _next(self, observation: RangeObservation) -> float:
        high = high_of(observation)
        low = low_of(observation)
        close = close_of(observation)

        if self._prev_close is None:
            true_range = high - low
        else:
            true_range = max(
                high - low,
                abs(high - self._prev_close),
                abs(low - self._prev_close)
            )

        self._prev_close = close
        return true_range

    def _reset(self):
        self._prev_close = None

    def __str__(self):
        return "TRUE_RANGE()"


@register_indicator("atr")
class AverageTrueRange(Indicator):
    """
    Average True Range (ATR)

    Wilder-smoothed true range, seeded by the first true range value:
    ATR_t = ATR_{t-1} + (TR_t - ATR_{t-1}) / period
    """

    def __init__(self, period: int = 14):
        super().__init__()
        self.period = validate_period(period)
        self.true_range = TrueRange()
        self.average = WilderMovingAverage(self.period)

    def _next(self, observation: RangeObservation) -> float:
        return self.average.feed(self.true_range.feed(observation))

    def _reset(self):
        self.true_range.reset()
        self.average.reset()

    def __str__(self):
        return f"ATR({self.period})"


@register_indicator("bb")
class BollingerBands(Indicator):
    """
    Bollinger Bands

    middle = SMA(period), upper/lower = middle +/- multiplier * SD(period)
    """

    DEFAULT = BollingerBandsResult(0.0, 0.0, 0.0)

    def __init__(self, period: int = 9, multiplier: float = 2.0):
        super().__init__()
        self.period = validate_period(period)
        self.multiplier = validate_multiplier(multiplier)
        self.sma = SimpleMovingAverage(self.period)
        self.sd = StandardDeviation(self.period)

    def _next(self, observation: CloseObservation) -> BollingerBandsResult:
        middle = self.sma.feed(observation)
        width = self.multiplier * self.sd.feed(observation)
        return BollingerBandsResult(middle + width, middle, middle - width)

    def _reset(self):
        self.sma.reset()
        self.sd.reset()

    def __str__(self):
        return f"BB({self.period}, {self.multiplier:g})"


@register_indicator("kc")
class KeltnerChannel(Indicator):
    """
    Keltner Channel

    middle = EMA(period) of close, upper/lower = middle +/- multiplier * ATR(period)
    """

    DEFAULT = KeltnerChannelResult(0.0, 0.0, 0.0)

    def __init__(self, period: int = 10, multiplier: float = 2.0):
        super().__init__()
        self.period = validate_period(period)
        self.multiplier = validate_multiplier(multiplier)
        self.ema = ExponentialMovingAverage(self.period)
        self.atr = AverageTrueRange(self.period)

    def _next(self, observation: RangeObservation) -> KeltnerChannelResult:
        middle = self.ema.feed(observation)
        width = self.multiplier * self.atr.feed(observation)
        return KeltnerChannelResult(middle + width, middle, middle - width)

    def _reset(self):
        self.ema.reset()
        self.atr.reset()

    def __str__(self):
        return f"KC({self.period}, {self.multiplier:g})"


@register_indicator("ce")
class ChandelierExit(Indicator):
    """
    Chandelier Exit

    long exit  = highest high(period) - multiplier * ATR(period)
    short exit = lowest low(period) + multiplier * ATR(period)
    """

    DEFAULT = ChandelierExitResult(0.0, 0.0)

    def __init__(self, period: int = 22, multiplier: float = 3.0):
        super().__init__()
        self.period = validate_period(period)
        self.multiplier = validate_multiplier(multiplier)
        self.maximum = Maximum(self.period)
        self.minimum = Minimum(self.period)
        self.atr = AverageTrueRange(self.period)

    def _next(self, observation: RangeObservation) -> ChandelierExitResult:
        highest = self.maximum.feed(observation)
        lowest = self.minimum.feed(observation)
        width = self.multiplier * self.atr.feed(observation)
        return ChandelierExitResult(highest - width, lowest + width)

    def _reset(self):
        self.maximum.reset()
        self.minimum.reset()
        self.atr.reset()

    def __str__(self):
        return f"CE({self.period}, {self.multiplier:g})"


__all__ = [
    "BollingerBandsResult",
    "KeltnerChannelResult",
    "ChandelierExitResult",
    "TrueRange",
    "AverageTrueRange",
    "BollingerBands",
    "KeltnerChannel",
    "ChandelierExit",
]
