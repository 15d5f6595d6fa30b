"""
Technical Indicators - Momentum and Oscillators

Streaming momentum indicators composed from the moving-average and
windowed-statistics primitives. Each composite owns its constituents and
only reads their freshly fed values.

Available indicators:
- MACD and PPO (fast/slow EMA spread plus signal EMA)
- RSI (Wilder-smoothed gains and losses)
- Fast and Slow Stochastic
- CCI (typical price against its SMA and mean absolute deviation)
- ROC (lagged close comparison)
- Efficiency Ratio (net change over path length)

Degenerate denominators never raise: flat Stochastic windows give %K = 0,
a zero MAD gives CCI = 0, a zero slow EMA gives a PPO line of 0.
"""

from abc import abstractmethod
from typing import NamedTuple, Optional

from ..base import CloseObservation, Indicator, RangeObservation, close_of, high_of, low_of
from ..errors import InvalidPeriod
from ..registry import register_indicator
from ..utils.math_utils import safe_divide, validate_period
from ..utils.rolling import RollingSum, RollingWindow
from .moving_average import ExponentialMovingAverage, SimpleMovingAverage, WilderMovingAverage
from .statistics import Maximum, MeanAbsoluteDeviation, Minimum

# Lambert's constant scaling CCI so that most values fall within +/-100
CCI_CONSTANT = 0.015


# Result types for type safety
class MACDResult(NamedTuple):
    """MACD calculation result"""
    macd_line: float
    signal_line: float
    histogram: float


class PPOResult(NamedTuple):
    """PPO calculation result"""
    ppo_line: float
    signal_line: float
    histogram: float


class StochasticResult(NamedTuple):
    """Stochastic Oscillator result"""
    percent_k: float
    percent_d: float


def _validate_fast_slow(fast_period: int, slow_period: int, signal_period: int):
    fast_period = validate_period(fast_period, "fast_period")
    slow_period = validate_period(slow_period, "slow_period")
    signal_period = validate_period(signal_period, "signal_period")
    if fast_period >= slow_period:
        raise InvalidPeriod(
            "fast_period", fast_period,
            f"must be less than slow_period={slow_period}"
        )
    return fast_period, slow_period, signal_period


class _SpreadOscillator(Indicator):
    """Fast/slow EMA spread with a signal EMA of the spread"""

    label = ""
    result_type = MACDResult

    def __init__(self, fast_period: int, slow_period: int, signal_period: int):
        super().__init__()
        self.fast_period, self.slow_period, self.signal_period = _validate_fast_slow(
            fast_period, slow_period, signal_period
        )
        self.fast_ema = ExponentialMovingAverage(self.fast_period)
        self.slow_ema = ExponentialMovingAverage(self.slow_period)
        self.signal_ema = ExponentialMovingAverage(self.signal_period)

    @abstractmethod
    def _spread(self, fast: float, slow: float) -> float:
        ...

    def _next(self, observation: CloseObservation):
        price = close_of(observation)
        line = self._spread(self.fast_ema.feed(price), self.slow_ema.feed(price))
        signal = self.signal_ema.feed(line)
        return self.result_type(line, signal, line - signal)

    def _reset(self):
        self.fast_ema.reset()
        self.slow_ema.reset()
        self.signal_ema.reset()

    def __str__(self):
        return f"{self.label}({self.fast_period}, {self.slow_period}, {self.signal_period})"


@register_indicator("macd")
class MovingAverageConvergenceDivergence(_SpreadOscillator):
    """
    Moving Average Convergence Divergence (MACD)

    macd_line = EMA(fast) - EMA(slow)
    signal_line = EMA(signal) of macd_line
    histogram = macd_line - signal_line
    """

    label = "MACD"
    result_type = MACDResult
    DEFAULT = MACDResult(0.0, 0.0, 0.0)

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9):
        super().__init__(fast_period, slow_period, signal_period)

    def _spread(self, fast: float, slow: float) -> float:
        return fast - slow


@register_indicator("ppo")
class PercentagePriceOscillator(_SpreadOscillator):
    """
    Percentage Price Oscillator (PPO)

    ppo_line = (EMA(fast) - EMA(slow)) / EMA(slow) * 100, 0 when EMA(slow) is 0
    """

    label = "PPO"
    result_type = PPOResult
    DEFAULT = PPOResult(0.0, 0.0, 0.0)

    def __init__(self, fast_period: int = 12, slow_period: int = 26, signal_period: int = 9):
        super().__init__(fast_period, slow_period, signal_period)

    def _spread(self, fast: float, slow: float) -> float:
        return safe_divide(fast - slow, slow) * 100.0


@register_indicator("rsi")
class RelativeStrengthIndex(Indicator):
    """
    Relative Strength Index (RSI)

    Average gain and loss are Wilder-smoothed, seeded by the first close
    difference. RSI = 100 - 100 / (1 + avg_gain / avg_loss).

    Edge values:
    - 50 before the first difference is available
    - 100 when avg_loss is 0 and avg_gain > 0
    - 50 when both averages are 0
    """

    DEFAULT = 50.0

    def __init__(self, period: int = 14):
        super().__init__()
        self.period = validate_period(period)
        self.average_gain = WilderMovingAverage(self.period)
        self.average_loss = WilderMovingAverage(self.period)
        self._prev_close: Optional[float] = None

    def _next(self, observation: CloseObservation) -> float:
        close = close_of(observation)
        if self._prev_close is None:
            self._prev_close = close
            return 50.0

        change = close - self._prev_close
        self._prev_close = close
        gain = self.average_gain.feed(max(change, 0.0))
        loss = self.average_loss.feed(max(-change, 0.0))

        if loss == 0.0:
            return 100.0 if gain > 0.0 else 50.0
        return 100.0 - 100.0 / (1.0 + gain / loss)

    def _reset(self):
        self.average_gain.reset()
        self.average_loss.reset()
        self._prev_close = None

    def __str__(self):
        return f"RSI({self.period})"


@register_indicator("fast_stoch")
class FastStochastic(Indicator):
    """
    Fast Stochastic Oscillator

    %K = 100 * (close - lowest low) / (highest high - lowest low) over
    ``period``, 0 for a flat window. %D = SMA(d_period) of %K.
    """

    DEFAULT = StochasticResult(0.0, 0.0)

    def __init__(self, period: int = 14, d_period: int = 3):
        super().__init__()
        self.period = validate_period(period)
        self.d_period = validate_period(d_period, "d_period")
        self.minimum = Minimum(self.period)
        self.maximum = Maximum(self.period)
        self.d_sma = SimpleMovingAverage(self.d_period)

    def _next(self, observation: RangeObservation) -> StochasticResult:
        lowest = self.minimum.feed(observation)
        highest = self.maximum.feed(observation)
        close = close_of(observation)

        percent_k = safe_divide(100.0 * (close - lowest), highest - lowest)
        return StochasticResult(percent_k, self.d_sma.feed(percent_k))

    def _reset(self):
        self.minimum.reset()
        self.maximum.reset()
        self.d_sma.reset()

    def __str__(self):
        return f"FAST_STOCH({self.period}, {self.d_period})"


@register_indicator("slow_stoch")
class SlowStochastic(Indicator):
    """
    Slow Stochastic Oscillator

    slow %K = SMA(k_smoothing) of fast %K
    slow %D = SMA(d_period) of slow %K
    """

    DEFAULT = StochasticResult(0.0, 0.0)

    def __init__(self, period: int = 14, k_smoothing: int = 3, d_period: int = 3):
        super().__init__()
        self.period = validate_period(period)
        self.k_smoothing = validate_period(k_smoothing, "k_smoothing")
        self.d_period = validate_period(d_period, "d_period")
        # fast %D over k_smoothing is exactly the slow %K
        self.fast = FastStochastic(self.period, self.k_smoothing)
        self.d_sma = SimpleMovingAverage(self.d_period)

    def _next(self, observation: RangeObservation) -> StochasticResult:
        slow_k = self.fast.feed(observation).percent_d
        return StochasticResult(slow_k, self.d_sma.feed(slow_k))

    def _reset(self):
        self.fast.reset()
        self.d_sma.reset()

    def __str__(self):
        return f"SLOW_STOCH({self.period}, {self.k_smoothing}, {self.d_period})"


@register_indicator("cci")
class CommodityChannelIndex(Indicator):
    """
    Commodity Channel Index (CCI)

    typical price = (high + low + close) / 3
    CCI = (TP - SMA(TP)) / (0.015 * MAD(TP)), 0 when MAD is 0
    """

    def __init__(self, period: int = 20):
        super().__init__()
        self.period = validate_period(period)
        self.sma = SimpleMovingAverage(self.period)
        self.mad = MeanAbsoluteDeviation(self.period)

    def _next(self, observation: RangeObservation) -> float:
        typical_price = (high_of(observation) + low_of(observation) + close_of(observation)) / 3.0
        mean = self.sma.feed(typical_price)
        deviation = self.mad.feed(typical_price)
        return safe_divide(typical_price - mean, CCI_CONSTANT * deviation)

    def _reset(self):
        self.sma.reset()
        self.mad.reset()

    def __str__(self):
        return f"CCI({self.period})"


@register_indicator("roc")
class RateOfChange(Indicator):
    """
    Rate of Change (ROC)

    ROC = (close_t - close_{t-period}) / close_{t-period} * 100

    Reported as 0 until period + 1 closes have been seen and whenever the
    lagged close is 0.
    """

    def __init__(self, period: int = 9):
        super().__init__()
        self.period = validate_period(period)
        self.closes = RollingWindow(self.period + 1)

    def _next(self, observation: CloseObservation) -> float:
        close = close_of(observation)
        self.closes.push(close)
        if not self.closes.is_full():
            return 0.0

        lagged = self.closes[0]
        return safe_divide(close - lagged, lagged) * 100.0

    def _reset(self):
        self.closes.clear()

    def __str__(self):
        return f"ROC({self.period})"


@register_indicator("er")
class EfficiencyRatio(Indicator):
    """
    Kaufman Efficiency Ratio

    ER = |close_t - close_{t-period}| / sum(|close_i - close_{i-1}|)

    Ranges from 0 (pure noise) to 1 (straight line). While warming up the
    ratio is taken over the closes seen so far; it is 0 when the path length
    is 0.
    """

    def __init__(self, period: int = 14):
        super().__init__()
        self.period = validate_period(period)
        self.closes = RollingWindow(self.period + 1)
        self.path = RollingSum(self.period)

    def _next(self, observation: CloseObservation) -> float:
        close = close_of(observation)
        if self.closes:
            self.path.push(abs(close - self.closes[-1]))
        self.closes.push(close)

        return safe_divide(abs(close - self.closes[0]), self.path.total)

    def _reset(self):
        self.closes.clear()
        self.path.reset()

    def __str__(self):
        return f"ER({self.period})"


__all__ = [
    "MACDResult",
    "PPOResult",
    "StochasticResult",
    "MovingAverageConvergenceDivergence",
    "PercentagePriceOscillator",
    "RelativeStrengthIndex",
    "FastStochastic",
    "SlowStochastic",
    "CommodityChannelIndex",
    "RateOfChange",
    "EfficiencyRatio",
]
