"""
Moving Averages

Streaming moving averages over the close price (or a bare number):

- EMA: v_t = v_{t-1} + alpha * (x_t - v_{t-1}), alpha = 2 / (period + 1)
- SMA: mean of the last ``period`` values, partial mean while warming up
- WMA: Wilder moving average, alpha = 1 / period
- WEMA: EMA restricted to the last ``period`` values

All of them are seeded by the first observation.
"""

from ..base import CloseObservation, Indicator, close_of
from ..registry import register_indicator
from ..utils.math_utils import ema_alpha, smooth, validate_period, wilder_alpha
from ..utils.rolling import RollingSum, RollingWindow


class _SmoothedAverage(Indicator):
    """Single-state exponential smoother seeded with the first input"""

    label = ""

    def __init__(self, period: int, alpha: float):
        super().__init__()
        self.period = period
        self.alpha = alpha

    def _next(self, observation: CloseObservation) -> float:
        value = close_of(observation)
        if self.count == 0:
            return value
        return smooth(self._value, value, self.alpha)

    def _reset(self):
        pass

    def __str__(self):
        return f"{self.label}({self.period})"


@register_indicator("ema")
class ExponentialMovingAverage(_SmoothedAverage):
    """
    Exponential moving average (EMA)

    Example:
        ema = ExponentialMovingAverage(3)
        [ema.feed(x) for x in (2.0, 5.0, 1.0, 6.25)]  # [2.0, 3.5, 2.25, 4.25]
    """

    label = "EMA"

    def __init__(self, period: int = 9):
        period = validate_period(period)
        super().__init__(period, ema_alpha(period))


@register_indicator("wma")
class WilderMovingAverage(_SmoothedAverage):
    """Wilder's smoothed moving average, the smoother behind ATR and RSI"""

    label = "WMA"

    def __init__(self, period: int = 14):
        period = validate_period(period)
        super().__init__(period, wilder_alpha(period))


@register_indicator("sma")
class SimpleMovingAverage(Indicator):
    """Simple moving average (SMA) with a running sum"""

    def __init__(self, period: int = 9):
        super().__init__()
        self.period = validate_period(period)
        self.sum = RollingSum(self.period)

    def _next(self, observation: CloseObservation) -> float:
        self.sum.push(close_of(observation))
        return self.sum.mean

    def _reset(self):
        self.sum.reset()

    def __str__(self):
        return f"SMA({self.period})"


@register_indicator("wema")
class WindowedExponentialMovingAverage(Indicator):
    """
    Windowed exponential moving average (WEMA)

    Equals an EMA that was started on the oldest value still in the last
    ``period`` inputs. Once the window is full, each step applies the regular
    EMA update and then swaps the weight carried by the dropped value over to
    the oldest value kept:

        wsum += (oldest_kept - dropped) * (1 - alpha) ** period
    """

    def __init__(self, period: int = 9):
        super().__init__()
        self.period = validate_period(period)
        self.alpha = ema_alpha(self.period)
        self._factor = (1.0 - self.alpha) ** self.period
        self.window = RollingWindow(self.period)

    def _next(self, observation: CloseObservation) -> float:
        value = close_of(observation)
        dropped = self.window.push(value)
        if self.count == 0:
            return value

        wsum = smooth(self._value, value, self.alpha)
        if dropped is not None:
            wsum += (self.window[0] - dropped) * self._factor
        return wsum

    def _reset(self):
        self.window.clear()

    def __str__(self):
        return f"WEMA({self.period})"


__all__ = [
    "ExponentialMovingAverage",
    "SimpleMovingAverage",
    "WilderMovingAverage",
    "WindowedExponentialMovingAverage",
]
