"""
Windowed Statistics

Rolling extremes and dispersion measures:

- Minimum / Maximum of lows / highs over the period
- Standard Deviation (population) of closes
- Mean Absolute Deviation of closes
"""

from ..base import (
    CloseObservation,
    HighObservation,
    Indicator,
    LowObservation,
    close_of,
    high_of,
    low_of,
)
from ..registry import register_indicator
from ..utils.math_utils import validate_period
from ..utils.rolling import (
    MonotonicMax,
    MonotonicMin,
    RollingMax,
    RollingMeanAbsoluteDeviation,
    RollingMin,
    RollingStd,
)


@register_indicator("min")
class Minimum(Indicator):
    """
    Lowest low over the last ``period`` observations

    Args:
        period: Window length
        rescan: Rescan the whole window on every feed instead of keeping a
            monotonic deque. Both return the same values.
    """

    def __init__(self, period: int = 14, rescan: bool = False):
        super().__init__()
        self.period = validate_period(period)
        self.rescan = rescan
        self.store = RollingMin(self.period) if rescan else MonotonicMin(self.period)

    def _next(self, observation: LowObservation) -> float:
        return self.store.push(low_of(observation))

    def _reset(self):
        self.store.reset()

    def __str__(self):
        return f"MIN({self.period})"


@register_indicator("max")
class Maximum(Indicator):
    """Highest high over the last ``period`` observations (see ``Minimum``)"""

    def __init__(self, period: int = 14, rescan: bool = False):
        super().__init__()
        self.period = validate_period(period)
        self.rescan = rescan
        self.store = RollingMax(self.period) if rescan else MonotonicMax(self.period)

    def _next(self, observation: HighObservation) -> float:
        return self.store.push(high_of(observation))

    def _reset(self):
        self.store.reset()

    def __str__(self):
        return f"MAX({self.period})"


@register_indicator("sd")
class StandardDeviation(Indicator):
    """Population standard deviation, 0 until two values are in the window"""

    def __init__(self, period: int = 9):
        super().__init__()
        self.period = validate_period(period)
        self.std = RollingStd(self.period)

    def _next(self, observation: CloseObservation) -> float:
        return self.std.push(close_of(observation))

    def _reset(self):
        self.std.reset()

    def __str__(self):
        return f"SD({self.period})"


@register_indicator("mad")
class MeanAbsoluteDeviation(Indicator):
    """Mean absolute deviation around the window mean"""

    def __init__(self, period: int = 9):
        super().__init__()
        self.period = validate_period(period)
        self.mad = RollingMeanAbsoluteDeviation(self.period)

    def _next(self, observation: CloseObservation) -> float:
        return self.mad.push(close_of(observation))

    def _reset(self):
        self.mad.reset()

    def __str__(self):
        return f"MAD({self.period})"


__all__ = [
    "Minimum",
    "Maximum",
    "StandardDeviation",
    "MeanAbsoluteDeviation",
]
