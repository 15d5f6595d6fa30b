"""
Volume Indicators Module

Streaming volume-based indicators. Both require observations exposing a
``volume`` field; bare numbers are rejected with TypeError.

Available indicators:
- On-Balance Volume (OBV)
- Money Flow Index (MFI)
"""

from typing import Optional

from ..base import (
    Indicator,
    MoneyFlowObservation,
    VolumeObservation,
    close_of,
    high_of,
    low_of,
    volume_of,
)
from ..registry import register_indicator
from ..utils.math_utils import validate_period
from ..utils.rolling import RollingSum


@register_indicator("obv")
class OnBalanceVolume(Indicator):
    """
    On-Balance Volume (OBV)

    Starts at the first bar's volume, then adds the volume of bars closing
    higher than the previous close, subtracts it for bars closing lower, and
    stays unchanged on equal closes.

    Example:
        closes [10, 12, 12, 9], volumes [100, 50, 30, 20] -> 100, 150, 150, 130
    """

    def __init__(self):
        super().__init__()
        self._prev_close: Optional[float] = None

    def _next(self, observation: VolumeObservation) -> float:
        close = close_of(observation)
        volume = volume_of(observation)

        if self._prev_close is None:
            obv = volume
        elif close > self._prev_close:
            obv = self._value + volume
        elif close < self._prev_close:
            obv = self._value - volume
        else:
            obv = self._value

        self._prev_close = close
        return obv

    def _reset(self):
        self._prev_close = None

    def __str__(self):
        return "OBV"


@register_indicator("mfi")
class MoneyFlowIndex(Indicator):
    """
    Money Flow Index (MFI)

    typical price TP = (high + low + close) / 3, raw money flow = TP * volume.
    A bar's flow counts as positive when TP rose from the previous bar and as
    negative when it fell; unchanged TP contributes to neither side.

    MFI = 100 - 100 / (1 + positive_sum / negative_sum) over ``period`` flows.

    Edge values:
    - 50 on the first bar, before any typical-price change exists
    - 100 whenever the negative sum is 0, including a flat window
    """

    DEFAULT = 50.0

    def __init__(self, period: int = 14):
        super().__init__()
        self.period = validate_period(period)
        self.positive_flow = RollingSum(self.period)
        self.negative_flow = RollingSum(self.period)
        # counts of non-zero flows, exact where running float sums may keep residue
        self.positive_count = RollingSum(self.period)
        self.negative_count = RollingSum(self.period)
        self._prev_typical_price: Optional[float] = None

    def _next(self, observation: MoneyFlowObservation) -> float:
        typical_price = (high_of(observation) + low_of(observation) + close_of(observation)) / 3.0
        money_flow = typical_price * volume_of(observation)

        previous = self._prev_typical_price
        self._prev_typical_price = typical_price
        if previous is None:
            return 50.0

        rising = typical_price > previous
        falling = typical_price < previous
        positive = self.positive_flow.push(money_flow if rising else 0.0)
        negative = self.negative_flow.push(money_flow if falling else 0.0)
        if self.positive_count.push(1.0 if rising else 0.0) == 0:
            positive = 0.0
        if self.negative_count.push(1.0 if falling else 0.0) == 0:
            negative = 0.0
        positive = max(positive, 0.0)
        negative = max(negative, 0.0)

        if negative == 0.0:
            return 100.0
        return 100.0 - 100.0 / (1.0 + positive / negative)

    def _reset(self):
        self.positive_flow.reset()
        self.negative_flow.reset()
        self.positive_count.reset()
        self.negative_count.reset()
        self._prev_typical_price = None

    def __str__(self):
        return f"MFI({self.period})"


__all__ = [
    "OnBalanceVolume",
    "MoneyFlowIndex",
]
