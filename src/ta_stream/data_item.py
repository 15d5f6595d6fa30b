"""Plain OHLCV bar container with construction-time validation."""

import math
from dataclasses import dataclass

from .errors import InvalidParameter


@dataclass(frozen=True)
class DataItem:
    """
    Single OHLCV bar

    Satisfies the ``Bar`` protocol, so it can be fed to any indicator.
    Use ``DataItem.create`` to get validated instances; the plain
    constructor performs no checks.
    """
    open: float
    high: float
    low: float
    close: float
    volume: float

    @classmethod
    def create(
        cls,
        open: float,
        high: float,
        low: float,
        close: float,
        volume: float = 0.0
    ) -> "DataItem":
        """
        Build a bar after checking that its fields are consistent

        Raises:
            InvalidParameter: If a field is not finite, the low/high range does
                not contain open and close, or volume is negative
        """
        fields = {"open": open, "high": high, "low": low, "close": close, "volume": volume}
        for name, value in fields.items():
            if not math.isfinite(value):
                raise InvalidParameter(f"DataItem.{name} must be finite, got {value!r}")

        if not (low <= open <= high and low <= close <= high):
            raise InvalidParameter(
                f"Inconsistent bar: low={low}, open={open}, close={close}, high={high}"
            )
        if volume < 0:
            raise InvalidParameter(f"DataItem.volume must be >= 0, got {volume}")

        return cls(float(open), float(high), float(low), float(close), float(volume))
