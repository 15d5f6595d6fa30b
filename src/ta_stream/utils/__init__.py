"""Numeric building blocks: scalar recurrences and rolling windows."""

from .math_utils import (
    ema_alpha,
    wilder_alpha,
    smooth,
    safe_divide,
    validate_period,
    validate_multiplier,
)

from .rolling import (
    RollingWindow,
    RollingSum,
    RollingMin,
    RollingMax,
    MonotonicMin,
    MonotonicMax,
    RollingStd,
    RollingMeanAbsoluteDeviation,
)

__all__ = [
    # Scalar recurrences
    "ema_alpha",
    "wilder_alpha",
    "smooth",
    "safe_divide",
    "validate_period",
    "validate_multiplier",

    # Rolling windows
    "RollingWindow",
    "RollingSum",
    "RollingMin",
    "RollingMax",
    "MonotonicMin",
    "MonotonicMax",
    "RollingStd",
    "RollingMeanAbsoluteDeviation",
]
