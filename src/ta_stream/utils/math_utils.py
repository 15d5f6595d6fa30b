"""
Mathematical Utilities Module

Scalar recurrence primitives shared by the streaming indicators.

Features:
- Smoothing constants (exponential and Wilder)
- Single-step exponential smoothing
- Safe division with a defined fallback
- Construction-time parameter validation
"""

import math
import numbers
from typing import Union

import numpy as np

from ..errors import InvalidParameter, InvalidPeriod

# Denominators smaller than this are treated as zero
ZERO_TOLERANCE = 1e-15


def ema_alpha(period: int) -> float:
    """Exponential smoothing constant: 2 / (period + 1)"""
    return 2.0 / (period + 1)


def wilder_alpha(period: int) -> float:
    """Wilder smoothing constant: 1 / period"""
    return 1.0 / period


def smooth(previous: float, value: float, alpha: float) -> float:
    """
    One step of exponential smoothing

    Formula: v_t = v_{t-1} + alpha * (x_t - v_{t-1})

    Args:
        previous: Previous smoothed value
        value: Incoming observation
        alpha: Smoothing constant in (0, 1]

    Returns:
        New smoothed value
    """
    return previous + alpha * (value - previous)


def safe_divide(
    numerator: float,
    denominator: float,
    default: float = 0.0
) -> float:
    """
    Safe division operation that handles division by zero

    Args:
        numerator: Numerator value
        denominator: Denominator value
        default: Value returned when the denominator is zero

    Returns:
        Division result or default value
    """
    if abs(denominator) < ZERO_TOLERANCE:
        return default
    return numerator / denominator


def validate_period(value: Union[int, np.integer], name: str = "period") -> int:
    """
    Validate a window length or smoothing horizon

    Args:
        value: Candidate period
        name: Parameter name used in the error message

    Returns:
        The period as a plain int

    Raises:
        InvalidPeriod: If value is not an integer >= 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidPeriod(name, value)
    if value < 1:
        raise InvalidPeriod(name, value)
    return int(value)


def validate_multiplier(value: float, name: str = "multiplier") -> float:
    """
    Validate a band width multiplier

    Raises:
        InvalidParameter: If value is negative, not a number or not finite
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"Invalid {name}={value!r}: must be a real number")
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise InvalidParameter(f"Invalid {name}={value!r}: must be finite and >= 0")
    return value


__all__ = [
    "ZERO_TOLERANCE",
    "ema_alpha",
    "wilder_alpha",
    "smooth",
    "safe_divide",
    "validate_period",
    "validate_multiplier",
]
