"""
Exceptions for the streaming indicator engine.

Construction is the only place errors are surfaced. Feeding an indicator
never raises for degenerate numeric input (flat windows, zero denominators);
those cases return documented fallback values instead.
"""

from typing import Any


class TaStreamError(Exception):
    """Base exception for all ta_stream errors."""
    pass


class InvalidPeriod(TaStreamError, ValueError):
    """Raised when a period is not a positive integer or dual periods are misordered."""

    def __init__(self, name: str, value: Any, reason: str = "must be an integer >= 1"):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")


class InvalidParameter(TaStreamError, ValueError):
    """Raised when a non-period parameter is out of range."""
    pass


class UnknownIndicator(TaStreamError, KeyError):
    """Raised when the factory is asked for an unregistered indicator."""

    def __str__(self):
        return str(self.args[0]) if self.args else "Unknown indicator"


class SnapshotError(TaStreamError):
    """Raised when a state snapshot cannot be restored."""
    pass
