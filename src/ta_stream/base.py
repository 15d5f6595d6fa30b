"""
Indicator contract and observation access.

Every indicator, primitive or composite, is fed one observation at a time
through the same three operations:

- ``feed(observation)`` consumes an observation and returns the new value
- ``current()`` returns the latest value without consuming input
- ``reset()`` restores the post-construction state in place

An observation is either a bare real number or a bar exposing numeric
``open``, ``high``, ``low``, ``close`` and ``volume`` fields (as attributes
or mapping keys). Each indicator reads only the fields it needs; a bare
number stands for a bar whose open, high, low and close are all equal.
"""

import numbers
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, Union, runtime_checkable


@runtime_checkable
class HasOpen(Protocol):
    open: float


@runtime_checkable
class HasHigh(Protocol):
    high: float


@runtime_checkable
class HasLow(Protocol):
    low: float


@runtime_checkable
class HasClose(Protocol):
    close: float


@runtime_checkable
class HasVolume(Protocol):
    volume: float


@runtime_checkable
class HasHighLowClose(HasHigh, HasLow, HasClose, Protocol):
    """Price range plus close: true range, stochastic, typical price"""


@runtime_checkable
class HasCloseVolume(HasClose, HasVolume, Protocol):
    pass


@runtime_checkable
class HasHighLowCloseVolume(HasHighLowClose, HasVolume, Protocol):
    pass


@runtime_checkable
class Bar(HasOpen, HasHigh, HasLow, HasClose, HasVolume, Protocol):
    """Full OHLCV bar"""


# What each indicator reads. Mappings with the same keys are accepted too;
# bare numbers stand for a bar with equal open, high, low and close.
FieldMapping = Mapping[str, float]
OpenObservation = Union[float, HasOpen, FieldMapping]
HighObservation = Union[float, HasHigh, FieldMapping]
LowObservation = Union[float, HasLow, FieldMapping]
CloseObservation = Union[float, HasClose, FieldMapping]
RangeObservation = Union[float, HasHighLowClose, FieldMapping]
VolumeObservation = Union[HasCloseVolume, FieldMapping]
MoneyFlowObservation = Union[HasHighLowCloseVolume, FieldMapping]


def _field(observation: Any, name: str) -> float:
    if isinstance(observation, numbers.Real):
        return float(observation)
    if isinstance(observation, Mapping):
        return float(observation[name])
    return float(getattr(observation, name))


def open_of(observation: OpenObservation) -> float:
    return _field(observation, "open")


def high_of(observation: HighObservation) -> float:
    return _field(observation, "high")


def low_of(observation: LowObservation) -> float:
    return _field(observation, "low")


def close_of(observation: CloseObservation) -> float:
    return _field(observation, "close")


def volume_of(observation: Union[HasVolume, FieldMapping]) -> float:
    """Volume of a bar; bare numbers carry no volume"""
    if isinstance(observation, numbers.Real):
        raise TypeError(
            f"{type(observation).__name__} observation has no volume field; "
            "feed a bar exposing 'volume'"
        )
    return _field(observation, "volume")


class Indicator(ABC):
    """
    Base class for streaming indicators

    Subclasses implement ``_next`` (compute the value for one observation and
    update state) and ``_reset`` (restore the empty state of every field they
    own). ``DEFAULT`` is the value reported before the first feed.
    """

    DEFAULT: Any = 0.0

    def __init__(self):
        self.count = 0
        self._value = self.DEFAULT

    @abstractmethod
    def _next(self, observation: Any) -> Any:
        ...

    @abstractmethod
    def _reset(self):
        ...

    def feed(self, observation: Any) -> Any:
        """Consume one observation and return the updated value"""
        self._value = self._next(observation)
        self.count += 1
        return self._value

    def current(self) -> Any:
        """Value after the most recent feed, or DEFAULT if never fed"""
        return self._value

    def reset(self):
        """Discard all history and return to the post-construction state"""
        self._reset()
        self.count = 0
        self._value = self.DEFAULT

    def __str__(self):
        return type(self).__name__

    def __repr__(self):
        return f"<{self} value={self._value!r}>"


__all__ = [
    "HasOpen",
    "HasHigh",
    "HasLow",
    "HasClose",
    "HasVolume",
    "HasHighLowClose",
    "HasCloseVolume",
    "HasHighLowCloseVolume",
    "Bar",
    "OpenObservation",
    "HighObservation",
    "LowObservation",
    "CloseObservation",
    "RangeObservation",
    "VolumeObservation",
    "MoneyFlowObservation",
    "open_of",
    "high_of",
    "low_of",
    "close_of",
    "volume_of",
    "Indicator",
]
