"""
Rolling Window Store and Windowed Aggregates

Fixed-capacity FIFO storage for the last N observations plus the rolling
statistics built on top of it. Every windowed indicator holds one or more of
these objects and never touches another indicator's window.

Available aggregates:
- RollingSum (sum and partial-window mean, maintained incrementally)
- RollingMin / RollingMax (full rescan on every push)
- MonotonicMin / MonotonicMax (monotonic deque, O(1) amortized)
- RollingStd (population standard deviation)
- RollingMeanAbsoluteDeviation

Before a window is full, statistics are computed over the partial window
instead of padding with zeros.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterator, Optional

import numpy as np

from .math_utils import validate_period


class RollingWindow:
    """
    Ring buffer holding the most recent ``capacity`` values

    Storage is a numpy array allocated once at construction. While the window
    is filling, values occupy slots ``0..len-1`` in insertion order; once full,
    the oldest slot is overwritten on each push.
    """

    def __init__(self, capacity: int):
        self.capacity = validate_period(capacity, "capacity")
        self._buffer = np.zeros(self.capacity, dtype=np.float64)
        self._start = 0
        self._length = 0

    def push(self, value: float) -> Optional[float]:
        """
        Append a value, evicting the oldest one if the window is full

        Returns:
            The evicted value, or None while the window is still filling
        """
        if self._length == self.capacity:
            evicted = float(self._buffer[self._start])
            self._buffer[self._start] = value
            self._start = (self._start + 1) % self.capacity
            return evicted

        self._buffer[self._length] = value
        self._length += 1
        return None

    def is_full(self) -> bool:
        return self._length == self.capacity

    def clear(self):
        """Drop all values without reallocating the buffer"""
        self._buffer.fill(0.0)
        self._start = 0
        self._length = 0

    @property
    def data(self) -> np.ndarray:
        """Filled slots of the backing array, not in insertion order once full"""
        return self._buffer[:self._length]

    def values(self) -> np.ndarray:
        """Copy of the current contents, oldest first"""
        if self._start == 0:
            return self._buffer[:self._length].copy()
        return np.concatenate((self._buffer[self._start:], self._buffer[:self._start]))

    def __getitem__(self, index: int) -> float:
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("RollingWindow index out of range")
        return float(self._buffer[(self._start + index) % self.capacity])

    def __iter__(self) -> Iterator[float]:
        for i in range(self._length):
            yield float(self._buffer[(self._start + i) % self.capacity])

    def __len__(self) -> int:
        return self._length

    def __repr__(self):
        return f"RollingWindow(capacity={self.capacity}, size={self._length})"


class RollingSum:
    """Running sum over the last ``period`` values"""

    def __init__(self, period: int):
        self.window = RollingWindow(period)
        self.total = 0.0

    @property
    def period(self) -> int:
        return self.window.capacity

    def push(self, value: float) -> float:
        value = float(value)
        evicted = self.window.push(value)
        self.total += value
        if evicted is not None:
            self.total -= evicted
        return self.total

    @property
    def current(self) -> float:
        return self.total

    @property
    def mean(self) -> float:
        if not self.window:
            return 0.0
        return self.total / len(self.window)

    def reset(self):
        self.window.clear()
        self.total = 0.0


class _RescanExtremum(ABC):
    """Extremum recomputed from the whole window on every push (O(period))"""

    def __init__(self, period: int):
        self.window = RollingWindow(period)
        self.value = 0.0

    @property
    def period(self) -> int:
        return self.window.capacity

    @abstractmethod
    def _reduce(self, data: np.ndarray) -> float:
        ...

    def push(self, value: float) -> float:
        self.window.push(value)
        self.value = float(self._reduce(self.window.data))
        return self.value

    @property
    def current(self) -> float:
        return self.value

    def reset(self):
        self.window.clear()
        self.value = 0.0


class RollingMin(_RescanExtremum):
    def _reduce(self, data: np.ndarray) -> float:
        return data.min()


class RollingMax(_RescanExtremum):
    def _reduce(self, data: np.ndarray) -> float:
        return data.max()


class _MonotonicExtremum(ABC):
    """
    Extremum tracked with a monotonic deque (O(1) amortized)

    The deque holds (sequence number, value) pairs whose values are strictly
    ordered from front to back; the front is the extremum of the window.
    Ties keep the newest entry, which yields the same value as a rescan.
    """

    def __init__(self, period: int):
        self.capacity = validate_period(period)
        self._entries = deque()
        self._sequence = 0
        self.value = 0.0

    @property
    def period(self) -> int:
        return self.capacity

    @abstractmethod
    def _dominates(self, new: float, old: float) -> bool:
        """True if ``new`` makes ``old`` unable to become the extremum"""

    def push(self, value: float) -> float:
        value = float(value)
        entries = self._entries
        while entries and self._dominates(value, entries[-1][1]):
            entries.pop()
        entries.append((self._sequence, value))

        # drop the front once it falls out of the window
        if entries[0][0] <= self._sequence - self.capacity:
            entries.popleft()

        self._sequence += 1
        self.value = entries[0][1]
        return self.value

    @property
    def current(self) -> float:
        return self.value

    def reset(self):
        self._entries.clear()
        self._sequence = 0
        self.value = 0.0


class MonotonicMin(_MonotonicExtremum):
    def _dominates(self, new: float, old: float) -> bool:
        return new <= old


class MonotonicMax(_MonotonicExtremum):
    def _dominates(self, new: float, old: float) -> bool:
        return new >= old


class RollingStd:
    """Population standard deviation, 0 with fewer than two values or a flat window"""

    def __init__(self, period: int):
        self.window = RollingWindow(period)
        self.value = 0.0

    @property
    def period(self) -> int:
        return self.window.capacity

    def push(self, value: float) -> float:
        self.window.push(value)
        data = self.window.data
        # a flat window is exactly 0; np.mean leaves residue at large magnitudes
        if len(data) <= 1 or data.max() == data.min():
            self.value = 0.0
        else:
            mean = data.mean()
            self.value = float(np.sqrt(np.mean((data - mean) ** 2)))
        return self.value

    @property
    def current(self) -> float:
        return self.value

    def reset(self):
        self.window.clear()
        self.value = 0.0


class RollingMeanAbsoluteDeviation:
    """Mean of |x - mean| over the window, exactly 0 for a flat window"""

    def __init__(self, period: int):
        self.window = RollingWindow(period)
        self.value = 0.0

    @property
    def period(self) -> int:
        return self.window.capacity

    def push(self, value: float) -> float:
        self.window.push(value)
        data = self.window.data
        if data.max() == data.min():
            self.value = 0.0
        else:
            self.value = float(np.mean(np.abs(data - data.mean())))
        return self.value

    @property
    def current(self) -> float:
        return self.value

    def reset(self):
        self.window.clear()
        self.value = 0.0


__all__ = [
    "RollingWindow",
    "RollingSum",
    "RollingMin",
    "RollingMax",
    "MonotonicMin",
    "MonotonicMax",
    "RollingStd",
    "RollingMeanAbsoluteDeviation",
]
