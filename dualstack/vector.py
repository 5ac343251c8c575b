"""Growable array of floats with an explicit capacity and growth coefficient."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator


class Vector:
    """Dynamic array that tracks its capacity and grows it by a fixed coefficient."""

    def __init__(self, values: Iterable[float] = (), coef: float = 2.0) -> None:
        if coef <= 1.0:
            raise ValueError("coef must be greater than 1.0")
        self._data = [float(value) for value in values]
        self._capacity = len(self._data)
        self._coef = coef

    def _grown(self, capacity: int, minimum: int) -> int:
        return max(int(capacity * self._coef), minimum)

    def push_back(self, value: float) -> None:
        """Append ``value`` at the end."""
        size = len(self._data)
        if size == self._capacity:
            self._capacity = self._grown(max(self._capacity, 1), size + 1)
        self._data.append(float(value))

    def push_front(self, value: float) -> None:
        """Insert ``value`` at the start."""
        size = len(self._data)
        if self._capacity == 0:
            self._capacity = int(self._coef)
        if self._capacity == size:
            self._capacity = self._grown(self._capacity, size + 1)
        self._data.insert(0, float(value))

    def insert(self, value: float, pos: int) -> None:
        """Insert ``value`` at ``pos``; a position past the end is ignored."""
        size = len(self._data)
        if not 0 <= pos <= size:
            return
        if size == self._capacity:
            self._capacity = self._grown(self._capacity, size + 1)
        self._data.insert(pos, float(value))

    def insert_values(self, values: Iterable[float], pos: int) -> None:
        """Insert all ``values`` starting at ``pos``; a position past the end is ignored."""
        items = [float(value) for value in values]
        if not 0 <= pos <= len(self._data):
            return
        new_size = len(self._data) + len(items)
        capacity = self._capacity
        while new_size >= capacity:
            capacity = max(int(capacity * self._coef), capacity + 1)
        self._capacity = capacity
        self._data[pos:pos] = items

    def pop_back(self) -> None:
        """Remove the last element."""
        if not self._data:
            raise IndexError("Vector is empty")
        self._data.pop()

    def pop_front(self) -> None:
        """Remove the first element."""
        if not self._data:
            raise IndexError("Vector is empty")
        del self._data[0]

    def erase(self, pos: int, count: int = 1) -> None:
        """Remove up to ``count`` elements starting at ``pos``."""
        if pos >= len(self._data):
            return
        del self._data[pos:pos + count]

    def erase_between(self, begin_pos: int, end_pos: int) -> None:
        """Remove the elements in ``[begin_pos, end_pos)``.

        An end before the beginning removes everything from ``begin_pos`` on.
        """
        count = end_pos - begin_pos
        if count < 0:
            count = len(self._data)
        self.erase(begin_pos, count)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, idx: int) -> float:
        return self._data[operator.index(idx)]

    def __setitem__(self, idx: int, value: float) -> None:
        self._data[operator.index(idx)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Vector({self._data!r}, coef={self._coef!r})"

    def capacity(self) -> int:
        """Number of elements that fit before the storage must grow."""
        return self._capacity

    def load_factor(self) -> float:
        """Ratio of size to capacity, or 0.0 when there is no capacity."""
        return len(self._data) / self._capacity if self._capacity > 0 else 0.0

    def reserve(self, capacity: int) -> None:
        """Raise the capacity to ``capacity`` if it is larger than the current one."""
        if capacity > self._capacity:
            self._capacity = capacity

    def shrink_to_fit(self) -> None:
        """Lower the capacity to the current size."""
        if len(self._data) < self._capacity:
            self._capacity = len(self._data)

    def copy(self) -> Vector:
        """Return an independent vector whose capacity equals its size."""
        return Vector(self._data, self._coef)