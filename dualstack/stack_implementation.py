"""Stack back ends built on a vector or on a forward list."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from dualstack.forward_list import ForwardList
from dualstack.vector import Vector

_EMPTY_MESSAGE = "Stack is empty"

_Self = TypeVar("_Self", bound="StackImplementation")


class StackImplementation(ABC):
    """Operations every stack back end provides."""

    _items: Vector | ForwardList

    @abstractmethod
    def push(self, value: float) -> None:
        """Put ``value`` on top."""

    @abstractmethod
    def pop(self) -> None:
        """Remove the top element."""

    @abstractmethod
    def top(self) -> float:
        """Return the top element."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the stack holds no elements."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements."""

    @abstractmethod
    def copy(self) -> StackImplementation:
        """Return an independent copy."""

    def _require_items(self) -> None:
        if self.is_empty():
            raise IndexError(_EMPTY_MESSAGE)

    def _clone(self: _Self) -> _Self:
        duplicate = type(self)()
        duplicate._items = self._items.copy()
        return duplicate


class VectorStack(StackImplementation):
    """Stack whose top is the end of a vector."""

    def __init__(self) -> None:
        self._items = Vector()

    def push(self, value: float) -> None:
        self._items.push_back(value)

    def pop(self) -> None:
        self._require_items()
        self._items.pop_back()

    def top(self) -> float:
        self._require_items()
        return self._items[len(self._items) - 1]

    def is_empty(self) -> bool:
        return not len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def copy(self) -> VectorStack:
        return self._clone()


class ListStack(StackImplementation):
    """Stack whose top is the head of a forward list."""

    def __init__(self) -> None:
        self._items = ForwardList()

    def push(self, value: float) -> None:
        self._items.push_front(value)

    def pop(self) -> None:
        self._require_items()
        self._items.pop_front()

    def top(self) -> float:
        return self._items.front()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def copy(self) -> ListStack:
        return self._clone()


def create_vector_stack() -> VectorStack:
    """Return an empty vector-backed stack."""
    return VectorStack()


def create_list_stack() -> ListStack:
    """Return an empty list-backed stack."""
    return ListStack()