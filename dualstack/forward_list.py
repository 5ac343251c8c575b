"""Singly linked list of floats that grows and shrinks at the front."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: float) -> None:
        self.value = value
        self.next: _Node | None = None


class ForwardList:
    """Singly linked list; only the front element can be added, read or removed."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        tail: _Node | None = None
        for value in values:
            node = _Node(float(value))
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def push_front(self, value: float) -> None:
        """Put ``value`` in front of the current head."""
        node = _Node(float(value))
        node.next = self._head
        self._head = node
        self._size += 1

    def pop_front(self) -> None:
        """Remove the head element."""
        if self._head is None:
            raise IndexError("List is empty")
        self._head = self._head.next
        self._size -= 1

    def front(self) -> float:
        """Return the head element."""
        if self._head is None:
            raise IndexError("List is empty")
        return self._head.value

    def set_front(self, value: float) -> None:
        """Replace the head element with ``value``."""
        if self._head is None:
            raise IndexError("List is empty")
        self._head.value = float(value)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[float]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def copy(self) -> ForwardList:
        """Return an independent list with the same elements in the same order."""
        return ForwardList(self)