"""Stack whose storage is chosen between a vector and a forward list."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from dualstack.stack_implementation import (
    StackImplementation,
    create_list_stack,
    create_vector_stack,
)


class StackContainer(Enum):
    """Container a stack keeps its elements in."""

    VECTOR = 0
    LIST = 1


_FACTORIES = {
    StackContainer.VECTOR: create_vector_stack,
    StackContainer.LIST: create_list_stack,
}


class Stack:
    """Last-in first-out stack of floats."""

    def __init__(
        self,
        values: Iterable[float] = (),
        container: StackContainer = StackContainer.VECTOR,
    ) -> None:
        try:
            factory = _FACTORIES[container]
        except (KeyError, TypeError):
            raise ValueError("Unknown container type") from None
        self._container = container
        self._impl: StackImplementation = factory()
        for value in values:
            self.push(value)

    def push(self, value: float) -> None:
        """Put ``value`` on top."""
        self._impl.push(value)

    def pop(self) -> None:
        """Remove the top element."""
        self._impl.pop()

    def top(self) -> float:
        """Return the top element."""
        return self._impl.top()

    def is_empty(self) -> bool:
        """Whether the stack holds no elements."""
        return self._impl.is_empty()

    def __len__(self) -> int:
        return len(self._impl)

    def __repr__(self) -> str:
        return f"Stack(size={len(self)}, container={self._container.name})"

    @property
    def container(self) -> StackContainer:
        """The container the elements are stored in."""
        return self._container

    def copy(self) -> Stack:
        """Return an independent stack with the same elements and container."""
        duplicate = Stack(container=self._container)
        duplicate._impl = self._impl.copy()
        return duplicate