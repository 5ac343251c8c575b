"""Stacks of floats backed by a growable vector or a singly linked list."""

__version__ = "0.1.0"
__all__ = ["forward_list", "vector", "stack_implementation", "stack"]