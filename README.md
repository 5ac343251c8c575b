# dualstack

A small library of containers for floating-point values:

- `dualstack.vector.Vector` is a growable array that keeps track of its
  capacity and grows it by a fixed coefficient.
- `dualstack.forward_list.ForwardList` is a singly linked list that is added
  to, read and removed from at the front.
- `dualstack.stack.Stack` is a last-in, first-out stack that keeps its values
  in either of these. You choose which one when you create the stack.

The package has no dependencies beyond the standard library. The tests use
pytest and hypothesis, listed under the `test` extra.

## Stack

```python
from dualstack.stack import Stack, StackContainer

s = Stack([1.0, 2.0, 3.0], StackContainer.LIST)
s.push(4.0)
s.top()        # 4.0
s.pop()
len(s)         # 3
s.is_empty()   # False
s.container    # StackContainer.LIST

other = s.copy()   # independent copy with the same container
```

Values are pushed in the order given, so the last one ends up on top. The
container defaults to `StackContainer.VECTOR`; anything that is not a
`StackContainer` raises `ValueError`. Calling `pop()` or `top()` on an empty
stack raises `IndexError`.

The back ends are in `dualstack.stack_implementation`: the abstract base
`StackImplementation`, its subclasses `VectorStack` and `ListStack`, and the
factory functions `create_vector_stack()` and `create_list_stack()`, which
return an empty stack of each kind.

## Vector

```python
from dualstack.vector import Vector

v = Vector([1.0, 2.0], coef=2.0)
v.push_back(3.0)
v.push_front(0.0)
v.insert(9.0, 2)
v.insert_values([7.0, 8.0], 0)
v.erase(0)             # removes one element
v.erase_between(1, 3)  # removes positions 1 and 2
list(v)
v[0] = 5.0
v.capacity()
v.load_factor()        # size / capacity, or 0.0 with no capacity
v.reserve(32)
v.shrink_to_fit()
w = v.copy()           # capacity of the copy equals its size
```

The growth coefficient must be greater than 1, otherwise `ValueError` is
raised. `insert` and `insert_values` do nothing when the position is past the
end. `erase` removes at most as many elements as there are from the position
on, and does nothing when the position is past the end; `erase_between` with
an end before its beginning removes everything from the beginning on.
`pop_back()` and `pop_front()` on an empty vector raise `IndexError`.

## ForwardList

```python
from dualstack.forward_list import ForwardList

fl = ForwardList([1.0, 2.0])
fl.push_front(0.0)
fl.front()        # 0.0
fl.set_front(5.0)
fl.pop_front()
len(fl), bool(fl), list(fl)
fl.copy()
fl.clear()
```

`front()`, `set_front()` and `pop_front()` on an empty list raise
`IndexError`.