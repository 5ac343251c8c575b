import pytest
from hypothesis import given
from hypothesis import strategies as st

from dualstack.vector import Vector

finite = st.floats(allow_nan=False, allow_infinity=False)
coefs = st.sampled_from([1.5, 2.0, 3.0])


@pytest.mark.parametrize("coef", [1.0, 0.5, -3.0])
def test_coef_not_above_one_is_rejected(coef):
    with pytest.raises(ValueError):
        Vector([1.0], coef)


def test_constructor_sets_capacity_to_size():
    values = [1.0, 2.0, 3.0]
    vec = Vector(values)
    assert list(vec) == values
    assert len(vec) == len(values)
    assert vec.capacity() == len(values)
    assert vec.load_factor() == 1.0


def test_empty_vector_load_factor_is_zero():
    vec = Vector()
    assert vec.capacity() == 0
    assert vec.load_factor() == 0.0


def test_push_back_on_empty_grows_by_coefficient():
    vec = Vector()
    vec.push_back(4.0)
    assert list(vec) == [4.0]
    assert vec.capacity() == 2


@given(st.lists(finite), coefs, st.booleans())
def test_pushes_keep_order_and_capacity_invariant(values, coef, at_front):
    vec = Vector(coef=coef)
    push = vec.push_front if at_front else vec.push_back
    for value in values:
        push(value)
        assert vec.capacity() >= len(vec)
    assert list(vec) == (values[::-1] if at_front else values)


EDITS = [
    pytest.param([1.0, 3.0], lambda v: v.insert(2.0, 1), [1.0, 2.0, 3.0], id="insert-middle"),
    pytest.param([1.0, 2.0], lambda v: v.insert(3.0, 2), [1.0, 2.0, 3.0], id="insert-end"),
    pytest.param([1.0, 2.0], lambda v: v.insert(9.0, 3), [1.0, 2.0], id="insert-past-end"),
    pytest.param([1.0, 2.0], lambda v: v.insert(9.0, 10), [1.0, 2.0], id="insert-far"),
    pytest.param([1.0, 2.0], lambda v: v.insert(9.0, -1), [1.0, 2.0], id="insert-negative"),
    pytest.param(
        [1.0, 4.0], lambda v: v.insert_values([2.0, 3.0], 1), [1.0, 2.0, 3.0, 4.0], id="values-list"
    ),
    pytest.param(
        [1.0, 4.0],
        lambda v: v.insert_values(Vector([2.0, 3.0]), 1),
        [1.0, 2.0, 3.0, 4.0],
        id="values-vector",
    ),
    pytest.param([], lambda v: v.insert_values([5.0, 6.0], 0), [5.0, 6.0], id="values-empty"),
    pytest.param([1.0], lambda v: v.insert_values([2.0], 5), [1.0], id="values-out-of-range"),
    pytest.param(
        [1.0, 2.0, 3.0], lambda v: (v.pop_back(), v.pop_front()), [2.0], id="pop-both-ends"
    ),
    pytest.param([1.0, 2.0, 3.0], lambda v: v.erase(1), [1.0, 3.0], id="erase-one"),
    pytest.param([1.0, 2.0, 3.0, 4.0], lambda v: v.erase(2, 10), [1.0, 2.0], id="erase-clamped"),
    pytest.param([1.0, 2.0], lambda v: v.erase(2, 1), [1.0, 2.0], id="erase-beyond-size"),
    pytest.param(
        [1.0, 2.0, 3.0, 4.0], lambda v: v.erase_between(1, 3), [1.0, 4.0], id="between-example"
    ),
    pytest.param([1.0, 2.0, 3.0, 4.0], lambda v: v.erase_between(1, 100), [1.0], id="between-past"),
    pytest.param(
        [1.0, 2.0, 3.0, 4.0], lambda v: v.erase_between(2, 0), [1.0, 2.0], id="between-reversed"
    ),
]


@pytest.mark.parametrize("initial, edit, expected", EDITS)
def test_edit(initial, edit, expected):
    vec = Vector(initial)
    edit(vec)
    assert list(vec) == expected
    assert vec.capacity() >= len(vec)


@pytest.mark.parametrize("initial, pos", [([1.0, 4.0], 1), ([], 0)])
def test_insert_values_leaves_spare_room(initial, pos):
    vec = Vector(initial)
    vec.insert_values([2.0, 3.0], pos)
    assert vec.capacity() > len(vec)


def test_pop_keeps_capacity():
    vec = Vector([1.0, 2.0, 3.0])
    vec.pop_back()
    assert vec.capacity() == 3


@pytest.mark.parametrize("method", ["pop_back", "pop_front"])
def test_pop_on_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(Vector(), method)()


def test_indexing_and_assignment():
    vec = Vector([1.0, 2.0, 3.0])
    vec[1] = 7.0
    assert vec[1] == 7.0
    assert vec[-1] == 3.0
    with pytest.raises(IndexError):
        vec[3]


def test_reserve_grows_but_never_shrinks():
    vec = Vector([1.0, 2.0])
    vec.reserve(10)
    assert vec.capacity() == 10
    vec.reserve(5)
    assert vec.capacity() == 10
    assert list(vec) == [1.0, 2.0]


def test_shrink_to_fit_matches_size():
    vec = Vector([1.0, 2.0])
    vec.reserve(10)
    vec.shrink_to_fit()
    assert vec.capacity() == len(vec)
    assert vec.load_factor() == 1.0


def test_copy_is_independent_and_tight():
    vec = Vector([1.0, 2.0])
    vec.reserve(8)
    duplicate = vec.copy()
    duplicate.push_back(3.0)
    vec[0] = 5.0
    assert list(vec) == [5.0, 2.0]
    assert list(duplicate) == [1.0, 2.0, 3.0]
    assert vec.copy().capacity() == len(vec)


@given(st.lists(finite, min_size=1))
def test_load_factor_bounded(values):
    vec = Vector()
    for value in values:
        vec.push_back(value)
    assert 0.0 < vec.load_factor() <= 1.0