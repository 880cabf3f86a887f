import itertools
import random

import pytest
from hypothesis import given, settings, strategies as st

from pushswap.sorter import sort_operations
from pushswap.stacks import Operation, Stacks


def _run(values, ops):
    stacks = Stacks(values)
    for op in ops:
        stacks.apply(op)
    return stacks


def test_sorted_input_needs_nothing():
    assert sort_operations([1, 2, 3, 4]) == []
    assert sort_operations([7]) == []
    assert sort_operations([]) == []


def test_two_values_swap():
    assert sort_operations([2, 1]) == [Operation.SA]


def test_three_values_biggest_on_top():
    assert sort_operations([3, 2, 1]) == [Operation.RA, Operation.SA]


def test_three_values_biggest_in_middle():
    assert sort_operations([2, 3, 1]) == [Operation.RRA]


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_three_values_at_most_three_ops(perm):
    ops = sort_operations(list(perm))
    assert len(ops) <= 3
    assert _run(perm, ops).is_solved()


@pytest.mark.parametrize("perm", list(itertools.permutations([10, -3, 7, 0, 5])))
def test_all_permutations_of_five(perm):
    ops = sort_operations(list(perm))
    assert _run(perm, ops).is_solved()


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True, min_size=1, max_size=60))
def test_result_always_sorts(values):
    ops = sort_operations(values)
    stacks = _run(values, ops)
    assert stacks.is_solved()
    assert stacks.a == sorted(values)


@settings(max_examples=40, deadline=None)
@given(st.lists(st.integers(), unique=True, min_size=1, max_size=40))
def test_never_swaps_b(values):
    ops = sort_operations(values)
    used = [op for op in ops if op in (Operation.SB, Operation.SS)]
    assert used == []
    assert _run(values, ops).a == sorted(values)


def test_large_input():
    values = list(range(500))
    random.Random(42).shuffle(values)
    ops = sort_operations(values)
    assert _run(values, ops).a == list(range(500))


def test_duplicates_rejected():
    with pytest.raises(ValueError):
        sort_operations([1, 2, 1])