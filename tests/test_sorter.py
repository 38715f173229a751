import itertools
import random

import pytest

from push_swap.sorter import (
    Move,
    Sorter,
    find_best_move,
    insertion_offset,
    shortest_offset,
    sort_operations,
)
from push_swap.stack import Stack

VALID = {"sa", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _replay(values, operations):
    a, b = Stack(values), Stack()
    table = {
        "sa": lambda: a.swap(),
        "pa": lambda: a.push_from(b),
        "pb": lambda: b.push_from(a),
        "ra": lambda: a.rotate(),
        "rb": lambda: b.rotate(),
        "rr": lambda: (a.rotate(), b.rotate()),
        "rra": lambda: a.reverse_rotate(),
        "rrb": lambda: b.reverse_rotate(),
        "rrr": lambda: (a.reverse_rotate(), b.reverse_rotate()),
    }
    for operation in operations:
        table[operation]()
    return list(a), list(b)


def _apply_offset(stack, offset):
    for _ in range(abs(offset)):
        if offset > 0:
            stack.rotate()
        else:
            stack.reverse_rotate()


def test_sorted_input_needs_nothing():
    assert sort_operations([1, 2, 3, 4, 5]) == []


def test_three_values_one_swap():
    assert sort_operations([2, 1, 3]) == ["sa"]


def test_three_values_rotate_then_swap():
    assert sort_operations([3, 2, 1]) == ["ra", "sa"]


def test_two_values():
    assert sort_operations([2, 1]) == ["ra"]


@pytest.mark.parametrize("values", list(itertools.permutations(range(1, 6))))
def test_every_permutation_of_five_is_sorted(values):
    operations = sort_operations(values)
    assert set(operations) <= VALID
    a, b = _replay(values, operations)
    assert a == sorted(values)
    assert b == []


@pytest.mark.parametrize("size", [4, 10, 50, 100])
def test_random_inputs_are_sorted(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    operations = sort_operations(values)
    a, b = _replay(values, operations)
    assert a == sorted(values)
    assert b == []


@pytest.mark.parametrize("size", [1, 2, 5, 8, 11])
def test_shortest_offset_is_equivalent_and_short(size):
    for offset in range(size):
        result = shortest_offset(offset, size)
        assert (result - offset) % size == 0
        assert abs(result) <= size // 2 + 1


def test_shortest_offset_keeps_small_offsets():
    assert shortest_offset(0, 7) == 0
    assert shortest_offset(2, 7) == 2


def test_insertion_offset_finds_successor():
    stack = Stack([1, 3, 5])
    _apply_offset(stack, insertion_offset(stack, 4))
    assert stack.top() == 5


def test_insertion_offset_above_maximum_targets_minimum():
    stack = Stack([3, 5, 1])
    _apply_offset(stack, insertion_offset(stack, 9))
    assert stack.top() == 1


def test_find_best_move_single_value():
    a = Stack([1, 3, 5])
    b = Stack([4])
    assert find_best_move(a, b) == Move(insertion_offset(a, 4), 0)


def test_find_best_move_is_no_worse_than_top():
    a = Stack([10, 20, 30, 40, 50])
    b = Stack([45, 15, 5, 55])
    best = find_best_move(a, b)
    assert best.cost <= abs(insertion_offset(a, 45))


def test_find_best_move_empty_b():
    with pytest.raises(ValueError):
        find_best_move(Stack([1, 2]), Stack())


def test_move_cost():
    assert Move(-2, 3).cost == Move(2, -3).cost == abs(-2) + abs(3)


def test_sort_three_method():
    sorter = Sorter([3, 1, 2])
    sorter.sort_three()
    assert list(sorter.stack_a) == [1, 2, 3]
    assert sorter.operations == ["ra"]


def test_empty_b_leaves_a_cyclically_sorted():
    sorter = Sorter([2, 4, 6])
    sorter.stack_b = Stack([5, 1, 3, 7])
    sorter.empty_b()
    items = list(sorter.stack_a)
    assert len(sorter.stack_b) == 0
    start = items.index(min(items))
    assert items[start:] + items[:start] == [1, 2, 3, 4, 5, 6, 7]


def test_smallest_to_top():
    sorter = Sorter([3, 4, 1, 2])
    sorter.smallest_to_top()
    assert list(sorter.stack_a) == [1, 2, 3, 4]
    assert set(sorter.operations) <= {"ra", "rra"}


def test_run_pushes_all_but_three():
    values = [5, 9, 1, 7, 3, 8, 2]
    operations = Sorter(values).run()
    assert operations.count("pb") == len(values) - 3
    assert operations.count("pa") == len(values) - 3
    assert _replay(values, operations)[0] == sorted(values)