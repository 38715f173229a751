"""The insertion strategy that sorts stack a with the help of stack b."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from push_swap.stack import Stack

_Action = Callable[[Stack, Stack], None]


def _both(first: _Action, second: _Action) -> _Action:
    def run(a: Stack, b: Stack) -> None:
        first(a, b)
        second(a, b)

    return run


_OPERATIONS: dict[str, _Action] = {
    "sa": lambda a, b: a.swap(),
    "pa": lambda a, b: a.push_from(b),
    "pb": lambda a, b: b.push_from(a),
    "ra": lambda a, b: a.rotate(),
    "rb": lambda a, b: b.rotate(),
    "rra": lambda a, b: a.reverse_rotate(),
    "rrb": lambda a, b: b.reverse_rotate(),
}
_OPERATIONS["rr"] = _both(_OPERATIONS["rb"], _OPERATIONS["ra"])
_OPERATIONS["rrr"] = _both(_OPERATIONS["rrb"], _OPERATIONS["rra"])


@dataclass(frozen=True)
class Move:
    """Rotations to apply to a and b before pushing from b to a.

    Positive numbers rotate, negative numbers reverse-rotate.
    """

    ra: int
    rb: int

    @property
    def cost(self) -> int:
        return abs(self.ra) + abs(self.rb)


def shortest_offset(offset: int, size: int) -> int:
    """Turn a downward offset into a negative one when that is shorter."""
    if offset > size // 2:
        offset -= size
    return offset


def insertion_offset(stack_a: Stack, value: int) -> int:
    """Rotations of a that bring the place for ``value`` to the top."""
    largest = stack_a.maximum()
    if value >= largest:
        target = stack_a.minimum()
    else:
        target = min(item for item in stack_a if item >= value)
    return shortest_offset(stack_a.index_of(target), len(stack_a))


def find_best_move(stack_a: Stack, stack_b: Stack) -> Move:
    """Return the cheapest move that places some value of b into a."""
    if not len(stack_b):
        raise ValueError("stack b is empty")
    size = len(stack_b)
    best = Move(insertion_offset(stack_a, stack_b.top()), 0)
    for position, value in enumerate(stack_b):
        candidate = Move(insertion_offset(stack_a, value), shortest_offset(position, size))
        if candidate.cost < best.cost:
            best = candidate
    return best


class Sorter:
    """Sorts a stack and records the operations it performs."""

    def __init__(self, values: Iterable[int]) -> None:
        self.stack_a = Stack(values)
        self.stack_b = Stack()
        self.operations: list[str] = []

    def _perform(self, operation: str) -> None:
        _OPERATIONS[operation](self.stack_a, self.stack_b)
        self.operations.append(operation)

    def sort_three(self) -> None:
        """Sort a stack of at most three values in place."""
        a = self.stack_a
        if not a.unsorted_position():
            return
        largest = a.maximum()
        items = list(a)
        if items[0] == largest:
            self._perform("ra")
        elif items[1] == largest:
            self._perform("rra")
        first, second = list(a)[:2]
        if first > second:
            self._perform("sa")

    def empty_b(self) -> None:
        """Move every value of b into its place in a."""
        while len(self.stack_b):
            move = find_best_move(self.stack_a, self.stack_b)
            ra, rb = move.ra, move.rb
            while ra > 0 and rb > 0:
                self._perform("rr")
                ra -= 1
                rb -= 1
            while ra < 0 and rb < 0:
                self._perform("rrr")
                ra += 1
                rb += 1
            while ra > 0:
                self._perform("ra")
                ra -= 1
            while rb > 0:
                self._perform("rb")
                rb -= 1
            while ra < 0:
                self._perform("rra")
                ra += 1
            while rb < 0:
                self._perform("rrb")
                rb += 1
            self._perform("pa")

    def smallest_to_top(self) -> None:
        """Rotate a the short way until its smallest value is on top."""
        a = self.stack_a
        offset = shortest_offset(a.index_of(a.minimum()), len(a))
        operation = "ra" if offset > 0 else "rra"
        for _ in range(abs(offset)):
            self._perform(operation)

    def run(self) -> list[str]:
        """Sort stack a and return every operation performed."""
        while len(self.stack_a) > 3:
            self._perform("pb")
        self.sort_three()
        self.empty_b()
        if self.stack_a.minimum() != self.stack_a.top():
            self.smallest_to_top()
        return list(self.operations)


def sort_operations(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values``; none if already sorted."""
    values = list(values)
    if not Stack(values).unsorted_position():
        return []
    return Sorter(values).run()