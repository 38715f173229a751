# push_swap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. The command prints each operation it uses, one per line.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` | swap the top two values of `a` |
| `pa` / `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both (the top goes to the bottom) |
| `rra` / `rrb` / `rrr` | reverse-rotate `a`, `b`, or both (the bottom goes to the top) |

When sorting finishes, `a` holds every number in ascending order with the
smallest on top, and `b` is empty.

## Command line

```
push_swap 3 2 5 1 4
push_swap "3 2 5 1 4"
```

The numbers can be given as separate arguments or as one argument separated
by spaces. The first number is the top of stack `a`. If the numbers are
already in ascending order, nothing is printed.

Each number may have leading whitespace and an optional `+` or `-` sign,
followed by digits only. If there are no arguments, a word is not such a
number, a value lies outside the 32-bit signed range, or a value appears
twice, the command writes `Error` to standard error and exits with status 1.

## Library use

```python
from push_swap.parsing import InputError, parse_arguments
from push_swap.sorter import Sorter, sort_operations

print(sort_operations([3, 2, 5, 1, 4]))  # operation names such as "pb", "ra", "pa"

sorter = Sorter([2, 1, 3])
sorter.run()
print(list(sorter.stack_a), sorter.operations)

try:
    parse_arguments(["1", "1"])
except InputError:
    print("duplicate input")
```

- `push_swap.parsing`: `parse_arguments`, `is_valid_number`, `atoi_long`,
  `split_words` and the `InputError` exception (a `ValueError`).
- `push_swap.sorter`: `sort_operations`, the `Sorter` class (with
  `sort_three`, `empty_b`, `smallest_to_top` and `run`), the `Move` dataclass
  (`ra`, `rb`, `cost`), and the helpers `find_best_move`, `insertion_offset`
  and `shortest_offset`.
- `push_swap.stack`: the `Stack` class, iterated from the top down, with
  `top`, `swap`, `push_from`, `rotate`, `reverse_rotate`, `maximum`,
  `minimum`, `index_of` and `unsorted_position`.
- `push_swap.cli`: `main`, the function behind the `push_swap` command.

## What it does not do

The package only produces operations. It has no checker that reads a list of
operations and verifies that they sort a given input.