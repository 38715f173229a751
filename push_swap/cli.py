"""Command line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from push_swap.parsing import InputError, parse_arguments
from push_swap.sorter import sort_operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as Error on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in sort_operations(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())