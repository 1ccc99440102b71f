"""Command-line entry point: print the instructions that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_args
from pushswap.sorting import is_sorted, sort_stacks
from pushswap.stacks import Stacks


def solve(numbers: Sequence[int]) -> list[str]:
    """Return the instructions that sort ``numbers`` into ascending order on ``a``."""
    if is_sorted(numbers):
        return []
    stacks = Stacks(numbers)
    sort_stacks(stacks)
    return stacks.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_args(args)
    except InputError as exc:
        if not exc.silent:
            sys.stderr.write("Error\n")
        return 1
    for op in solve(numbers):
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())