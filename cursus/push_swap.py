"""Command that prints the operations sorting its integer arguments."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from itertools import pairwise

from cursus.sorter import sort_values
from cursus.stacks import Stacks

INT_MIN = -2147483648
INT_MAX = 2147483647
_NUMBER = re.compile(r"[+-]?[0-9]+")


class ArgumentError(ValueError):
    """An argument is not a 32-bit integer, is repeated, or a command is unknown."""


def _parse_number(arg: str) -> int:
    if not _NUMBER.fullmatch(arg):
        raise ArgumentError(f"not an integer: {arg!r}")
    value = int(arg)
    if not INT_MIN <= value <= INT_MAX:
        raise ArgumentError(f"out of the 32-bit range: {arg!r}")
    return value


def validate_arguments(args: Sequence[str]) -> list[int]:
    """Convert the arguments to integers, rejecting bad numbers and duplicates."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        value = _parse_number(arg)
        if value in seen:
            raise ArgumentError(f"duplicate value: {arg!r}")
        seen.add(value)
        values.append(value)
    return values


def is_sorted(stacks: Stacks) -> bool:
    """True when ``a`` is in ascending order from top to bottom and ``b`` is empty."""
    if len(stacks.b):
        return False
    return all(first <= second for first, second in pairwise(stacks.a))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the given integers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = validate_arguments(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 0
    for operation in sort_values(values):
        sys.stdout.write(f"{operation.value}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())