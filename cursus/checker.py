"""Command that checks whether a list of operations sorts its integer arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from cursus.push_swap import ArgumentError, is_sorted, validate_arguments
from cursus.stacks import Operation, Stacks

_COMMANDS = tuple(operation.value for operation in Operation)


def _operation_of(line: str) -> Operation | None:
    """The operation a line names: its name followed by exactly one character."""
    for name in _COMMANDS:
        if len(line) == len(name) + 1 and line.startswith(name):
            return Operation(name)
    return None


def is_valid_command(line: str | None) -> bool:
    """True when ``line`` is an operation name followed by its line ending."""
    if line is None:
        return False
    return _operation_of(line) is not None


def execute_command(stacks: Stacks, command: str) -> Operation:
    """Perform the operation named by ``command`` on ``stacks`` and return it."""
    operation = _operation_of(command)
    if operation is None:
        raise ArgumentError(f"unknown command: {command!r}")
    stacks.apply(operation)
    return operation


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply every line to fresh stacks holding ``values``; True if they end sorted."""
    stacks = Stacks(values)
    for line in lines:
        execute_command(stacks, line)
    return is_sorted(stacks)


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = validate_arguments(args)
        result = run_checker(values, sys.stdin)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())