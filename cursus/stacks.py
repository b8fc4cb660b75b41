"""Two circular stacks and the eleven push_swap operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum


class Operation(str, Enum):
    """The stack operations, valued by their textual names."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


class Stack:
    """A circular stack of integers; iteration goes from top to bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("stack is empty")

    def top(self) -> int:
        """The value on top."""
        self._require_items()
        return self._items[0]

    def second(self) -> int:
        """The value after the top, wrapping round on a one-element stack."""
        self._require_items()
        return self._items[1 % len(self._items)]

    def bottom(self) -> int:
        """The value at the bottom, which the top's predecessor in the ring."""
        self._require_items()
        return self._items[-1]

    def swap(self) -> bool:
        """Exchange the two top values; False if the stack is empty."""
        if not self._items:
            return False
        if len(self._items) > 1:
            self._items[0], self._items[1] = self._items[1], self._items[0]
        return True

    def rotate(self) -> bool:
        """Move the top value to the bottom; False if the stack is empty."""
        if not self._items:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom value to the top; False if the stack is empty."""
        if not self._items:
            return False
        self._items.rotate(1)
        return True

    def push_onto(self, other: Stack) -> bool:
        """Move this stack's top onto ``other``; False if this stack is empty."""
        if not self._items:
            return False
        other._items.appendleft(self._items.popleft())
        return True


class Stacks:
    """Stack ``a`` holding the input and an empty stack ``b``.

    Every operation that takes effect is appended to ``history``.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.history: list[Operation] = []

    def apply(self, operation: Operation | str) -> bool:
        """Perform one operation; return whether it took effect."""
        op = Operation(operation)
        a, b = self.a, self.b
        if op is Operation.SA:
            done = a.swap()
        elif op is Operation.SB:
            done = b.swap()
        elif op is Operation.PA:
            done = b.push_onto(a)
        elif op is Operation.PB:
            done = a.push_onto(b)
        elif op is Operation.RA:
            done = a.rotate()
        elif op is Operation.RB:
            done = b.rotate()
        elif op is Operation.RRA:
            done = a.reverse_rotate()
        elif op is Operation.RRB:
            done = b.reverse_rotate()
        elif op is Operation.SS:
            a.swap()
            b.swap()
            done = True
        elif op is Operation.RR:
            a.rotate()
            b.rotate()
            done = True
        else:
            a.reverse_rotate()
            b.reverse_rotate()
            done = True
        if done:
            self.history.append(op)
        return done

    def run(self, operations: Iterable[Operation | str]) -> None:
        """Perform each operation in turn."""
        for operation in operations:
            self.apply(operation)