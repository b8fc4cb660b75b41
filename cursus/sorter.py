"""Sorting stack ``a`` with the push_swap operations at a low operation count."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise

from cursus.stacks import Operation, Stack, Stacks

NOT_EXTREME = 0
MINIMUM = 1
MAXIMUM = 2


@dataclass(frozen=True)
class MoveCost:
    """Rotations that bring one value of ``a`` and its slot in ``b`` to the tops."""

    ra: int = 0
    rb: int = 0
    rra: int = 0
    rrb: int = 0
    rr: int = 0
    rrr: int = 0

    @property
    def total(self) -> int:
        """Number of operations, the final push included."""
        return self.ra + self.rb + self.rra + self.rrb + self.rr + self.rrr + 1

    def operations(self) -> Iterator[Operation]:
        """The operations of this move in the order they are performed, ending with pb."""
        for operation, count in (
            (Operation.RR, self.rr),
            (Operation.RRR, self.rrr),
            (Operation.RA, self.ra),
            (Operation.RB, self.rb),
            (Operation.RRA, self.rra),
            (Operation.RRB, self.rrb),
        ):
            for _ in range(count):
                yield operation
        yield Operation.PB


def min_or_max(stack: Iterable[int], number: int) -> int:
    """MINIMUM if no value is below ``number``, else MAXIMUM if none is above it.

    NOT_EXTREME otherwise. An empty stack raises IndexError.
    """
    values = list(stack)
    if not values:
        raise IndexError("stack is empty")
    if all(value >= number for value in values):
        return MINIMUM
    if all(value <= number for value in values):
        return MAXIMUM
    return NOT_EXTREME


def stack_b_cost(number: int, stack_b: Stack) -> tuple[Operation, int]:
    """Rotation of ``b`` (rb or rrb, and how many) that readies it to receive ``number``.

    Stack ``b`` is kept in descending circular order; after the rotation,
    pushing ``number`` keeps it so.
    """
    values = list(stack_b)
    kind = min_or_max(values, number)
    size = len(values)
    lowest, highest = min(values), max(values)

    def rank(value: int) -> int:
        if value == lowest:
            return MINIMUM
        if value == highest:
            return MAXIMUM
        return NOT_EXTREME

    position = size
    for index in range(1, size):
        current, following = values[index - 1], values[index]
        if kind == NOT_EXTREME and current > number > following:
            position = index
            break
        if kind == MINIMUM and rank(current) == MINIMUM:
            position = index
            break
        if kind == MAXIMUM and rank(following) == MAXIMUM:
            position = index
            break
    if position <= size // 2:
        return Operation.RB, position
    return Operation.RRB, size - position


def _cost_at(index: int, value: int, size_a: int, stack_b: Stack) -> MoveCost:
    direction, count = stack_b_cost(value, stack_b)
    upper_half = index <= size_a // 2
    from_bottom = size_a - index
    if direction is Operation.RB:
        if not upper_half:
            return MoveCost(rb=count, rra=from_bottom)
        if count < index:
            return MoveCost(rr=count, ra=index - count)
        return MoveCost(rr=index, rb=count - index)
    if upper_half:
        return MoveCost(ra=index, rrb=count)
    if count < from_bottom:
        return MoveCost(rrr=count, rra=from_bottom - count)
    return MoveCost(rrr=from_bottom, rrb=count - from_bottom)


def best_move(stacks: Stacks) -> MoveCost:
    """The cheapest move of a value from ``a`` into its place in ``b``.

    Positions that cannot beat the best cost found so far are skipped, and
    the search stops at the first move costing fewer than three operations.
    """
    size_a = len(stacks.a)
    if size_a == 0:
        raise IndexError("stack a is empty")
    best: MoveCost | None = None
    for index, value in enumerate(stacks.a):
        if best is not None and not (index < best.total or size_a - index < best.total):
            continue
        cost = _cost_at(index, value, size_a, stacks.b)
        if best is None or cost.total < best.total:
            best = cost
        if cost.total < 3:
            break
    assert best is not None
    return best


def sort_three(stacks: Stacks) -> None:
    """Sort a three-value stack ``a`` in ascending order with at most two operations."""
    a = stacks.a
    if len(a) != 3:
        raise ValueError("stack a must hold exactly three values")
    top, second, bottom = a.top(), a.second(), a.bottom()
    if second < top < bottom:
        stacks.apply(Operation.SA)
    elif top > bottom > second:
        stacks.apply(Operation.RA)
    elif bottom < top < second:
        stacks.apply(Operation.RRA)
    elif top > second or second > bottom:
        stacks.apply(Operation.SA)
        if a.top() > a.second():
            stacks.apply(Operation.RA)
        else:
            stacks.apply(Operation.RRA)


def _sort_small(stacks: Stacks) -> None:
    """Sort the three values left in ``a``, then insert the one or two in ``b``."""
    sort_three(stacks)
    a, b = stacks.a, stacks.b
    while len(b):
        value = b.top()
        items = list(a)
        if value > a.bottom():
            stacks.run((Operation.PA, Operation.RA))
        elif value < a.top():
            stacks.apply(Operation.PA)
        elif a.top() < value < a.second():
            stacks.run((Operation.PA, Operation.SA))
        elif a.second() < value < items[2 % len(items)]:
            stacks.run((Operation.RA, Operation.PA, Operation.SA, Operation.RRA))
        elif items[-2] < value < a.bottom():
            stacks.run((Operation.RRA, Operation.PA, Operation.RA, Operation.RA))
        else:
            raise ValueError(f"no place for {value} in stack a")


def _merge_back(stacks: Stacks) -> None:
    """Bring every value of ``b`` back onto the sorted three in ``a``."""
    a, b = stacks.a, stacks.b
    if min_or_max(b, b.top()) != MAXIMUM:
        value = b.top()
        if a.second() < value < a.bottom():
            stacks.run((Operation.RRA, Operation.PA, Operation.RA, Operation.RA))
        else:
            stacks.apply(Operation.PA)
            if a.top() > a.bottom():
                stacks.apply(Operation.RA)
            if a.top() > a.second():
                stacks.apply(Operation.SA)
    if len(b) and a.bottom() > b.top():
        stacks.apply(Operation.RRA)
    while len(b):
        while a.bottom() > b.top() and min_or_max(a, a.bottom()) != MAXIMUM:
            stacks.apply(Operation.RRA)
        stacks.apply(Operation.PA)
    while a.bottom() < a.top():
        stacks.apply(Operation.RRA)


def _sort_large(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    stacks.apply(Operation.PB)
    if len(a) < 4:
        _sort_small(stacks)
        return
    stacks.apply(Operation.PB)
    if len(a) < 4:
        _sort_small(stacks)
        return
    if b.top() < b.second():
        stacks.apply(Operation.SB)
    if b.second() < a.top() < b.top():
        stacks.run((Operation.RB, Operation.PB, Operation.SB, Operation.RRB))
    else:
        stacks.apply(Operation.PB)
    while len(a) > 3:
        stacks.run(best_move(stacks).operations())
    while min_or_max(b, b.bottom()) != MINIMUM:
        stacks.apply(Operation.RB)
    sort_three(stacks)
    _merge_back(stacks)


def sort_values(values: Iterable[int]) -> list[Operation]:
    """Operations that sort ``values`` (top first) into ascending order in ``a``.

    Already sorted input needs none; duplicate values raise ValueError.
    """
    items = list(values)
    if len(set(items)) != len(items):
        raise ValueError("duplicate values")
    if all(first <= second for first, second in pairwise(items)):
        return []
    stacks = Stacks(items)
    if len(items) == 2:
        stacks.apply(Operation.SA)
    elif len(items) == 3:
        sort_three(stacks)
    else:
        _sort_large(stacks)
    return list(stacks.history)