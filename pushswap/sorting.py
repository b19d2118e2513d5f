"""Sorting stack a with the stack operations: selection for small inputs,
chunked distribution for large ones."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, List

from .stacks import Node, Stacks

SMALL_LIMIT = 6


def get_sqrt(nbr: int) -> int:
    """Integer square root rounded down; 0 for zero and negative input."""
    if nbr <= 0:
        return 0
    root = 1
    while root * root <= nbr:
        root += 1
    return root - 1


def find_position(stack: Iterable[Node], target_index: int) -> int:
    """Distance from the top of the node with rank ``target_index``, or -1."""
    for position, node in enumerate(stack):
        if node.index == target_index:
            return position
    return -1


def is_sorted(stack: Iterable[Node]) -> bool:
    """True if values never decrease from top to bottom."""
    return all(upper.value <= lower.value for upper, lower in pairwise(stack))


def _sort_three(stacks: Stacks) -> None:
    first, second, third = (node.value for node in list(stacks.a)[:3])
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _push_min_to_b(stacks: Stacks) -> None:
    min_index = min(node.index for node in stacks.a)
    position = find_position(stacks.a, min_index)
    while stacks.a[0].index != min_index:
        if position <= len(stacks.a) // 2:
            stacks.ra()
        else:
            stacks.rra()
    stacks.pb()


def _push_and_sort(stacks: Stacks, size: int) -> None:
    for _ in range(size - 3):
        _push_min_to_b(stacks)
    _sort_three(stacks)
    while stacks.b:
        stacks.pa()


def sort_small_stack(stacks: Stacks) -> None:
    """Sort a by moving its minima to b, sorting three, and pushing back.

    Two elements are always swapped; fewer than two are left alone.
    """
    size = len(stacks.a)
    if size < 2:
        return
    if size == 2:
        stacks.sa()
    elif size == 3:
        _sort_three(stacks)
    else:
        _push_and_sort(stacks, size)


def _push_to_b(stacks: Stacks) -> None:
    size_a = len(stacks.a)
    size_b = 0
    span = get_sqrt(size_a) * 133 // 100
    while size_a > 0:
        top = stacks.a[0].index
        if top <= size_b:
            stacks.pb()
            size_a -= 1
            size_b += 1
        elif top <= size_b + span:
            stacks.pb()
            size_a -= 1
            size_b += 1
            if stacks.a and stacks.a[0].index > size_b + span:
                stacks.rr()
            else:
                stacks.rb()
        else:
            stacks.ra()


def _push_to_a(stacks: Stacks) -> None:
    size_b = len(stacks.b)
    while size_b > 0:
        target = size_b - 1
        while stacks.b[0].index != target:
            if find_position(stacks.b, target) <= size_b // 2:
                stacks.rb()
            else:
                stacks.rrb()
        stacks.pa()
        size_b -= 1


def sort_large_stack(stacks: Stacks) -> None:
    """Chunk a into b by rank, then return the largest each time to a.

    Stacks of five or fewer fall back to :func:`sort_small_stack`.
    """
    if len(stacks.a) > 5:
        _push_to_b(stacks)
        _push_to_a(stacks)
    else:
        sort_small_stack(stacks)


def handle_sorting(stacks: Stacks, count: int) -> None:
    """Choose the small or the large strategy from the element count."""
    if count <= SMALL_LIMIT:
        sort_small_stack(stacks)
    else:
        sort_large_stack(stacks)


def solve(values: Iterable[int]) -> List[str]:
    """Return the operations that sort ``values``; none if already sorted."""
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    operations: List[str] = []
    stacks = Stacks(values, emit=operations.append)
    if not is_sorted(stacks.a):
        handle_sorting(stacks, len(values))
    return operations