"""The two stacks and the eleven operations that rearrange them.

Stack tops are at the left end of each deque. Every operation reports its
name through the ``emit`` callback, even when it changes nothing.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, List, Optional, Union

from .libft.output import put_endl

MAX_INT = 2147483647
MIN_INT = -2147483648


@dataclass
class Node:
    """One stack element: its value and its rank among all values."""

    value: int
    index: int = -1


def build_nodes(values: Iterable[int]) -> List[Node]:
    """Wrap each value in a fresh node with no rank assigned."""
    return [Node(value) for value in values]


def assign_indices(nodes: Iterable[Node]) -> None:
    """Give each node the number of values strictly smaller than its own."""
    nodes = list(nodes)
    ordered = sorted(node.value for node in nodes)
    for node in nodes:
        node.index = sum(1 for value in ordered if value < node.value)


def _swap(stack: Deque[Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dest: Deque[Node], src: Deque[Node]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: Deque[Node]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[Node]) -> None:
    stack.rotate(1)


def _print_operation(name: str) -> None:
    put_endl(name)


class Stacks:
    """Stacks ``a`` and ``b``; ``a`` starts with the given values, ``b`` empty."""

    def __init__(
        self,
        values: Iterable[Union[int, Node]] = (),
        emit: Optional[Callable[[str], object]] = None,
    ) -> None:
        nodes = [item if isinstance(item, Node) else Node(item) for item in values]
        assign_indices(nodes)
        self.a: Deque[Node] = deque(nodes)
        self.b: Deque[Node] = deque()
        self._emit = _print_operation if emit is None else emit

    @property
    def values_a(self) -> List[int]:
        return [node.value for node in self.a]

    @property
    def values_b(self) -> List[int]:
        return [node.value for node in self.b]

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a!r}, b={self.values_b!r})"

    def sa(self) -> None:
        """Swap the top two elements of a."""
        _swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of b."""
        _swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """sa and sb at once."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.a, self.b)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.b, self.a)
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """ra and rb at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """rra and rrb at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr")