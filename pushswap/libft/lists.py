"""A singly linked list holding arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the head and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> ListNode:
        """Append ``content`` at the tail and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[ListNode]:
        """The tail node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove_first(self, delete: Deleter = None) -> Any:
        """Unlink the head node, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to ``delete`` in order."""
        while self.head is not None:
            self.remove_first(delete)

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``f`` applied to each content.

        If ``f`` raises, the contents produced so far are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result