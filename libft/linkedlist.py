"""A singly linked list of nodes that each hold one piece of content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list cell: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A chain of ``Node`` objects starting at ``head``."""

    def __init__(self, head: Optional[Node] = None) -> None:
        self.head = head

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; ``None`` is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` after the last node; ``None`` is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of each node, head first."""
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pass every node's content to ``delete`` and empty the list.

        Without a ``delete`` callable the list is left as it is.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            self.head = following
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on the content of every node, head first."""
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> "LinkedList":
        """Return a new list holding ``f(content)`` for every node.

        If ``f`` raises, the contents built so far are passed to ``delete``
        and the exception propagates.
        """
        if f is None or delete is None:
            raise TypeError("map needs both a mapping and a delete function")
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result