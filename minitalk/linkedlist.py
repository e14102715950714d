"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of the list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def push_back(self, content: Any) -> Node:
        """Append content at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Return a new list of func applied to every content.

        If func fails part way, the contents built so far are cleared with
        delete and the error is raised again.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each content to delete from back to front."""
        if delete is not None:
            for content in reversed(list(self)):
                delete(content)
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content