"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a ``LinkedList``."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self) -> None:
        self.head: Node | None = None

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, deleter: Callable[[Any], Any] | None) -> None:
        """Remove the first node, handing its content to ``deleter``.

        Without a deleter nothing is removed. Raises IndexError on an empty list.
        """
        if deleter is None:
            return
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        deleter(node.content)

    def clear(self, deleter: Callable[[Any], Any] | None) -> None:
        """Hand every content to ``deleter`` in order and empty the list.

        Without a deleter the list is left untouched.
        """
        if deleter is None:
            return
        for node in list(self._nodes()):
            deleter(node.content)
        self.head = None

    def for_each(self, func: Callable[[Any], Any] | None) -> None:
        """Call ``func`` on every content in order."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        deleter: Callable[[Any], Any],
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for each content.

        If ``func`` fails part way, the contents produced so far are handed to
        ``deleter`` and the error propagates.
        """
        if func is None or deleter is None:
            raise TypeError("map needs both a function and a deleter")
        result = LinkedList()
        tail: Node | None = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(deleter)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content