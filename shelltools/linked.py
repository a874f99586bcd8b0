"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps track of its head, tail and size."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any] | None,
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        With no ``func`` the contents are shared with the new list. If
        ``func`` raises, ``delete`` is called on every content already
        produced and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content) if func is not None else content)
        except Exception:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"