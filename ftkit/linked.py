"""A singly linked list of arbitrary items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list supporting insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, item: Any) -> None:
        """Insert *item* before the first element."""
        self._head = _Node(item, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Append *item* after the last element."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """The last item, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every item, calling *delete* on each from first to last."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call *f* on every item in order."""
        for item in self:
            f(item)

    def map(
        self, f: Callable[[Any], Any], delete: Optional[Callable[[Any], Any]] = None
    ) -> "LinkedList":
        """A new list of ``f(item)`` for every item.

        If *f* raises, *delete* is called on the results made so far and the
        exception propagates.
        """
        result = LinkedList()
        try:
            for item in self:
                result.push_back(f(item))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"