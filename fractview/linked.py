"""A singly linked list with insertion at the head, plus small helpers
for applying functions across sequences."""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
)

T = TypeVar("T")
U = TypeVar("U")


class _Node(Generic[T]):
    __slots__ = ("content", "next")

    def __init__(self, content: T, next_node: Optional["_Node[T]"] = None) -> None:
        self.content = content
        self.next = next_node


class LinkedList(Generic[T]):
    """Singly linked list; iteration runs from head to tail.

    Items given to the constructor keep their order.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in reversed(list(items)):
            self.push_front(item)

    def push_front(self, content: T) -> None:
        """Insert ``content`` as the new head."""
        self._head = _Node(content, self._head)
        self._size += 1

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """A new list holding ``func(item)`` for every item, in the same order."""
        return LinkedList(func(content) for content in self)

    def clear(self, release: Optional[Callable[[T], Any]] = None) -> None:
        """Empty the list, calling ``release`` on each item from head to tail."""
        node = self._head
        self._head = None
        self._size = 0
        while node is not None:
            if release is not None:
                release(node.content)
            node = node.next

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def count_if(words: Iterable[str], predicate: Callable[[str], Any]) -> int:
    """Number of words for which ``predicate`` returns true (or 1)."""
    return sum(1 for word in words if predicate(word) == 1)


def foreach(values: Iterable[T], func: Callable[[T], Any]) -> None:
    """Call ``func`` on every value in order."""
    for value in values:
        func(value)