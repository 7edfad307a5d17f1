"""A doubly linked list with 1-based positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyListError(IndexError):
    """Raised when an element is removed from an empty list."""


@dataclass(eq=False, repr=False)
class Node(Generic[T]):
    """One link of a :class:`DoublyLinkedList`."""

    data: T
    next: Node[T] | None = None
    prev: Node[T] | None = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class DoublyLinkedList(Generic[T]):
    """A doubly linked list whose positions are numbered from 1."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    @property
    def head(self) -> Node[T] | None:
        """The first node, or None when the list is empty."""
        return self._head

    def insert_front(self, value: T) -> None:
        """Insert a value before the first element."""
        node = Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: T) -> None:
        """Insert a value after the last element."""
        node = Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: T, position: int) -> None:
        """Insert a value so that it ends up at ``position`` (1 to len + 1)."""
        if position == 1:
            self.insert_front(value)
            return
        if not 2 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == self._size + 1:
            self.append(value)
            return
        after = self._node_at(position)
        before = after.prev
        node = Node(value, next=after, prev=before)
        before.next = node
        after.prev = node
        self._size += 1

    def delete_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise EmptyListError("list is empty")
        return self._unlink(self._head)

    def delete_back(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise EmptyListError("list is empty")
        return self._unlink(self._tail)

    def delete_at(self, position: int) -> T:
        """Remove and return the element at ``position`` (1-based)."""
        if position < 1:
            raise ValueError(f"invalid position {position}")
        if self._head is None:
            raise EmptyListError("list is empty")
        if position > self._size:
            raise IndexError(f"position {position} out of boundary")
        return self._unlink(self._node_at(position))

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def _node_at(self, position: int) -> Node[T]:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def _unlink(self, node: Node[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = None
        node.prev = None
        self._size -= 1
        return node.data