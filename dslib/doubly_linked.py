"""A doubly linked list with head and tail pointers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    prev: Optional["_Node[T]"] = None
    next: Optional["_Node[T]"] = None


class DoublyLinkedList(Generic[T]):
    """A list of values linked in both directions."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: T) -> None:
        """Insert a value before the first node."""
        node = _Node(value, next=self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append a value after the last node."""
        node = _Node(value, prev=self._tail)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("empty")
        node = self._head
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("empty")
        node = self._tail
        self._tail = node.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        self._size -= 1
        return node.data

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        current = self._head
        while current is not None:
            current.prev, current.next = current.next, current.prev
            current = current.prev
        self._head, self._tail = self._tail, self._head

    def remove(self, value: T) -> None:
        """Remove every node whose value equals ``value``."""
        current = self._head
        while current is not None:
            following = current.next
            if current.data == value:
                if current.prev is not None:
                    current.prev.next = current.next
                else:
                    self._head = current.next
                if current.next is not None:
                    current.next.prev = current.prev
                else:
                    self._tail = current.prev
                self._size -= 1
            current = following

    def empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __reversed__(self) -> Iterator[T]:
        current = self._tail
        while current is not None:
            yield current.data
            current = current.prev

    def __str__(self) -> str:
        return "".join(f"{value} <-> " for value in self) + "nullptr"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the list operations."""
    my_list: DoublyLinkedList[int] = DoublyLinkedList()
    my_list.push_front(10)
    my_list.push_front(20)
    my_list.push_back(55)
    my_list.push_front(30)
    my_list.pop_front()
    my_list.push_back(77)
    my_list.remove(55)

    print(my_list)
    print(f"Size: {len(my_list)}")
    print(f"Empty: {int(my_list.empty())}")
    my_list.reverse()
    print(my_list)
    return 0


if __name__ == "__main__":
    sys.exit(main())