"""A singly linked list with front and back insertion and removal."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class SinglyLinkedList(Generic[T]):
    """A list of values linked in one direction, from the head onwards."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in reversed(list(items)):
            self.push_front(item)

    def push_front(self, value: T) -> None:
        """Insert a value before the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append a value after the last node."""
        new_node = _Node(value)
        if self._head is None:
            self._head = new_node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = new_node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("empty")
        if self._head.next is None:
            value = self._head.data
            self._head = None
            self._size -= 1
            return value
        current = self._head
        while current.next is not None and current.next.next is not None:
            current = current.next
        last = current.next
        assert last is not None
        current.next = None
        self._size -= 1
        return last.data

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Optional[_Node[T]] = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def remove(self, value: T) -> None:
        """Remove every node whose value equals ``value``."""
        while self._head is not None and self._head.data == value:
            self._head = self._head.next
            self._size -= 1
        current = self._head
        while current is not None and current.next is not None:
            if current.next.data == value:
                current.next = current.next.next
                self._size -= 1
            else:
                current = current.next

    def empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "nullptr"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the list operations."""
    my_list: SinglyLinkedList[int] = SinglyLinkedList()
    my_list.push_front(10)
    my_list.push_front(20)
    my_list.push_back(55)
    my_list.push_front(30)
    my_list.pop_front()
    my_list.push_back(77)
    my_list.remove(55)

    print(my_list)
    print(f"Size: {len(my_list)}")
    print(int(my_list.empty()))
    my_list.reverse()
    print(my_list)
    return 0


if __name__ == "__main__":
    sys.exit(main())