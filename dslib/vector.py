"""A growable array that tracks its own capacity."""

from __future__ import annotations

import sys
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Vector(Generic[T]):
    """An array whose capacity doubles whenever it fills up."""

    def __init__(self, default_factory: Optional[Callable[[], T]] = None) -> None:
        self._default_factory = default_factory
        self._slots: list[Any] = []
        self._length = 0

    def _blank(self) -> Any:
        return self._default_factory() if self._default_factory is not None else None

    def resize(self, new_capacity: int) -> None:
        """Set the capacity, keeping the stored values."""
        if new_capacity < self._length:
            raise ValueError("new_capacity must be >= length")
        kept = self._slots[: self._length]
        self._slots = kept + [self._blank() for _ in range(new_capacity - self._length)]

    def push_back(self, value: T) -> None:
        """Append a value, growing the storage if it is full."""
        if self._length >= len(self._slots):
            self.resize(1 if not self._slots else len(self._slots) * 2)
        self._slots[self._length] = value
        self._length += 1

    def pop_back(self) -> T:
        """Remove and return the last value."""
        if self._length == 0:
            raise IndexError("Vector is empty")
        self._length -= 1
        value = self._slots[self._length]
        self._slots[self._length] = self._blank()
        return value

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)

    def copy(self) -> "Vector[T]":
        """Return an independent copy with the same capacity."""
        duplicate: Vector[T] = Vector(self._default_factory)
        duplicate._slots = list(self._slots)
        duplicate._length = self._length
        return duplicate

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError("Vector indices must be integers")
        if index < 0 or index >= self._length:
            raise IndexError("Index out of bounds")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._slots[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._slots[index] = value

    def __iter__(self) -> Iterator[T]:
        yield from self._slots[: self._length]

    def __repr__(self) -> str:
        return f"Vector({list(self)!r}, capacity={self.capacity})"


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the vector operations."""
    vec: Vector[int] = Vector(int)
    for i in range(1, 11):
        vec.push_back(i * 10)

    print(vec.pop_back())
    print("Vector contents:")
    print("".join(f"{value} " for value in vec))
    print(f"Size: {len(vec)}")
    print(f"Capacity: {vec.capacity}")
    return 0


if __name__ == "__main__":
    sys.exit(main())