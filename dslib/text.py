"""A mutable character string with bounds-checked indexing."""

from __future__ import annotations

import sys
from typing import Optional, Union


class String:
    """A sequence of characters whose single characters can be replaced."""

    __slots__ = ("_chars",)

    def __init__(self, value: Union[str, "String", None] = None) -> None:
        if value is None:
            self._chars: list[str] = []
        elif isinstance(value, (str, String)):
            self._chars = list(str(value))
        else:
            raise TypeError(f"cannot build a String from {type(value).__name__}")

    def __add__(self, other: Union[str, "String", None]) -> "String":
        if other is None:
            return self.copy()
        if isinstance(other, (str, String)):
            return String(str(self) + str(other))
        return NotImplemented

    def __len__(self) -> int:
        return len(self._chars)

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int):
            raise TypeError("String indices must be integers")
        if index < 0 or index >= len(self._chars):
            raise IndexError("Index out of bounds")

    def __getitem__(self, index: int) -> str:
        self._check_index(index)
        return self._chars[index]

    def __setitem__(self, index: int, char: str) -> None:
        self._check_index(index)
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("a single character is required")
        self._chars[index] = char

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, String)):
            return str(self) == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"String({str(self)!r})"

    def copy(self) -> "String":
        """Return an independent copy."""
        return String(self)


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the string operations."""
    text = String("Hello, World!")
    print(f"Original: {text}")

    copied = text.copy()
    print(f"Copy: {copied}")

    moved = text
    print(f"Moved: {moved}")

    text = String("Adidas")
    print(text)

    copied[7] = "C"
    print(f"Modified Copy: {copied}")
    print(f"Length: {len(copied)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())