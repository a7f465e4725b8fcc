"""An integer list offering the operations of a singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class IntList:
    """Ordered integers with front, back and positional insertion and removal."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = [int(value) for value in values]

    def add_to_front(self, value: int) -> None:
        self._items.insert(0, value)

    def add_to_back(self, value: int) -> None:
        self._items.append(value)

    def add_at_index(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"cannot insert at index {index}")
        self._items.insert(index, value)

    def remove_from_front(self) -> int:
        if not self._items:
            raise IndexError("remove from empty list")
        return self._items.pop(0)

    def remove_from_back(self) -> int:
        if not self._items:
            raise IndexError("remove from empty list")
        return self._items.pop()

    def remove_at_index(self, index: int) -> int:
        self._check_index(index)
        return self._items.pop(index)

    def get(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self._items) + "NULL"

    def __repr__(self) -> str:
        return f"IntList({self._items!r})"