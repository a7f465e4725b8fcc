"""An ordered list of memory blocks used to track free and allocated memory."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Block:
    """A block of memory from ``start`` to ``end`` inclusive; pid 0 means free."""

    pid: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start + 1


class BlockList:
    """Blocks in a chosen order; lookups that find nothing give None or -1."""

    def __init__(self, blocks: Iterable[Block] = ()) -> None:
        self._blocks: list[Block] = list(blocks)

    def add_to_back(self, block: Block) -> None:
        self._blocks.append(block)

    def add_to_front(self, block: Block) -> None:
        self._blocks.insert(0, block)

    def add_at_index(self, block: Block, index: int) -> None:
        """Insert ``block`` at ``index``; an index past the end appends."""
        if index < 0:
            raise IndexError(f"cannot insert at index {index}")
        self._blocks.insert(index, block)

    def _insert_before_first(self, block: Block, stop) -> None:
        position = next(
            (i for i, current in enumerate(self._blocks) if stop(current)),
            len(self._blocks),
        )
        self._blocks.insert(position, block)

    def add_ascending_by_address(self, block: Block) -> None:
        """Insert before the first block whose start is not below ``block``'s."""
        self._insert_before_first(block, lambda current: current.start >= block.start)

    def add_ascending_by_blocksize(self, block: Block) -> None:
        """Insert after every block no larger than ``block``."""
        self._insert_before_first(block, lambda current: current.size > block.size)

    def add_descending_by_blocksize(self, block: Block) -> None:
        """Insert after every block no smaller than ``block``."""
        self._insert_before_first(block, lambda current: current.size < block.size)

    def coalesce(self) -> None:
        """Merge neighbouring blocks that are physically adjacent, in place."""
        merged: list[Block] = []
        for block in self._blocks:
            if merged and merged[-1].end + 1 == block.start:
                merged[-1].end = block.end
            else:
                merged.append(block)
        self._blocks = merged

    def remove_from_back(self) -> Block | None:
        return self._blocks.pop() if self._blocks else None

    def remove_from_front(self) -> Block | None:
        return self._blocks.pop(0) if self._blocks else None

    def remove_at_index(self, index: int) -> Block | None:
        if 0 <= index < len(self._blocks):
            return self._blocks.pop(index)
        return None

    def get_from_front(self) -> Block | None:
        return self._blocks[0] if self._blocks else None

    def get(self, index: int) -> Block | None:
        if 0 <= index < len(self._blocks):
            return self._blocks[index]
        return None

    def __contains__(self, block: object) -> bool:
        return any(current == block for current in self._blocks)

    def contains_size(self, size: int) -> bool:
        """True if some block holds at least ``size`` units."""
        return self.index_of_size(size) != -1

    def contains_pid(self, pid: int) -> bool:
        return self.index_of_pid(pid) != -1

    def _index_where(self, predicate) -> int:
        return next((i for i, block in enumerate(self._blocks) if predicate(block)), -1)

    def index_of(self, block: Block) -> int:
        return self._index_where(lambda current: current == block)

    def index_of_size(self, size: int) -> int:
        return self._index_where(lambda current: size <= current.size)

    def index_of_pid(self, pid: int) -> int:
        return self._index_where(lambda current: current.pid == pid)

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __str__(self) -> str:
        if not self._blocks:
            return "list is empty"
        return "".join(
            f"PID={block.pid} START:{block.start} END:{block.end}" for block in self._blocks
        )

    def __repr__(self) -> str:
        return f"BlockList({self._blocks!r})"