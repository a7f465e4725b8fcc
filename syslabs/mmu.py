"""Simulated memory manager with first-fit, best-fit and worst-fit placement."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from syslabs.blocklist import Block, BlockList
from syslabs.mmuinput import Action, Request, parse_requests

USAGE = (
    "usage: ./mmu <input file> -{F | B | W }  \n"
    "(F=FIFO | B=BESTFIT | W-WORSTFIT)\n"
)
RULE = "************************\n"


class Policy(enum.Enum):
    """How a free block is chosen for an allocation."""

    FIFO = 1
    BESTFIT = 2
    WORSTFIT = 3


class AllocationError(Exception):
    """Raised when a request cannot be satisfied."""


_FLAGS = {
    "-F": Policy.FIFO,
    "-FIFO": Policy.FIFO,
    "-B": Policy.BESTFIT,
    "-BESTFIT": Policy.BESTFIT,
    "-W": Policy.WORSTFIT,
    "-WORSTFIT": Policy.WORSTFIT,
}


def parse_policy(flag: str) -> Policy:
    """Map a command-line flag such as ``-b`` or ``-WorstFit`` to a policy."""
    try:
        return _FLAGS[flag.upper()]
    except KeyError:
        raise ValueError(f"unknown policy flag: {flag!r}") from None


class MemoryManager:
    """A partition split into free and allocated blocks."""

    def __init__(self, partition_size: int, policy: Policy) -> None:
        if partition_size < 1:
            raise ValueError("partition size must be positive")
        self.partition_size = partition_size
        self.policy = Policy(policy)
        self.free_list = BlockList([Block(0, 0, partition_size - 1)])
        self.alloc_list = BlockList()

    def _select(self, size: int) -> Block | None:
        fitting = [block for block in self.free_list if block.size >= size]
        if not fitting:
            return None
        if self.policy is Policy.BESTFIT:
            return min(fitting, key=lambda block: block.size)
        if self.policy is Policy.WORSTFIT:
            return max(fitting, key=lambda block: block.size)
        return fitting[0]

    def allocate(self, pid: int, size: int) -> Block:
        """Give ``size`` units to ``pid``; return the allocated block."""
        if size < 1:
            raise ValueError("allocation size must be positive")
        selected = self._select(size)
        if selected is None:
            raise AllocationError("Error: Not Enough Memory")
        self.free_list.remove_at_index(
            next(i for i, block in enumerate(self.free_list) if block is selected)
        )
        original_end = selected.end
        selected.pid = pid
        selected.end = selected.start + size - 1
        self.alloc_list.add_ascending_by_address(selected)
        if selected.end < original_end:
            fragment = Block(0, selected.end + 1, original_end)
            if self.policy is Policy.FIFO:
                self.free_list.add_to_back(fragment)
            elif self.policy is Policy.BESTFIT:
                self.free_list.add_ascending_by_blocksize(fragment)
            else:
                self.free_list.add_descending_by_blocksize(fragment)
        return selected

    def deallocate(self, pid: int) -> Block:
        """Return the memory held by ``pid`` to the free list."""
        index = self.alloc_list.index_of_pid(pid)
        if index == -1:
            raise AllocationError(f"Error: Can't locate Memory Used by PID: {pid}")
        block = self.alloc_list.remove_at_index(index)
        block.pid = 0
        self.free_list.add_ascending_by_address(block)
        return block

    def coalesce(self) -> None:
        """Sort the free list by address and merge adjacent blocks."""
        ordered = BlockList()
        for block in self.free_list:
            ordered.add_ascending_by_address(block)
        ordered.coalesce()
        self.free_list = ordered


def format_list(blocks: Iterable[Block], message: str) -> str:
    """Render blocks the way the simulation reports them."""
    lines = [f"{message}:\n"]
    for i, block in enumerate(blocks):
        line = f"Block {i}:\t START: {block.start}\t END: {block.end}"
        line += f"\t PID: {block.pid}\n" if block.pid != 0 else "\n"
        lines.append(line)
    return "".join(lines)


def run(
    requests: Iterable[Request],
    partition_size: int,
    policy: Policy,
    out: TextIO | None = None,
) -> MemoryManager:
    """Apply every request in order, reporting the lists after each one."""
    out = out if out is not None else sys.stdout
    manager = MemoryManager(partition_size, policy)
    for request in requests:
        out.write(RULE)
        try:
            if request.action is Action.ALLOCATE:
                out.write(f"ALLOCATE: {request.size} FROM PID: {request.pid}\n")
                manager.allocate(request.pid, request.size)
            elif request.action is Action.DEALLOCATE:
                out.write(f"DEALLOCATE MEM: PID {request.process}\n")
                manager.deallocate(request.process)
            else:
                out.write("COALESCE/COMPACT\n")
                manager.coalesce()
        except (AllocationError, ValueError) as exc:
            out.write(f"{exc}\n")
        out.write(RULE)
        out.write(format_list(manager.free_list, "Free Memory"))
        out.write(format_list(manager.alloc_list, "\nAllocated Memory"))
        out.write("\n\n")
    return manager


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stdout.write(USAGE)
        return 1
    path, flag = args
    try:
        with open(path, encoding="utf-8") as handle:
            partition_size, requests = parse_requests(handle)
    except OSError:
        print("Error: Invalid filepath", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"PARTITION_SIZE = {partition_size}")
    try:
        policy = parse_policy(flag)
    except ValueError:
        sys.stdout.write(USAGE)
        return 1
    try:
        run(requests, partition_size, policy, sys.stdout)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())