"""Reading the request script of the memory-management simulation."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

COALESCE_MARKER = -99999


class Action(enum.Enum):
    """What a request asks the memory manager to do."""

    ALLOCATE = "allocate"
    DEALLOCATE = "deallocate"
    COALESCE = "coalesce"


@dataclass(frozen=True)
class Request:
    """One line of the script: a positive pid allocates ``size`` units,
    a negative pid frees that process's memory, anything else coalesces."""

    pid: int
    size: int

    @property
    def action(self) -> Action:
        if self.pid != COALESCE_MARKER and self.pid > 0:
            return Action.ALLOCATE
        if self.pid != COALESCE_MARKER and self.pid < 0:
            return Action.DEALLOCATE
        return Action.COALESCE

    @property
    def process(self) -> int:
        """The process id the request refers to, without its sign."""
        return abs(self.pid)


def parse_requests(lines: Iterable[str]) -> tuple[int, list[Request]]:
    """Return the partition size (the first integer) and the requests after it."""
    try:
        numbers = [int(token) for line in lines for token in line.split()]
    except ValueError as exc:
        raise ValueError(f"non-integer value in request data: {exc}") from exc
    if not numbers:
        raise ValueError("missing partition size")
    partition_size, rest = numbers[0], numbers[1:]
    if len(rest) % 2:
        raise ValueError("requests must come as pairs of integers")
    pairs = zip(rest[::2], rest[1::2])
    return partition_size, [Request(pid, size) for pid, size in pairs]