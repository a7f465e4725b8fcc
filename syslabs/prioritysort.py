"""Sort processes by priority, then arrival time, then pid."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A process to be ordered; a larger priority value sorts first."""

    pid: int
    arrival_time: int
    priority: int


def sort_key(process: Process) -> tuple[int, int, int]:
    """Priority descending, then arrival time ascending, then pid ascending."""
    return (-process.priority, process.arrival_time, process.pid)


def parse_processes(lines: Iterable[str]) -> list[Process]:
    """Read ``pid,arrival_time,priority`` rows after a header line."""
    rows = iter(lines)
    next(rows, None)
    processes = []
    for line in rows:
        line = line.strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) != 3:
            raise ValueError(f"expected three comma-separated fields: {line!r}")
        try:
            pid, arrival_time, priority = (int(field) for field in fields)
        except ValueError as exc:
            raise ValueError(f"invalid process row: {line!r}") from exc
        processes.append(Process(pid, arrival_time, priority))
    return processes


def sort_processes(processes: Iterable[Process]) -> list[Process]:
    return sorted(processes, key=sort_key)


def format_process(process: Process) -> str:
    return f"{process.pid} ({process.priority}, {process.arrival_time})"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sort processes by priority.")
    parser.add_argument("path", nargs="?")
    args = parser.parse_args(argv)
    if args.path is None:
        print("Usage: func-ptr <input-file-path>", file=sys.stderr)
        return 1
    try:
        with open(args.path, encoding="utf-8") as handle:
            processes = parse_processes(handle)
    except OSError:
        print("Error: Invalid filepath", file=sys.stderr)
        return 1
    for process in sort_processes(processes):
        print(format_process(process))
    return 0


if __name__ == "__main__":
    sys.exit(main())