"""CPU scheduling simulation: FCFS, preemptive SJF, priority and round robin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

DEFAULT_QUANTUM = 2
_FIELDS = 6


@dataclass
class Job:
    """A process with its burst, arrival, waiting, turnaround time and priority."""

    pid: int
    burst: int
    arrival: int
    waiting: int = 0
    turnaround: int = 0
    priority: int = 0


def parse_jobs(lines: Iterable[str]) -> list[Job]:
    """Read groups of six integers: pid burst arrival waiting turnaround priority."""
    try:
        numbers = [int(token) for line in lines for token in line.split()]
    except ValueError as exc:
        raise ValueError(f"non-integer field in job data: {exc}") from exc
    if not numbers:
        raise ValueError("no processes in input")
    if len(numbers) % _FIELDS:
        raise ValueError(f"job data must come in groups of {_FIELDS} integers")
    groups = zip(*[iter(numbers)] * _FIELDS)
    return [Job(*group) for group in groups]


def _copy(jobs: Iterable[Job]) -> list[Job]:
    return [replace(job) for job in jobs]


def _set_turnaround(jobs: list[Job]) -> list[Job]:
    for job in jobs:
        job.turnaround = job.burst + job.waiting
    return jobs


def _fcfs_waiting(jobs: list[Job]) -> None:
    previous: Job | None = None
    for job in jobs:
        job.waiting = job.arrival if previous is None else previous.burst + previous.waiting
        previous = job


def fcfs(jobs: Iterable[Job]) -> list[Job]:
    """First come, first served in the given order."""
    result = _copy(jobs)
    _fcfs_waiting(result)
    return _set_turnaround(result)


def sjf(jobs: Iterable[Job]) -> list[Job]:
    """Shortest remaining time first, one time unit at a time."""
    result = _copy(jobs)
    if any(job.burst <= 0 for job in result):
        raise ValueError("burst time must be positive")
    remaining = [job.burst for job in result]
    completed = 0
    t = 0
    while completed < len(result):
        ready = [
            i for i, job in enumerate(result) if remaining[i] > 0 and job.arrival <= t
        ]
        t += 1
        if not ready:
            continue
        current = min(ready, key=remaining.__getitem__)
        remaining[current] -= 1
        if remaining[current] == 0:
            completed += 1
            job = result[current]
            job.waiting = t - job.arrival - job.burst
    return _set_turnaround(result)


def priority(jobs: Iterable[Job]) -> list[Job]:
    """Order by priority, highest value first, then serve first come first served."""
    result = sorted(_copy(jobs), key=lambda job: -job.priority)
    _fcfs_waiting(result)
    return _set_turnaround(result)


def round_robin(jobs: Iterable[Job], quantum: int = DEFAULT_QUANTUM) -> list[Job]:
    """Round robin with the given time quantum; all jobs are taken as present."""
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    result = _copy(jobs)
    remaining = [job.burst for job in result]
    t = 0
    while any(left > 0 for left in remaining):
        for i, job in enumerate(result):
            if remaining[i] <= 0:
                continue
            if remaining[i] > quantum:
                t += quantum
                remaining[i] -= quantum
            else:
                t += remaining[i]
                job.waiting = t - job.burst
                remaining[i] = 0
    return _set_turnaround(result)


def format_metrics(jobs: Sequence[Job]) -> str:
    """Render the per-process table and the average times."""
    if not jobs:
        raise ValueError("no processes to report")
    rows = [
        f"\t{job.pid}\t\t{job.burst}\t\t{job.waiting}\t\t{job.turnaround}\n"
        for job in jobs
    ]
    average_waiting = sum(job.waiting for job in jobs) / len(jobs)
    average_turnaround = sum(job.turnaround for job in jobs) / len(jobs)
    return (
        "\tProcesses\tBurst time\tWaiting time\tTurn around time\n"
        + "".join(rows)
        + f"\nAverage waiting time = {average_waiting:.2f}"
        + f"\nAverage turn around time = {average_turnaround:.2f}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare CPU scheduling policies.")
    parser.add_argument("path", nargs="?")
    parser.add_argument("--quantum", type=int, default=DEFAULT_QUANTUM)
    args = parser.parse_args(argv)
    if args.path is None:
        print("Usage: schedsim <input-file-path>", file=sys.stderr)
        return 1
    try:
        with open(args.path, encoding="utf-8") as handle:
            jobs = parse_jobs(handle)
    except OSError:
        print("Error: Invalid filepath", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    runs = [
        ("FCFS", fcfs(jobs)),
        ("SJF", sjf(jobs)),
        ("Priority", priority(jobs)),
        (f"RR Quantum = {args.quantum}", round_robin(jobs, args.quantum)),
    ]
    for title, scheduled in runs:
        sys.stdout.write(f"\n*********\n{title}\n")
        sys.stdout.write(format_metrics(scheduled))
    return 0


if __name__ == "__main__":
    sys.exit(main())