"""Interactive command that reads processes and prints a schedule report."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Iterator, TextIO, TypeVar

from cpusched.fcfs import first_come_first_serve
from cpusched.priority import priority_non_preemptive, priority_preemptive
from cpusched.process import Process, Schedule
from cpusched.round_robin import round_robin
from cpusched.sjf import shortest_job_first, shortest_remaining_time_first

T = TypeVar("T")

_SIMPLE: dict[str, Callable[[Iterable[Process]], Schedule]] = {
    "fcfs": first_come_first_serve,
    "sjf": shortest_job_first,
    "srtf": shortest_remaining_time_first,
    "priority": priority_non_preemptive,
    "priority-preemptive": priority_preemptive,
}
_ROUND_ROBIN = "rr"
_WITH_PRIORITY = frozenset({"priority", "priority-preemptive"})


class InputError(ValueError):
    """Raised when the interactive input is missing or malformed."""


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, convert: Callable[[str], T], out: TextIO) -> T:
    out.write(prompt)
    out.flush()
    try:
        token = next(tokens)
    except StopIteration:
        raise InputError("unexpected end of input") from None
    try:
        return convert(token)
    except ValueError:
        raise InputError(f"invalid value {token!r}") from None


def _read_and_schedule(algorithm: str, tokens: Iterator[str], out: TextIO) -> Schedule:
    is_rr = algorithm == _ROUND_ROBIN
    quantum = 0
    if is_rr:
        quantum = _ask(tokens, "\nEnter Time Quantum: ", int, out)
        count = _ask(tokens, "\nEnter no. of processes: ", int, out)
    else:
        count = _ask(tokens, "Enter no. of processes: ", int, out)
    if count <= 0:
        raise InputError(f"number of processes must be positive, got {count}")

    name_lead = "" if is_rr else "\n"
    processes = []
    for number in range(1, count + 1):
        name = _ask(tokens, f"{name_lead}Enter Process Name for {number}: ", str, out)
        arrival = _ask(tokens, f"Enter Arrival Time for Process {number}: ", int, out)
        burst = _ask(tokens, f"Enter Burst Time for Process {number}: ", int, out)
        priority = 0
        if algorithm in _WITH_PRIORITY:
            priority = _ask(tokens, f"Enter Priority for Process {number}: ", int, out)
        processes.append(Process(name, arrival, burst, priority))

    if is_rr:
        return round_robin(processes, quantum)
    return _SIMPLE[algorithm](processes)


def main(argv: list[str] | None = None) -> int:
    """Prompt for processes on standard input and print the schedule."""
    parser = argparse.ArgumentParser(
        prog="cpusched",
        description="Simulate a CPU scheduling algorithm on processes read from stdin.",
    )
    parser.add_argument(
        "algorithm",
        choices=sorted([*_SIMPLE, _ROUND_ROBIN]),
        help="scheduling algorithm to run",
    )
    args = parser.parse_args(argv)

    try:
        schedule = _read_and_schedule(args.algorithm, _tokens(sys.stdin), sys.stdout)
    except ValueError as exc:
        sys.stdout.write("\n")
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write("\n\n" + schedule.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())