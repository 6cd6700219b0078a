"""Round-robin scheduling with a fixed time quantum."""

from __future__ import annotations

from typing import Iterable

from cpusched.process import Process, ProcessResult, Schedule


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Cycle through the processes in the order given, running each for a quantum.

    The clock starts at the arrival time of the first process given. Each
    pass visits every unfinished process that has arrived by the current
    time; a process needing no more than a quantum runs to completion. If a
    pass finds nothing ready, the clock jumps to the next arrival. Results
    keep the order of the input.
    """
    if quantum <= 0:
        raise ValueError(f"time quantum must be positive, got {quantum}")
    ordered = list(processes)
    if not ordered:
        raise ValueError("round robin needs at least one process")

    remaining = [proc.burst_time for proc in ordered]
    response: dict[int, int] = {}
    completion: dict[int, int] = {}
    clock = ordered[0].arrival_time

    while any(remaining):
        progressed = False
        for index, proc in enumerate(ordered):
            if remaining[index] == 0 or proc.arrival_time > clock:
                continue
            progressed = True
            response.setdefault(index, clock)
            run = min(quantum, remaining[index])
            clock += run
            remaining[index] -= run
            if remaining[index] == 0:
                completion[index] = clock
        if not progressed:
            clock = min(
                proc.arrival_time
                for index, proc in enumerate(ordered)
                if remaining[index] > 0
            )

    return Schedule(
        tuple(
            ProcessResult(
                proc, response_time=response[i], completion_time=completion[i]
            )
            for i, proc in enumerate(ordered)
        )
    )