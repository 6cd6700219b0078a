"""Shortest-job-first scheduling, with and without preemption."""

from __future__ import annotations

from typing import Iterable

from cpusched.process import Process, ProcessResult, Schedule, sort_by_arrival


def shortest_job_first(processes: Iterable[Process]) -> Schedule:
    """Run the ready process with the shortest burst to completion.

    Ties go to the process earliest in arrival order. When nothing is ready
    the clock jumps to the next arrival.
    """
    ordered = sort_by_arrival(processes)
    pending = list(range(len(ordered)))
    response: dict[int, int] = {}
    completion: dict[int, int] = {}
    clock = 0
    while pending:
        ready = [i for i in pending if ordered[i].arrival_time <= clock]
        if not ready:
            clock = min(ordered[i].arrival_time for i in pending)
            continue
        chosen = min(ready, key=lambda i: ordered[i].burst_time)
        pending.remove(chosen)
        response[chosen] = clock
        clock += ordered[chosen].burst_time
        completion[chosen] = clock
    return Schedule(
        tuple(
            ProcessResult(proc, response_time=response[i], completion_time=completion[i])
            for i, proc in enumerate(ordered)
        )
    )


def shortest_remaining_time_first(processes: Iterable[Process]) -> Schedule:
    """Run the ready process with the least remaining time, one unit at a time.

    Ties go to the process earliest in arrival order.
    """
    ordered = sort_by_arrival(processes)
    remaining = [proc.burst_time for proc in ordered]
    response: dict[int, int] = {}
    completion: dict[int, int] = {}
    clock = 0
    while any(remaining):
        pending = [i for i, left in enumerate(remaining) if left > 0]
        ready = [i for i in pending if ordered[i].arrival_time <= clock]
        if not ready:
            clock = min(ordered[i].arrival_time for i in pending)
            continue
        chosen = min(ready, key=lambda i: remaining[i])
        response.setdefault(chosen, clock)
        remaining[chosen] -= 1
        clock += 1
        if remaining[chosen] == 0:
            completion[chosen] = clock
    return Schedule(
        tuple(
            ProcessResult(proc, response_time=response[i], completion_time=completion[i])
            for i, proc in enumerate(ordered)
        )
    )