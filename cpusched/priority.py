"""Priority scheduling; a lower number means a higher priority."""

from __future__ import annotations

from typing import Iterable

from cpusched.process import Process, ProcessResult, Schedule, sort_by_arrival


def priority_non_preemptive(processes: Iterable[Process]) -> Schedule:
    """Run the highest-priority ready process to completion, then choose again.

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
        chosen = min(ready, key=lambda i: ordered[i].priority)
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


def priority_preemptive(processes: Iterable[Process]) -> Schedule:
    """Run the highest-priority ready process one time unit at a time.

    A newly arrived process with a higher priority takes over at the next
    tick. Ties go to the process earliest in arrival order.
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
        chosen = min(ready, key=lambda i: ordered[i].priority)
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