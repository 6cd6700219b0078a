"""First-come, first-served scheduling."""

from __future__ import annotations

from typing import Iterable

from cpusched.process import Process, ProcessResult, Schedule, sort_by_arrival


def first_come_first_serve(processes: Iterable[Process]) -> Schedule:
    """Run processes back to back in arrival order, starting at time zero.

    Each process waits for the sum of the bursts before it; idle gaps
    between arrivals are not accounted for.
    """
    results = []
    elapsed = 0
    for proc in sort_by_arrival(processes):
        results.append(
            ProcessResult(
                proc,
                response_time=elapsed,
                completion_time=elapsed + proc.burst_time,
                wait=elapsed,
            )
        )
        elapsed += proc.burst_time
    return Schedule(tuple(results))