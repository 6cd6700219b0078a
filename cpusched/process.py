"""Process descriptions, per-process results and whole schedules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

_AVERAGE_LABELS = (
    ("response", "Response"),
    ("completion", "Completion"),
    ("waiting", "Waiting"),
    ("turnaround", "Turn Around"),
)


@dataclass(frozen=True)
class Process:
    """A job to be scheduled: when it arrives, how long it runs, its priority."""

    name: str
    arrival_time: int
    burst_time: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst_time <= 0:
            raise ValueError(
                f"burst time of process {self.name!r} must be positive, "
                f"got {self.burst_time}"
            )


@dataclass(frozen=True)
class ProcessResult:
    """Timing of one process within a schedule.

    ``wait`` holds a waiting time fixed by the algorithm; when it is None the
    waiting time is the turnaround time less the burst time.
    """

    process: Process
    response_time: int
    completion_time: int
    wait: int | None = field(default=None)

    @property
    def turnaround_time(self) -> int:
        """Completion time less arrival time."""
        return self.completion_time - self.process.arrival_time

    @property
    def waiting_time(self) -> int:
        """Time spent ready but not running."""
        if self.wait is not None:
            return self.wait
        return self.turnaround_time - self.process.burst_time


@dataclass(frozen=True)
class Schedule:
    """The results of a scheduling run, in arrival order."""

    results: tuple[ProcessResult, ...] = ()

    def __iter__(self) -> Iterator[ProcessResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def averages(self) -> dict[str, float]:
        """Mean response, completion, waiting and turnaround times."""
        if not self.results:
            raise ValueError("cannot average an empty schedule")
        count = len(self.results)
        return {
            "response": sum(r.response_time for r in self.results) / count,
            "completion": sum(r.completion_time for r in self.results) / count,
            "waiting": sum(r.waiting_time for r in self.results) / count,
            "turnaround": sum(r.turnaround_time for r in self.results) / count,
        }

    def format(self) -> str:
        """Render the per-process report followed by the averages."""
        parts = [
            f"\nProcess {r.process.name}:\n"
            f"Response Time: {r.response_time}\n"
            f"Completion Time: {r.completion_time}\n"
            f"Waiting Time: {r.waiting_time}\n"
            f"Turn Around Time: {r.turnaround_time}\n\n"
            for r in self.results
        ]
        if self.results:
            averages = self.averages()
            count = len(self.results)
            parts.extend(
                f"\n\nAverage {label} Time for {count} Processes: {averages[key]:g}"
                for key, label in _AVERAGE_LABELS
            )
            parts.append("\n")
        return "".join(parts)


def sort_by_arrival(processes: Iterable[Process]) -> list[Process]:
    """Order processes by arrival time using exchange sort.

    The exchange sort is not stable; ties keep the order it produces, which
    decides tie-breaking in the schedulers.
    """
    ordered = list(processes)
    for i in range(len(ordered) - 1):
        for j in range(i + 1, len(ordered)):
            if ordered[j].arrival_time < ordered[i].arrival_time:
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered