# cpusched

Simulators for the classic CPU scheduling algorithms taught in operating
systems courses. Given a set of processes with arrival times and burst
times (and priorities where they apply), each algorithm works out when
every process first runs and when it finishes, and from that its waiting
and turnaround times, along with the averages over all processes.

| Algorithm | Function | Command name |
|---|---|---|
| First come, first served | `cpusched.fcfs.first_come_first_serve` | `fcfs` |
| Shortest job first (non-preemptive) | `cpusched.sjf.shortest_job_first` | `sjf` |
| Shortest remaining time first | `cpusched.sjf.shortest_remaining_time_first` | `srtf` |
| Priority, non-preemptive | `cpusched.priority.priority_non_preemptive` | `priority` |
| Priority, preemptive | `cpusched.priority.priority_preemptive` | `priority-preemptive` |
| Round robin with a fixed quantum | `cpusched.round_robin.round_robin` | `rr` |

## Behaviour worth knowing

- For priority scheduling a lower number means a higher priority.
- All algorithms except round robin first order the processes by arrival
  time with `sort_by_arrival`. That sort is an exchange sort and is not
  stable, so processes that arrive together may not keep their input
  order; ties in priority or burst length go to whichever comes first in
  the sorted order.
- First come, first served runs the processes back to back from time
  zero: each process's waiting time is the sum of the bursts before it,
  and idle gaps between arrivals are not counted.
- The shortest-job and priority schedulers jump the clock to the next
  arrival when nothing is ready. The preemptive variants advance one time
  unit at a time.
- Round robin keeps the processes in the order given, starts the clock at
  the arrival time of the first process in that order, and reports results
  in input order.
- A process's burst time must be positive, and the round robin quantum
  must be positive; otherwise `ValueError` is raised. Round robin also
  raises `ValueError` for an empty list.

## Installation

```
pip install .
```

## Command line

```
cpusched ALGORITHM
```

`ALGORITHM` is one of `fcfs`, `priority`, `priority-preemptive`, `rr`,
`sjf`, `srtf`. The command prompts on standard input for the number of
processes and, for each one, its name, arrival time and burst time (and
its priority for the two priority algorithms). For `rr` it first asks for
the time quantum. Answers are read as whitespace-separated tokens, so
they may also be piped in:

```
printf '3\nA 0 5\nB 1 3\nC 2 1\n' | cpusched sjf
```

It then prints the response, completion, waiting and turnaround time of
each process followed by the averages. Missing or malformed input, or a
process count that is not positive, prints `error: ...` on standard error
and exits with status 1.

## Library use

```python
from cpusched.process import Process
from cpusched.fcfs import first_come_first_serve
from cpusched.round_robin import round_robin

processes = [
    Process("A", arrival_time=0, burst_time=5),
    Process("B", arrival_time=1, burst_time=3),
    Process("C", arrival_time=2, burst_time=1, priority=1),
]

schedule = first_come_first_serve(processes)
print(schedule.format())

rr = round_robin(processes, 2)
print(rr.averages())
```

Each algorithm returns a `Schedule`, which can be iterated and has a
length. Its entries are `ProcessResult` records holding the `process`,
its `response_time` and `completion_time`, and the properties
`turnaround_time` (completion less arrival) and `waiting_time`.
`Schedule.averages()` returns a dict with the mean `response`,
`completion`, `waiting` and `turnaround` times (it raises `ValueError` on
an empty schedule), and `Schedule.format()` renders the report that the
command prints.

## What it does not do

The package computes timings only; it does not draw Gantt charts or keep
a per-tick trace of which process ran when.

## Running the tests

```
pip install .[test]
pytest
```