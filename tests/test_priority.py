import pytest

from cpusched.priority import priority_non_preemptive, priority_preemptive
from cpusched.process import Process


def _sample():
    return [
        Process("P1", 0, 4, priority=2),
        Process("P2", 1, 3, priority=1),
        Process("P3", 2, 1, priority=3),
    ]


def _by_name(schedule):
    return {r.process.name: r for r in schedule}


@pytest.mark.parametrize("scheduler", [priority_non_preemptive, priority_preemptive])
def test_common_invariants(scheduler):
    schedule = scheduler(_sample())
    results = list(schedule)
    assert [r.process.name for r in results] == ["P1", "P2", "P3"]
    for r in results:
        assert r.waiting_time == r.turnaround_time - r.process.burst_time
        assert r.waiting_time >= 0
        assert r.response_time >= r.process.arrival_time
    assert max(r.completion_time for r in results) == sum(p.burst_time for p in _sample())


@pytest.mark.parametrize("scheduler", [priority_non_preemptive, priority_preemptive])
def test_empty_input(scheduler):
    assert len(scheduler([])) == 0


def test_non_preemptive_runs_to_completion():
    schedule = _by_name(priority_non_preemptive(_sample()))
    for r in schedule.values():
        assert r.completion_time - r.response_time == r.process.burst_time
    assert schedule["P2"].response_time == schedule["P1"].completion_time
    assert schedule["P3"].response_time == schedule["P2"].completion_time


def test_preemptive_higher_priority_takes_over():
    schedule = _by_name(priority_preemptive(_sample()))
    assert schedule["P1"].response_time == 0
    assert schedule["P2"].response_time == 1
    assert schedule["P2"].completion_time == 4
    assert schedule["P1"].completion_time == 7


def test_simultaneous_arrivals_agree():
    procs = [
        Process("A", 0, 3, priority=3),
        Process("B", 0, 2, priority=1),
        Process("C", 0, 4, priority=2),
    ]
    plain = priority_non_preemptive(procs)
    preempt = priority_preemptive(procs)
    assert [r.completion_time for r in plain] == [r.completion_time for r in preempt]
    order = sorted(plain, key=lambda r: r.response_time)
    assert [r.process.name for r in order] == ["B", "C", "A"]


@pytest.mark.parametrize("scheduler", [priority_non_preemptive, priority_preemptive])
def test_equal_priority_goes_to_earlier_arrival(scheduler):
    procs = [Process("late", 0, 2, priority=1), Process("early", 0, 2, priority=1)]
    results = _by_name(scheduler(procs))
    assert results["late"].response_time < results["early"].response_time


@pytest.mark.parametrize("scheduler", [priority_non_preemptive, priority_preemptive])
def test_idle_until_first_arrival(scheduler):
    (result,) = scheduler([Process("A", 3, 2, priority=1)])
    assert result.response_time == 3
    assert result.completion_time == 3 + 2
    assert result.waiting_time == 0