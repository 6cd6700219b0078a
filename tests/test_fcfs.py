from cpusched.fcfs import first_come_first_serve
from cpusched.process import Process


def _sample():
    return [Process("P1", 2, 3), Process("P2", 0, 5), Process("P3", 1, 2)]


def test_empty_input_gives_empty_schedule():
    assert len(first_come_first_serve([])) == 0


def test_runs_in_arrival_order():
    schedule = first_come_first_serve(_sample())
    assert [r.process.name for r in schedule] == ["P2", "P3", "P1"]


def test_back_to_back_execution():
    schedule = first_come_first_serve(_sample())
    results = list(schedule)
    assert results[0].response_time == 0
    for previous, current in zip(results, results[1:]):
        assert current.response_time == previous.completion_time
    for r in results:
        assert r.completion_time - r.response_time == r.process.burst_time
        assert r.waiting_time == r.response_time
    assert results[-1].completion_time == sum(p.burst_time for p in _sample())


def test_arrival_gap_is_ignored():
    schedule = first_come_first_serve([Process("A", 5, 2)])
    (result,) = schedule
    assert result.response_time == 0
    assert result.completion_time == 2
    assert result.turnaround_time == result.completion_time - 5


def test_averages_match_results():
    schedule = first_come_first_serve(_sample())
    averages = schedule.averages()
    waits = [r.waiting_time for r in schedule]
    assert averages["waiting"] == sum(waits) / len(waits)
    assert averages["response"] == averages["waiting"]


def test_format_mentions_every_process():
    text = first_come_first_serve(_sample()).format()
    for name in ("P1", "P2", "P3"):
        assert f"Process {name}:" in text
    assert "Average Turn Around Time for 3 Processes: " in text