import pytest

from syslabs.scheduling import (
    Job,
    fcfs,
    format_metrics,
    main,
    parse_jobs,
    priority,
    round_robin,
    sjf,
)

SAMPLE = [
    "1 10 0 0 0 2\n",
    "2 4 1 0 0 5\n",
    "3 7 2 0 0 1\n",
    "4 3 3 0 0 4\n",
]


def jobs():
    return parse_jobs(SAMPLE)


def test_parse_reads_six_fields():
    parsed = jobs()
    assert parsed[1] == Job(pid=2, burst=4, arrival=1, waiting=0, turnaround=0, priority=5)
    assert len(parsed) == len(SAMPLE)


def test_parse_ignores_line_layout():
    assert parse_jobs(["1 10 0", "0 0 2 2 4", "1 0 0 5"]) == parse_jobs(SAMPLE[:2])


@pytest.mark.parametrize("lines", [[], ["1 2 3 4 5"], ["1 2 3 4 5 x"]])
def test_parse_rejects_bad_input(lines):
    with pytest.raises(ValueError):
        parse_jobs(lines)


def test_fcfs_waiting_chain():
    result = fcfs(jobs())
    assert result[0].waiting == result[0].arrival
    for prev, cur in zip(result, result[1:]):
        assert cur.waiting == prev.waiting + prev.burst
    assert all(j.turnaround == j.burst + j.waiting for j in result)


def test_algorithms_do_not_mutate_input():
    original = jobs()
    snapshot = [Job(**vars(j)) for j in original]
    fcfs(original)
    sjf(original)
    priority(original)
    round_robin(original, 2)
    assert original == snapshot


def test_sjf_completes_all_work():
    result = sjf(jobs())
    completions = [j.arrival + j.turnaround for j in result]
    assert max(completions) == sum(j.burst for j in result)
    assert all(j.waiting >= 0 for j in result)


def test_sjf_shortest_job_first_when_all_present():
    work = [Job(pid=i, burst=b, arrival=0) for i, b in enumerate([6, 8, 7, 3])]
    result = sjf(work)
    shortest = min(result, key=lambda j: j.burst)
    longest = max(result, key=lambda j: j.burst)
    assert shortest.waiting == 0
    assert longest.waiting == sum(j.burst for j in result) - longest.burst


def test_sjf_rejects_zero_burst():
    with pytest.raises(ValueError):
        sjf([Job(pid=1, burst=0, arrival=0)])


def test_priority_orders_highest_first():
    result = priority(jobs())
    values = [j.priority for j in result]
    assert values == sorted(values, reverse=True)
    assert result[0].waiting == result[0].arrival


def test_round_robin_with_large_quantum_matches_fcfs():
    work = [Job(pid=i, burst=b, arrival=0) for i, b in enumerate([5, 2, 9])]
    rr = round_robin(work, 100)
    first = fcfs(work)
    assert [j.waiting for j in rr] == [j.waiting for j in first]


def test_round_robin_total_time():
    result = round_robin(jobs(), 2)
    finishes = [j.waiting + j.burst for j in result]
    assert max(finishes) == sum(j.burst for j in result)


def test_round_robin_rejects_bad_quantum():
    with pytest.raises(ValueError):
        round_robin(jobs(), 0)


def test_format_metrics():
    work = [
        Job(pid=1, burst=3, arrival=0, waiting=1, turnaround=4),
        Job(pid=2, burst=5, arrival=0, waiting=2, turnaround=7),
    ]
    text = format_metrics(work)
    assert text.startswith("\tProcesses\tBurst time\tWaiting time\tTurn around time\n")
    assert "\t1\t\t3\t\t1\t\t4\n" in text
    assert "\nAverage waiting time = 1.50" in text


def test_format_metrics_empty_raises():
    with pytest.raises(ValueError):
        format_metrics([])


def test_main_runs_all_policies(tmp_path, capsys):
    path = tmp_path / "jobs.txt"
    path.write_text("".join(SAMPLE))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    for title in ("\nFCFS\n", "\nSJF\n", "\nPriority\n", "\nRR Quantum = 2\n"):
        assert title in out
    assert out.count("Average waiting time") == 4


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error: Invalid filepath" in capsys.readouterr().err


def test_main_without_args(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err