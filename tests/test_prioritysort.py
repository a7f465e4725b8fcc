import pytest

from syslabs.prioritysort import (
    Process,
    format_process,
    main,
    parse_processes,
    sort_key,
    sort_processes,
)

SAMPLE = [
    "pid,arrival_time,priority",
    "1,4,2",
    "2,1,5",
    "3,2,5",
    "4,0,2",
    "5,7,9",
]


def test_parse_skips_header():
    processes = parse_processes(SAMPLE)
    assert processes[0] == Process(1, 4, 2)
    assert len(processes) == len(SAMPLE) - 1


def test_parse_ignores_blank_lines():
    processes = parse_processes(["header", "", "8, 3, 1", "  "])
    assert processes == [Process(8, 3, 1)]


@pytest.mark.parametrize("row", ["1,2", "1,2,3,4", "a,b,c"])
def test_parse_rejects_malformed_rows(row):
    with pytest.raises(ValueError):
        parse_processes(["header", row])


def test_sort_orders_by_priority_then_arrival():
    result = sort_processes(parse_processes(SAMPLE))
    assert [p.pid for p in result] == [5, 2, 3, 4, 1]


def test_sort_keys_are_non_decreasing_and_permutation():
    processes = parse_processes(SAMPLE)
    result = sort_processes(processes)
    keys = [sort_key(p) for p in result]
    assert keys == sorted(keys)
    assert sorted(result, key=lambda p: p.pid) == sorted(processes, key=lambda p: p.pid)


def test_pid_breaks_ties():
    low, high = Process(2, 0, 1), Process(1, 0, 1)
    assert sort_processes([low, high]) == [high, low]


def test_format_process():
    assert format_process(Process(7, 1, 3)) == "7 (3, 1)"


def test_main_prints_sorted(tmp_path, capsys):
    path = tmp_path / "procs.csv"
    path.write_text("\n".join(SAMPLE) + "\n")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    expected = [format_process(p) for p in sort_processes(parse_processes(SAMPLE))]
    assert lines == expected


def test_main_without_path(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.csv")]) == 1
    assert "Error: Invalid filepath" in capsys.readouterr().err