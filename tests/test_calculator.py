import io

import pytest

from syslabs.calculator import add, divide, main, multiply, perform, subtract


@pytest.mark.parametrize("a,b", [(6, 3), (-4, 9), (0, 0), (123, -45)])
def test_add_subtract_round_trip(a, b):
    assert subtract(add(a, b), b) == a


@pytest.mark.parametrize("a,b", [(6, 3), (-4, 9), (7, -2)])
def test_multiply_then_divide(a, b):
    assert divide(multiply(a, b), b) == a


def test_divide_truncates_toward_zero():
    assert divide(-7, 2) == -3
    assert divide(7, -2) == -3


@pytest.mark.parametrize("a,b", [(17, 5), (-17, 5), (17, -5), (-17, -5)])
def test_divide_remainder_has_dividend_sign(a, b):
    remainder = a - divide(a, b) * b
    assert abs(remainder) < abs(b)
    assert remainder == 0 or (remainder > 0) == (a > 0)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide(1, 0)


@pytest.mark.parametrize(
    "choice,func", [("0", add), ("1", subtract), ("2", multiply), ("3", divide)]
)
def test_perform_dispatches(choice, func):
    assert perform(choice, 6, 3) == func(6, 3)


@pytest.mark.parametrize("choice", ["4", "9", "x", ""])
def test_perform_rejects_unknown(choice):
    with pytest.raises(ValueError):
        perform(choice, 6, 3)


def test_main_add(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Adding 'a' and 'b'" in out
    assert f"Result: {add(6, 3)}" in out


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("  4\n"))
    assert main([]) == 0
    assert "Exiting program" in capsys.readouterr().out


def test_main_division_by_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--b", "0"]) == 0
    out = capsys.readouterr().out
    assert "Error: Division by zero" in out
    assert "Result: 0" in out