import pytest

from bigcalc.cli import main, run
from bigcalc.digits import ValidationError


def test_addition_output():
    assert run(["12", "+", "30"]) == f"Addition Result: {12 + 30}\n"


def test_subtraction_negative_output():
    assert run(["5", "-", "12"]) == f"Subtraction result: -{12 - 5}\n"


def test_subtraction_positive_output():
    assert run(["120", "-", "7"]) == f"Subtraction result: {120 - 7}\n"


def test_multiplication_output():
    assert run(["123", "x", "45"]) == f"Multiplication result:{123 * 45}\n"


def test_division_greater_output():
    assert run(["100", "/", "7"]) == f"Division result :{100 // 7}\n"


def test_division_by_one_prints_twice():
    assert run(["42", "/", "1"]) == "42\n42\n"


def test_division_smaller_prints_zero_twice():
    assert run(["3", "/", "7"]) == "0\n0\n"


def test_division_equal_prints_one_twice():
    assert run(["9", "/", "9"]) == "1\n1\n"


@pytest.mark.parametrize("argv", [["1", "*", "2"], ["1", "+"], ["a", "+", "1"]])
def test_run_rejects_invalid(argv):
    with pytest.raises(ValidationError):
        run(argv)


def test_main_invalid_prints_error(capsys):
    assert main(["1", "?", "2"]) == 255
    assert capsys.readouterr().out == "ERROR"


def test_main_success(capsys):
    assert main(["2", "x", "21"]) == 0
    assert capsys.readouterr().out == f"Multiplication result:{2 * 21}\n"


def test_main_division_by_zero(capsys):
    assert main(["5", "/", "0"]) == 255
    captured = capsys.readouterr()
    assert "division by zero" in captured.err
    assert captured.out == ""