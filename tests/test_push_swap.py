import pytest

from cursus.push_swap import ArgumentError, is_sorted, main, validate_arguments
from cursus.stacks import Stacks


def test_validate_accepts_signed_numbers():
    assert validate_arguments(["3", "-1", "+7"]) == [3, -1, 7]


def test_validate_accepts_int_bounds():
    assert validate_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


def test_validate_empty_is_empty():
    assert validate_arguments([]) == []


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["-"],
        ["+"],
        ["12a"],
        ["1 2"],
        ["2147483648"],
        ["-2147483649"],
        ["1", "1"],
        ["0", "-0"],
        ["5", "+5"],
    ],
)
def test_validate_rejects(args):
    with pytest.raises(ArgumentError):
        validate_arguments(args)


def test_is_sorted_true_for_ascending():
    assert is_sorted(Stacks([1, 2, 3])) is True


def test_is_sorted_false_for_descending():
    assert is_sorted(Stacks([3, 2, 1])) is False


def test_is_sorted_false_when_b_not_empty():
    stacks = Stacks([1, 2, 3])
    stacks.apply("pb")
    assert is_sorted(stacks) is False


def test_main_prints_nothing_for_sorted_input(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


def test_main_prints_nothing_without_arguments(capsys):
    assert main([]) == 0
    out = capsys.readouterr()
    assert out.out == "" and out.err == ""


def test_main_swaps_two_values(capsys):
    main(["2", "1"])
    assert capsys.readouterr().out == "sa\n"


def test_main_reports_error(capsys):
    assert main(["1", "abc"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize(
    "values",
    [
        [3, 1, 2],
        [5, 4, 3, 2, 1],
        [2, 5, 1, 4, 3],
        [9, -3, 7, 0, 12, 4, -8, 1],
        [10, 30, 20, 50, 40, 60, 5, 70, 15, 25],
    ],
)
def test_main_output_sorts_input(capsys, values):
    main([str(value) for value in values])
    lines = capsys.readouterr().out.splitlines()
    stacks = Stacks(values)
    stacks.run(lines)
    assert list(stacks.a) == sorted(values)
    assert len(stacks.b) == 0