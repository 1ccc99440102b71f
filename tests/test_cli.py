import random

import pytest

from pushswap.cli import main, solve
from pushswap.stacks import Stacks


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        stacks.apply(op)
    return stacks


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4]) == []
    assert solve([7]) == []


@pytest.mark.parametrize("size", [2, 3, 5, 12, 100])
def test_solve_produces_sorting_sequence(size):
    values = random.Random(size).sample(range(-1000, 1000), size)
    ops = solve(values)
    stacks = _replay(values, ops)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_main_prints_instructions(capsys):
    args = ["3 1", "2", "-5", "4"]
    assert main(args) == 0
    out = capsys.readouterr().out
    ops = out.split()
    stacks = _replay([3, 1, 2, -5, 4], ops)
    assert list(stacks.a) == [-5, 1, 2, 3, 4]
    assert out.endswith("\n")


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["2147483648"], ["-2147483649"], ["1 a"], [""], ["1-2"], ["+"]],
)
def test_main_rejects_bad_input(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_without_arguments_is_silent(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_main_accepts_int_limits(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    ops = capsys.readouterr().out.split()
    stacks = _replay([2147483647, -2147483648], ops)
    assert list(stacks.a) == [-2147483648, 2147483647]