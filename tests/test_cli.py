import random

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _ops(out: str) -> list[str]:
    return out.split()


def test_no_arguments_fails_silently(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize("args", [[""], [" 1 2"], ["1 a"], ["1", "1"], ["2147483648"], ["1", "+"]])
def test_invalid_arguments_print_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3 4"]) == 0
    assert capsys.readouterr().out == ""


def test_two_numbers_swap(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("size", [3, 5, 20])
def test_output_sorts_the_input(capsys, seed, size):
    values = random.Random(seed * 31 + size).sample(range(-500, 500), size)
    assert main([str(v) for v in values]) == 0
    stacks = Stacks(values)
    for op in _ops(capsys.readouterr().out):
        stacks.apply(op)
    assert stacks.is_solved()
    assert stacks.a == sorted(values)


def test_single_string_and_separate_arguments_agree(capsys):
    values = ["5", "-3", "9", "0", "12", "7"]
    main([" ".join(values)])
    joined = capsys.readouterr().out
    main(values)
    separate = capsys.readouterr().out
    assert joined == separate
    assert joined