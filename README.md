# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
instructions, and check whether a given instruction sequence sorts a list.

## Instructions

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top goes to the bottom      |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down: the bottom goes to the top    |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

A swap on a stack with fewer than two elements and a push from an empty
stack do nothing.

## Installation

    pip install .

## Sorting

Give the numbers as separate arguments, or as one argument separated by
spaces. The first number is the top of stack `a`.

    push-swap 3 2 1 4
    push-swap "3 2 1 4"

The instructions that sort the numbers in ascending order are printed one per
line. Nothing is printed when the input is already sorted. With no arguments
nothing is printed and the exit status is 1. Non-numeric input, values
outside the 32-bit signed integer range, duplicates, and a first argument that
is empty or starts with a space print `Error` to standard error and exit with
status 1.

## Checking

The checker takes the same arguments and reads instructions, one per line,
from standard input:

    push-swap 5 1 4 2 3 | pushswap-checker 5 1 4 2 3

It prints `OK` when the instructions leave `a` sorted and `b` empty, and `KO`
otherwise. If the instructions leave `a` empty, `KO` goes to standard error
and the exit status is 1. A line that is not exactly an instruction name
followed by a newline prints `Error` to standard error and exits with
status 1.

## Library use

    from pushswap.sorter import sort_operations
    from pushswap.checker import check

    ops = sort_operations([3, 2, 1, 4])
    assert check([3, 2, 1, 4], ops)

- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, top first),
  applies `Operation` values or their names with `apply`, and reports
  `is_solved()`. `parse_operation` reads one newline-terminated instruction
  line.
- `pushswap.parsing.parse_arguments` turns command-line words into validated
  integers and raises `ArgumentError` on bad input; `validate`, `atoi`,
  `atol`, `split_words` and `is_sorted` are the pieces it is built from.
- `pushswap.sorter.sort_operations` returns the list of operations that sorts
  distinct values, and raises `ValueError` for repeated values.
- `pushswap.checker.read_commands` yields operations from an iterable of
  lines and raises `CommandError` on an invalid line; `check` runs
  operations and tells whether they sort the values.

## Tests

    pip install .[test]
    pytest