"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from .parsing import ArgumentError, parse_arguments
from .stacks import Operation, Stacks, parse_operation


class CommandError(ValueError):
    """A line of input is not a valid instruction."""


def read_commands(stream: Iterable[str]) -> Iterator[Operation]:
    """Yield the instructions read from ``stream``, one per line.

    Every line must be exactly an instruction name ended by a newline;
    anything else raises CommandError when it is reached.
    """
    for line in stream:
        try:
            yield parse_operation(line)
        except ValueError as exc:
            raise CommandError(str(exc)) from None


def _run(values: Iterable[int], commands: Iterable[Operation | str]) -> Stacks:
    stacks = Stacks(values)
    for op in commands:
        stacks.apply(op)
    return stacks


def check(values: Iterable[int], commands: Iterable[Operation | str]) -> bool:
    """True when ``commands`` leave ``values`` sorted in a with b empty."""
    return _run(values, commands).is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input, print OK or KO, return the status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        stacks = _run(values, read_commands(sys.stdin))
    except (ArgumentError, CommandError):
        print("Error", file=sys.stderr)
        return 1
    if not stacks.a:
        print("KO", file=sys.stderr)
        return 1
    print("OK" if stacks.is_solved() else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())