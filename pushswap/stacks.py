"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction that rearranges the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def parse_operation(line: str) -> Operation:
    """Parse one instruction line as read from input, newline included.

    Raises ValueError if the line is not exactly an instruction name
    followed by a single newline.
    """
    if not line.endswith("\n"):
        raise ValueError(f"instruction line is not terminated: {line!r}")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise ValueError(f"unknown instruction: {line!r}") from None


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dest: deque[int], src: deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stack ``a`` holding the numbers and an initially empty stack ``b``.

    The first element of each sequence is the top of that stack.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._a: deque[int] = deque(values)
        self._b: deque[int] = deque()

    @property
    def a(self) -> list[int]:
        """Contents of stack a, top first."""
        return list(self._a)

    @property
    def b(self) -> list[int]:
        """Contents of stack b, top first."""
        return list(self._b)

    def apply(self, op: Operation | str) -> None:
        """Carry out one operation; a name such as ``"ra"`` is accepted too."""
        op = Operation(op)
        a, b = self._a, self._b
        if op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.PA:
            _push(a, b)
        elif op is Operation.PB:
            _push(b, a)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)

    def is_solved(self) -> bool:
        """True when b is empty and a is non-empty and ascending from the top."""
        if not self._a or self._b:
            return False
        values = self._a
        return all(x <= y for x, y in zip(values, list(values)[1:]))

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"