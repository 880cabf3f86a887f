"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise, takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1
_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


class ArgumentError(ValueError):
    """The command-line arguments do not describe a valid stack."""


def _sign_and_digits(text: str) -> tuple[bool, str]:
    body = text.lstrip(_WHITESPACE)
    negative = body.startswith("-")
    if body[:1] in ("-", "+"):
        body = body[1:]
    return negative, "".join(takewhile(lambda ch: ch in _DIGITS, body))


def _to_int32(number: int) -> int:
    return (number - INT_MIN) % 2**32 + INT_MIN


def atol(text: str) -> int:
    """Read a leading, optionally signed decimal number; 0 if there is none.

    Leading whitespace is skipped and anything after the digits ignored.
    The value is not bounded.
    """
    negative, digits = _sign_and_digits(text)
    number = int(digits) if digits else 0
    return -number if negative else number


def atoi(text: str) -> int:
    """Read a leading number like :func:`atol`, with 32-bit int semantics.

    A value that no longer fits a 64-bit signed integer while being read
    gives -1 (positive) or 0 (negative); the result wraps to 32 bits.
    """
    negative, digits = _sign_and_digits(text)
    number = 0
    for ch in digits:
        number = number * 10 + int(ch)
        if number > _LONG_MAX:
            return 0 if negative else -1
    return _to_int32(-number if negative else number)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def _is_number(token: str) -> bool:
    body = token[1:] if token[:1] in ("-", "+") else token
    return bool(body) and all(ch in _DIGITS for ch in body)


def validate(tokens: Sequence[str]) -> None:
    """Raise ArgumentError unless every token is a distinct 32-bit integer."""
    tokens = list(tokens)
    for position, token in enumerate(tokens):
        value = atol(token)
        if not INT_MIN <= value <= INT_MAX:
            raise ArgumentError(f"number out of range: {token!r}")
        if not _is_number(token):
            raise ArgumentError(f"not a number: {token!r}")
        if any(atoi(other) == value for other in tokens[position + 1:]):
            raise ArgumentError(f"duplicate number: {token!r}")


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the initial stack, top first.

    A single argument is split on spaces. An empty first argument, or one
    starting with a space, is an error. No arguments give an empty list.
    """
    args = list(args)
    if not args:
        return []
    first = args[0]
    if not first or first[0] == " ":
        raise ArgumentError("first argument is empty or starts with a space")
    tokens = split_words(first, " ") if len(args) == 1 else args
    validate(tokens)
    return [atoi(token) for token in tokens]


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease."""
    return all(x <= y for x, y in pairwise(values))