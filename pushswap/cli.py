"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ArgumentError, parse_arguments
from .sorter import sort_operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one sorting operation per line and return the exit status.

    With no arguments nothing is printed and the status is 1. Invalid
    arguments print ``Error`` on standard error and give status 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except ArgumentError:
        print("Error", file=sys.stderr)
        return 1
    for op in sort_operations(values):
        print(op)
    return 0


if __name__ == "__main__":
    sys.exit(main())