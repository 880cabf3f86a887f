"""The cost-driven strategy that produces a list of sorting operations."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import deque
from collections.abc import Iterable

from .parsing import is_sorted
from .stacks import Operation

_ROTATIONS = {
    Operation.RA: (-1, 0),
    Operation.RB: (0, -1),
    Operation.RR: (-1, -1),
    Operation.RRA: (1, 0),
    Operation.RRB: (0, 1),
    Operation.RRR: (1, 1),
}


def _rotation_cost(position: int, size: int) -> int:
    return position if position <= size // 2 else size - position


def _target(value: int, ordered: list[int], from_a: bool) -> int:
    if from_a:
        # Closest smaller value, or the biggest when there is none.
        i = bisect_left(ordered, value)
        return ordered[i - 1] if i else ordered[-1]
    # Smallest bigger value, or the smallest when there is none.
    i = bisect_right(ordered, value)
    return ordered[i] if i < len(ordered) else ordered[0]


class _Solver:
    def __init__(self, values: list[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[Operation] = []

    def do(self, op: Operation) -> None:
        self.ops.append(op)
        if op is Operation.SA:
            self.a[0], self.a[1] = self.a[1], self.a[0]
        elif op is Operation.PA:
            self.a.appendleft(self.b.popleft())
        elif op is Operation.PB:
            self.b.appendleft(self.a.popleft())
        else:
            step_a, step_b = _ROTATIONS[op]
            self.a.rotate(step_a)
            self.b.rotate(step_b)

    def simple_sort(self) -> None:
        a = self.a
        biggest = max(a)
        if a[0] == biggest:
            self.do(Operation.RA)
        elif a[1] == biggest:
            self.do(Operation.RRA)
        if a[0] > a[1]:
            self.do(Operation.SA)

    def _cheapest(self, src: deque[int], dst: deque[int], from_a: bool) -> tuple[int, int]:
        ordered = sorted(dst)
        n_src, n_dst = len(src), len(dst)
        dst_positions = {value: i for i, value in enumerate(dst)}
        best: tuple[int, int, int] | None = None
        for position, value in enumerate(src):
            target = _target(value, ordered, from_a)
            cost = _rotation_cost(position, n_src) + _rotation_cost(dst_positions[target], n_dst)
            if best is None or cost < best[0]:
                best = (cost, value, target)
        assert best is not None
        return best[1], best[2]

    def _rotate_to_top(self, on_a: bool, value: int, size: int) -> None:
        stack = self.a if on_a else self.b
        forward = stack.index(value) <= size // 2
        if on_a:
            op = Operation.RA if forward else Operation.RRA
        else:
            op = Operation.RB if forward else Operation.RRB
        while stack[0] != value:
            self.do(op)

    def move(self, from_a: bool) -> None:
        src, dst = (self.a, self.b) if from_a else (self.b, self.a)
        n_src, n_dst = len(src), len(dst)
        item, target = self._cheapest(src, dst, from_a)
        src_upper = src.index(item) <= n_src // 2
        dst_upper = dst.index(target) <= n_dst // 2
        if src_upper == dst_upper:
            op = Operation.RR if src_upper else Operation.RRR
            while src[0] != item and dst[0] != target:
                self.do(op)
        self._rotate_to_top(from_a, item, n_src)
        self._rotate_to_top(not from_a, target, n_dst)
        self.do(Operation.PB if from_a else Operation.PA)

    def full_sort(self) -> None:
        remaining = len(self.a)
        for _ in range(2):
            remaining -= 1
            if remaining < 3 or is_sorted(self.a):
                break
            self.do(Operation.PB)
        while True:
            remaining -= 1
            if remaining < 3 or is_sorted(self.a):
                break
            self.move(from_a=True)
        self.simple_sort()
        while self.b:
            self.move(from_a=False)
        self._rotate_to_top(True, min(self.a), len(self.a))


def sort_operations(values: Iterable[int]) -> list[Operation]:
    """Return operations that sort ``values`` (top first) into stack a.

    Already sorted input needs no operations. Raises ValueError if the
    values are not distinct.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    if is_sorted(values):
        return []
    solver = _Solver(values)
    if len(values) == 2:
        solver.do(Operation.SA)
    elif len(values) == 3:
        solver.simple_sort()
    else:
        solver.full_sort()
    return solver.ops