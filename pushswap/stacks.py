"""The two stacks and the instructions that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, tops at the left, with a log of instructions.

    Every basic instruction is recorded in ``ops`` even when it has no
    effect. The combined instructions ``ss``, ``rr`` and ``rrr`` record
    their two halves separately.
    """

    _NAMES = frozenset({"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"})

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[str] = []

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(src: deque[int], dst: deque[int]) -> None:
        if src:
            dst.appendleft(src.popleft())

    def sa(self) -> None:
        self._swap(self.a)
        self.ops.append("sa")

    def sb(self) -> None:
        self._swap(self.b)
        self.ops.append("sb")

    def ss(self) -> None:
        self.sa()
        self.sb()

    def pa(self) -> None:
        self._push(self.b, self.a)
        self.ops.append("pa")

    def pb(self) -> None:
        self._push(self.a, self.b)
        self.ops.append("pb")

    def ra(self) -> None:
        self.a.rotate(-1)
        self.ops.append("ra")

    def rb(self) -> None:
        self.b.rotate(-1)
        self.ops.append("rb")

    def rr(self) -> None:
        self.ra()
        self.rb()

    def rra(self) -> None:
        self.a.rotate(1)
        self.ops.append("rra")

    def rrb(self) -> None:
        self.b.rotate(1)
        self.ops.append("rrb")

    def rrr(self) -> None:
        self.rra()
        self.rrb()

    def apply(self, name: str) -> None:
        """Run the instruction called ``name``."""
        if name not in self._NAMES:
            raise ValueError(f"unknown instruction: {name!r}")
        getattr(self, name)()