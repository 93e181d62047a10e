"""State mutability lattice.

Four-element total order with join:

    PURE < VIEW < NONPAYABLE < PAYABLE
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from functools import total_ordering
from typing import Self

from mutcheck.domain.exceptions import UnknownMutabilityError


@total_ordering
class StateMutability(Enum):
    """Declared or inferred state mutability of a function.

    Value is (order, rendered name). Comparison follows the order,
    so max() over levels is the lattice join.
    """

    PURE = (0, "pure")
    VIEW = (1, "view")
    NONPAYABLE = (2, "nonpayable")
    PAYABLE = (3, "payable")

    @property
    def order(self) -> int:
        """Position in the lattice (0..3)."""
        return self.value[0]

    def render(self) -> str:
        """Human-readable name as written in source."""
        return self.value[1]

    def join(self, other: StateMutability) -> StateMutability:
        """Least upper bound of two levels (max by order)."""
        return self if self.order >= other.order else other

    def for_caller(self) -> StateMutability:
        """Level a caller needs to invoke a function of this level.

        Calling a payable function only requires nonpayable: value
        transfer is a separate write.
        """
        if self is StateMutability.PAYABLE:
            return StateMutability.NONPAYABLE
        return self

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse rendered name back into a level.

        Raises:
            UnknownMutabilityError: If text is not a known level name
        """
        for level in cls:
            if level.render() == text:
                return level
        raise UnknownMutabilityError(text)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, StateMutability):
            return NotImplemented
        return self.order < other.order

    def __str__(self) -> str:
        return self.render()


def join_all(levels: Iterable[StateMutability]) -> StateMutability:
    """Join of all levels. Empty input joins to PURE (bottom)."""
    best = StateMutability.PURE
    for level in levels:
        best = best.join(level)
    return best
