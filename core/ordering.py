# core/ordering.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Result of comparing two vector clocks under the pointwise partial order

from enum import Enum


class ClockOrdering(Enum):
    """Outcome of a three-way comparison between two vector clocks.

    Vector clocks are only partially ordered, so besides the usual three
    outcomes a comparison may find that neither clock's history contains the
    other's. The race detector reads INCOMPARABLE as "the two events were
    concurrent", which is a meaningful answer rather than a failure.

    Values:
        LESS: Every slot of the left clock is <= the right, and they differ
        EQUAL: The clocks hold the same timestamp in every slot
        GREATER: Every slot of the left clock is >= the right, and they differ
        INCOMPARABLE: Some slot is smaller and another is larger
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1
    INCOMPARABLE = None

    def __str__(self) -> str:
        return self.name

    def reverse(self) -> "ClockOrdering":
        """Return the outcome of the same comparison with operands swapped."""
        if self is ClockOrdering.LESS:
            return ClockOrdering.GREATER
        if self is ClockOrdering.GREATER:
            return ClockOrdering.LESS
        return self

    def is_comparable(self) -> bool:
        """True when the clocks are causally ordered (or equal)."""
        return self is not ClockOrdering.INCOMPARABLE
