# core/vector_clock.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Canonical vector clock with join, increment and partial-order comparison

"""
Vector clock used by the data-race detector.

Conceptually a clock maps every vector index to a timestamp, with unmapped
indices reading as 0. Physically it is the sequence of timestamps for
indices ``0..n-1`` with one invariant every mutator maintains: the last
stored timestamp is never 0. The all-zero clock is therefore the empty
sequence, each clock value has exactly one stored length, and structural
equality and hashing of the sequence are correct.

The invariant also lets comparisons stop at the end of the shorter
sequence: a longer tail is known to carry at least one non-zero slot, so it
can only push the result towards "the longer clock is larger".
"""

from __future__ import annotations
from typing import Iterable, Tuple

from .config import VTIMESTAMP_MAX
from .exceptions import TimestampOverflowError
from .ordering import ClockOrdering
from .small_vec import SmallVec
from .vector_idx import VectorIdx
from utils.logger import get_logger


def _position_of(idx: VectorIdx) -> int:
    if not isinstance(idx, VectorIdx):
        raise TypeError(f"Expected VectorIdx, got {type(idx).__name__}")
    return idx.index()


def _check_timestamp(timestamp: int) -> int:
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise TypeError(f"Timestamp must be an int, got {type(timestamp).__name__}")
    if not 0 <= timestamp <= VTIMESTAMP_MAX:
        raise TimestampOverflowError(
            f"Timestamp {timestamp} out of range [0, {VTIMESTAMP_MAX}]"
        )
    return timestamp


class VClock:
    """Mutable vector clock for happens-before tracking.

    A clock is owned by one thread, lock or memory location at a time and
    carries no synchronization of its own. Comparison operators implement
    the pointwise partial order: ``a <= b`` holds when every slot of ``a`` is
    at most the matching slot of ``b``. Clocks for which neither ``a <= b``
    nor ``b <= a`` holds are concurrent.

    Hashing follows the current value. A clock must not be mutated while it
    is a set member or dictionary key.
    """

    __slots__ = ("_vec",)

    def __init__(self) -> None:
        self._vec = SmallVec()

    # ---- construction -------------------------------------------------

    @classmethod
    def zero(cls) -> VClock:
        """Return the all-zero clock."""
        return cls()

    @classmethod
    def new_with_index(cls, index: VectorIdx, timestamp: int) -> VClock:
        """Create a clock that is zero everywhere except ``timestamp`` at ``index``.

        A zero timestamp yields the all-zero clock.
        """
        position = _position_of(index)
        _check_timestamp(timestamp)

        clock = cls()
        clock._vec.resize(position + 1)
        clock._vec[position] = timestamp
        if timestamp == 0:
            clock._trim_trailing_zeros("new_with_index")
        return clock

    @classmethod
    def from_timestamps(cls, timestamps: Iterable[int]) -> VClock:
        """Create a clock from explicit per-slot timestamps.

        Slot ``i`` takes the ``i``-th value; trailing zeros are dropped.
        """
        clock = cls()
        clock._vec.extend(_check_timestamp(ts) for ts in timestamps)
        clock._trim_trailing_zeros("from_timestamps")
        return clock

    def copy(self) -> VClock:
        clock = VClock()
        clock._vec.extend(self._vec)
        return clock

    def __copy__(self) -> VClock:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> VClock:
        return self.copy()

    def clone_from(self, source: VClock) -> None:
        """Overwrite this clock with the value of ``source``, reusing storage."""
        if source is self:
            return
        self._vec.clear()
        self._vec.extend(source._vec)

    # ---- read access --------------------------------------------------

    def as_slice(self) -> Tuple[int, ...]:
        """Return the canonical timestamp sequence (never ends in 0)."""
        return self._vec.to_tuple()

    def is_zero_vector(self) -> bool:
        return len(self._vec) == 0

    def __getitem__(self, idx: VectorIdx) -> int:
        position = _position_of(idx)
        if position < len(self._vec):
            return self._vec[position]
        return 0

    # ---- mutation -----------------------------------------------------

    def _get_mut_with_min_len(self, min_len: int) -> SmallVec:
        # Callers that grow the storage must write a non-zero value into
        # slot min_len - 1 before returning.
        if len(self._vec) < min_len:
            self._vec.resize(min_len, 0)
        return self._vec

    def _trim_trailing_zeros(self, operation: str) -> None:
        vec = self._vec
        old_len = len(vec)
        while len(vec) and vec[-1] == 0:
            vec.pop()
        if len(vec) != old_len:
            get_logger().trailing_zeros_trimmed(operation, old_len, len(vec))

    def increment_index(self, idx: VectorIdx) -> None:
        """Add one to the timestamp at ``idx``.

        Raises:
            TimestampOverflowError: If the slot already holds the maximum
                timestamp. The clock is left unchanged.
        """
        position = _position_of(idx)
        current = self[idx]
        if current >= VTIMESTAMP_MAX:
            get_logger().timestamp_overflow(position, current)
            raise TimestampOverflowError(
                f"Vector clock overflow at index {position}"
            )
        vec = self._get_mut_with_min_len(position + 1)
        vec[position] = current + 1

    def join(self, other: VClock) -> None:
        """Set every slot to the maximum of this clock and ``other``."""
        rhs = other._vec.to_tuple()
        lhs = self._get_mut_with_min_len(len(rhs))
        for position, r in enumerate(rhs):
            if r > lhs[position]:
                lhs[position] = r

    def set_at_index(self, other: VClock, idx: VectorIdx) -> None:
        """Copy the timestamp at ``idx`` from ``other`` into this clock.

        Unlike ``join`` this overwrites, so the slot may decrease.
        """
        position = _position_of(idx)
        value = other[idx]
        vec = self._vec
        if position >= len(vec):
            if value == 0:
                return
            vec = self._get_mut_with_min_len(position + 1)
            vec[position] = value
            return

        vec[position] = value
        if value == 0 and position == len(vec) - 1:
            self._trim_trailing_zeros("set_at_index")

    def set_zero_vector(self) -> None:
        self._vec.clear()

    # ---- comparison ---------------------------------------------------

    def partial_cmp(self, other: VClock) -> ClockOrdering:
        """Compare two clocks under the pointwise partial order.

        Walks the shared prefix once, refining EQUAL into LESS or GREATER on
        the first differing slot and returning INCOMPARABLE as soon as a slot
        points the other way. Any remaining tail is settled from the lengths
        alone, since a non-empty tail holds at least one non-zero slot.

        Args:
            other: Clock on the right-hand side

        Returns:
            ClockOrdering of ``self`` relative to ``other``
        """
        lhs = self._vec
        rhs = other._vec

        order = ClockOrdering.EQUAL
        for l, r in zip(lhs, rhs):
            if order is ClockOrdering.EQUAL:
                if l < r:
                    order = ClockOrdering.LESS
                elif l > r:
                    order = ClockOrdering.GREATER
            elif order is ClockOrdering.LESS:
                if l > r:
                    return ClockOrdering.INCOMPARABLE
            elif l < r:
                return ClockOrdering.INCOMPARABLE

        l_len = len(lhs)
        r_len = len(rhs)
        if l_len == r_len:
            return order
        if l_len < r_len:
            # right has a non-zero slot beyond the left's end
            if order is ClockOrdering.GREATER:
                return ClockOrdering.INCOMPARABLE
            return ClockOrdering.LESS
        if order is ClockOrdering.LESS:
            return ClockOrdering.INCOMPARABLE
        return ClockOrdering.GREATER

    def concurrent(self, other: VClock) -> bool:
        """True if neither clock happened-before the other."""
        return self.partial_cmp(other) is ClockOrdering.INCOMPARABLE

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VClock):
            return NotImplemented
        lhs = self._vec
        rhs = other._vec
        l_len = len(lhs)
        r_len = len(rhs)
        # A longer left clock has a non-zero slot the right lacks
        if l_len > r_len:
            return False
        equal = l_len == r_len
        for l, r in zip(lhs, rhs):
            if l > r:
                return False
            if l < r:
                equal = False
        return not equal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VClock):
            return NotImplemented
        lhs = self._vec
        rhs = other._vec
        if len(lhs) > len(rhs):
            return False
        return not any(l > r for l, r in zip(lhs, rhs))

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VClock):
            return NotImplemented
        lhs = self._vec
        rhs = other._vec
        l_len = len(lhs)
        r_len = len(rhs)
        # A longer right clock has a non-zero slot the left lacks
        if l_len < r_len:
            return False
        equal = l_len == r_len
        for l, r in zip(lhs, rhs):
            if l < r:
                return False
            if l > r:
                equal = False
        return not equal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VClock):
            return NotImplemented
        lhs = self._vec
        rhs = other._vec
        if len(lhs) < len(rhs):
            return False
        return not any(l < r for l, r in zip(lhs, rhs))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VClock):
            return NotImplemented
        return self._vec == other._vec

    def __hash__(self) -> int:
        return hash(self._vec.to_tuple())

    def __str__(self) -> str:
        return f"[{', '.join(str(ts) for ts in self._vec)}]"

    def __repr__(self) -> str:
        return f"VClock({list(self._vec)})"
