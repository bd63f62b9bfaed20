# core/__init__.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Core module public API for the vector clock components

"""Vector clock primitives for a dynamic data-race detector.

The race detector keeps one clock per thread and per monitored location,
increments a thread's own slot on each access, joins clocks along
synchronization edges (lock release/acquire, spawn, join) and compares two
clocks to decide whether their accesses were ordered or raced. This package
provides only those primitives; index allocation, shadow memory and race
reporting belong to the detector.

Primary Components:
    VectorIdx: Slot index newtype backed by an unsigned 32-bit integer
    VClock: Canonical vector clock with increment, join and partial order
    ClockOrdering: LESS, EQUAL, GREATER or INCOMPARABLE comparison result
    VectorClockError: Base of the overflow exceptions

Example:
    >>> from core import VClock, VectorIdx
    >>> t0, t1 = VClock.new_with_index(VectorIdx(0), 1), VClock.new_with_index(VectorIdx(1), 1)
    >>> t0.concurrent(t1)
    True
    >>> t1.join(t0)
    >>> t0 <= t1
    True
"""

from .config import SMALL_VECTOR, VECTOR_IDX_MAX, VTIMESTAMP_MAX
from .exceptions import TimestampOverflowError, VectorClockError, VectorIdxOverflowError
from .ordering import ClockOrdering
from .small_vec import SmallVec
from .vector_clock import VClock
from .vector_idx import VectorIdx

__all__ = [
    "VClock",
    "VectorIdx",
    "ClockOrdering",
    "SmallVec",
    "VectorClockError",
    "TimestampOverflowError",
    "VectorIdxOverflowError",
    "SMALL_VECTOR",
    "VECTOR_IDX_MAX",
    "VTIMESTAMP_MAX",
]

__version__ = "1.0.0"
__description__ = "Vector clock core for data-race detection"
