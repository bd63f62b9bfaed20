# core/vector_idx.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Vector index newtype addressing one slot of every vector clock

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

from .config import VECTOR_IDX_MAX
from .exceptions import VectorIdxOverflowError
from utils.logger import get_logger


@dataclass(frozen=True, order=True)
class VectorIdx:
    """Index of one slot in a vector clock.

    A vector index is usually associated with a thread, but the race detector
    may hand the same index to a different thread once no causal information
    can be lost by doing so. The clock only ever addresses by index and makes
    no assumption about that mapping.

    The raw value is an unsigned 32-bit integer and doubles as the zero-based
    position of the slot in the clock's timestamp sequence. ``MAX_INDEX``
    holds the largest representable value and is reserved for callers that
    need an "unassigned" marker.

    Attributes:
        value: Raw index value in ``[0, 2**32 - 1]``
    """

    value: int

    MAX_INDEX: ClassVar[VectorIdx]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Vector index must be an int, got {type(self.value).__name__}"
            )
        if not 0 <= self.value <= VECTOR_IDX_MAX:
            get_logger().index_overflow(self.value)
            raise VectorIdxOverflowError(
                f"Vector index {self.value} out of range [0, {VECTOR_IDX_MAX}]"
            )

    @classmethod
    def new(cls, position: int) -> VectorIdx:
        """Create the index naming the given array position."""
        return cls(position)

    def index(self) -> int:
        """Return the array position this index names."""
        return self.value

    def to_u32(self) -> int:
        """Return the raw 32-bit value."""
        return self.value

    def is_max_index(self) -> bool:
        return self.value == VECTOR_IDX_MAX

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"VectorIdx({self.value})"

    __str__ = __repr__


VectorIdx.MAX_INDEX = VectorIdx(VECTOR_IDX_MAX)
