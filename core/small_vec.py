# core/small_vec.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Growable timestamp sequence with a fixed inline buffer and heap spill

from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import SMALL_VECTOR
from utils.logger import get_logger


class SmallVec:
    """Growable sequence of integers optimised for short lengths.

    Most monitored programs run a handful of threads, so most clocks hold
    only a few slots. Up to ``inline_capacity`` elements live in a buffer
    preallocated with the container; the first growth past that capacity
    moves everything into a heap list, which then serves all further
    operations. Once spilled, the container stays spilled, even after
    ``clear()``, so a clock that was large once does not bounce between the
    two representations.

    Only the element sequence is observable: two containers with the same
    elements compare equal whether or not either has spilled.
    """

    __slots__ = ("_inline", "_len", "_heap", "_capacity")

    def __init__(
        self, items: Iterable[int] = (), inline_capacity: int = SMALL_VECTOR
    ) -> None:
        if inline_capacity < 0:
            raise ValueError(f"Inline capacity must be >= 0, got {inline_capacity}")
        self._capacity = inline_capacity
        self._inline: List[int] = [0] * inline_capacity
        self._len = 0
        self._heap: Optional[List[int]] = None
        self.extend(items)

    @property
    def inline_capacity(self) -> int:
        return self._capacity

    @property
    def spilled(self) -> bool:
        """True once the elements live in heap storage."""
        return self._heap is not None

    def _spill(self, new_len: int) -> None:
        get_logger().storage_spilled(self._len, new_len, self._capacity)
        self._heap = self._inline[: self._len]
        self._len = 0

    def _normalize(self, position: int) -> int:
        length = len(self)
        if position < 0:
            position += length
        if not 0 <= position < length:
            raise IndexError(f"SmallVec index {position} out of range for length {length}")
        return position

    def __len__(self) -> int:
        if self._heap is not None:
            return len(self._heap)
        return self._len

    def __getitem__(self, position: int) -> int:
        if self._heap is not None:
            return self._heap[position]
        return self._inline[self._normalize(position)]

    def __setitem__(self, position: int, value: int) -> None:
        if self._heap is not None:
            self._heap[position] = value
        else:
            self._inline[self._normalize(position)] = value

    def __iter__(self) -> Iterator[int]:
        if self._heap is not None:
            return iter(self._heap)
        return iter(self._inline[: self._len])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SmallVec):
            return self.to_tuple() == other.to_tuple()
        if isinstance(other, (list, tuple)):
            return self.to_tuple() == tuple(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SmallVec({list(self)})"

    def to_tuple(self) -> Tuple[int, ...]:
        if self._heap is not None:
            return tuple(self._heap)
        return tuple(self._inline[: self._len])

    def append(self, value: int) -> None:
        if self._heap is None:
            if self._len < self._capacity:
                self._inline[self._len] = value
                self._len += 1
                return
            self._spill(self._len + 1)
        self._heap.append(value)

    def extend(self, items: Iterable[int]) -> None:
        for value in items:
            self.append(value)

    def pop(self) -> int:
        """Remove and return the last element."""
        if self._heap is not None:
            return self._heap.pop()
        if self._len == 0:
            raise IndexError("pop from empty SmallVec")
        self._len -= 1
        value = self._inline[self._len]
        self._inline[self._len] = 0
        return value

    def resize(self, new_len: int, fill: int = 0) -> None:
        """Grow with ``fill`` or truncate so that ``len(self) == new_len``."""
        if new_len < 0:
            raise ValueError(f"Cannot resize to negative length {new_len}")
        if self._heap is None and new_len > self._capacity:
            self._spill(new_len)

        if self._heap is not None:
            current = len(self._heap)
            if new_len < current:
                del self._heap[new_len:]
            else:
                self._heap.extend([fill] * (new_len - current))
            return

        if new_len < self._len:
            for position in range(new_len, self._len):
                self._inline[position] = 0
        else:
            for position in range(self._len, new_len):
                self._inline[position] = fill
        self._len = new_len

    def clear(self) -> None:
        if self._heap is not None:
            self._heap.clear()
        else:
            self.resize(0)

    def copy(self) -> SmallVec:
        return SmallVec(self, inline_capacity=self._capacity)
