# tests/core_tests/test_vector_idx.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Tests for the VectorIdx newtype

"""VectorIdx – conversions, sentinel and range checks."""

import operator

import pytest
from core.config import VECTOR_IDX_MAX
from core.exceptions import VectorClockError, VectorIdxOverflowError
from core.vector_idx import VectorIdx


ROUND_TRIP_VALUES = [0, 1, 3, 4, 5, 1000, 2**31, VECTOR_IDX_MAX - 1, VECTOR_IDX_MAX]

OUT_OF_RANGE_VALUES = [-1, -(2**40), VECTOR_IDX_MAX + 1, 2**64]


class TestVectorIdxConversions:
    """Raw value and array position conversions."""

    @pytest.mark.parametrize("value", ROUND_TRIP_VALUES)
    def test_round_trip(self, value):
        """Raw value, position and int() all agree."""
        idx = VectorIdx(value)
        assert idx.to_u32() == value
        assert idx.index() == value
        assert int(idx) == value
        assert operator.index(idx) == value
        assert VectorIdx.new(idx.index()) == idx

    def test_usable_as_list_position(self):
        slots = ["a", "b", "c"]
        assert slots[VectorIdx(2)] == "c"

    def test_ordering_follows_raw_value(self):
        assert VectorIdx(1) < VectorIdx(2)
        assert VectorIdx(7) >= VectorIdx(7)
        assert sorted([VectorIdx(3), VectorIdx(0), VectorIdx(2)]) == [
            VectorIdx(0),
            VectorIdx(2),
            VectorIdx(3),
        ]

    def test_hashable_and_immutable(self):
        idx = VectorIdx(4)
        assert {idx: "t4"}[VectorIdx(4)] == "t4"
        with pytest.raises(AttributeError):
            idx.value = 5

    def test_repr(self):
        assert repr(VectorIdx(12)) == "VectorIdx(12)"


class TestVectorIdxSentinel:
    """The reserved MAX_INDEX value."""

    def test_max_index_value(self):
        assert VectorIdx.MAX_INDEX.to_u32() == VECTOR_IDX_MAX == 2**32 - 1
        assert VectorIdx.MAX_INDEX.is_max_index()

    def test_max_index_distinct_from_in_use_indices(self):
        assert not VectorIdx(0).is_max_index()
        assert VectorIdx(VECTOR_IDX_MAX - 1) != VectorIdx.MAX_INDEX
        assert VectorIdx(VECTOR_IDX_MAX - 1) < VectorIdx.MAX_INDEX


class TestVectorIdxErrors:
    """Construction failures."""

    @pytest.mark.parametrize("value", OUT_OF_RANGE_VALUES)
    def test_out_of_range_raises(self, value):
        with pytest.raises(VectorIdxOverflowError) as exc_info:
            VectorIdx(value)
        assert str(value) in str(exc_info.value)

    @pytest.mark.parametrize("value", OUT_OF_RANGE_VALUES)
    def test_new_out_of_range_raises(self, value):
        with pytest.raises(VectorIdxOverflowError):
            VectorIdx.new(value)

    def test_overflow_is_a_vector_clock_error(self):
        with pytest.raises(VectorClockError):
            VectorIdx(2**32)

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_non_int_raises_type_error(self, value):
        with pytest.raises(TypeError):
            VectorIdx(value)
