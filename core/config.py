# core/config.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Width and storage constants shared by the clock components

# Largest value a timestamp slot may hold (unsigned 32-bit)
VTIMESTAMP_MAX = 2**32 - 1

# Largest raw value of a vector index, also the reserved MAX_INDEX sentinel
VECTOR_IDX_MAX = 2**32 - 1

# Number of timestamp slots held inline before storage spills to the heap
SMALL_VECTOR = 4
