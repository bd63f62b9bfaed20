# core/exceptions.py
# This file is part of VClock - Vector Clock Core for Data-Race Detection
#
# Exceptions for vector clock invariant violations

"""Fatal error conditions of the vector clock core.

Only two things can go wrong at this layer: a timestamp counter running past
its 32-bit range, and a vector index built from an integer that does not fit
in 32 bits. Both indicate a broken caller or an impossible run length, so no
code in this package catches them. Reading past the end of a clock and an
incomparable comparison result are ordinary outcomes, not errors.
"""


class VectorClockError(RuntimeError):
    """Base class for vector clock invariant violations."""

    pass


class TimestampOverflowError(VectorClockError):
    """Raised when a timestamp would leave the unsigned 32-bit range.

    Raised by ``increment_index`` on a saturated slot, and by constructors
    handed a timestamp that is negative or wider than 32 bits. Wrapping
    silently would corrupt causal ordering.
    """

    pass


class VectorIdxOverflowError(VectorClockError):
    """Raised when a vector index is built from an out-of-range integer."""

    pass
