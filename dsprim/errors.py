"""Exception types raised by dsprim precondition checks.

Every public function validates its arguments before computing anything and
raises one of these on violation. All of them derive from ``ValueError`` so
callers that only care about "bad argument" can catch that.
"""

__all__ = [
    "SignalError",
    "LengthParityError",
    "RangeError",
    "BoundsError",
    "InvalidLengthError",
    "PowerOfTwoOverflowError",
]


class SignalError(ValueError):
    """Base class for dsprim argument errors."""


class LengthParityError(SignalError):
    """Raised when a length must be odd (or even) and is not."""


class RangeError(SignalError):
    """Raised when a scalar parameter falls outside its domain."""


class BoundsError(SignalError):
    """Raised when an index parameter does not fit the target sequence."""


class InvalidLengthError(SignalError):
    """Raised when a requested output length is too small."""


class PowerOfTwoOverflowError(SignalError, OverflowError):
    """Raised when the next power of two exceeds the supported ceiling."""
