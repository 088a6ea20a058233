"""Input validation and small numerical helpers.

Array coercion for real and complex sequences, the guard clauses every public
operation runs before computing, and the power-of-two search used by the FFT.
"""

import numpy as np

from .errors import (
    BoundsError,
    InvalidLengthError,
    LengthParityError,
    PowerOfTwoOverflowError,
    RangeError,
)

# Largest exponent tried by next_largest_power_of_two
MAX_POWER_OF_TWO_EXPONENT = 30


def check_1d_array(x) -> np.ndarray:
    """Validate and cast input to 1D float64 array.

    Args:
        x: Input array-like object.

    Returns:
        1D float64 numpy array.

    Raises:
        ValueError: If input is complex, is not 1D, or has NaN or Inf values.
    """
    if np.iscomplexobj(x):
        raise ValueError("Expected real input, got complex values")
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D array, got {arr.ndim}D array")
    if np.any(np.isnan(arr)):
        raise ValueError("Input contains NaN values")
    if np.any(np.isinf(arr)):
        raise ValueError("Input contains Inf values")
    return arr


def check_complex_array(x) -> np.ndarray:
    """Validate and cast input to 1D complex128 array.

    Real input is lifted with zero imaginary parts.

    Raises:
        ValueError: If input is not 1D or has non-finite components.
    """
    arr = np.asarray(x, dtype=complex)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D array, got {arr.ndim}D array")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Input contains NaN or Inf values")
    return arr


def check_sequence(x) -> np.ndarray:
    """Coerce to a 1D array, keeping complex input complex."""
    if np.iscomplexobj(x):
        return check_complex_array(x)
    return check_1d_array(x)


def require_even_length(func: str, name: str, length: int) -> None:
    """Raise LengthParityError unless ``length`` is even."""
    if length % 2 != 0:
        raise LengthParityError(f"{func}: {name} must be even, got {length}")


def require_odd(func: str, name: str, value: int) -> None:
    """Raise LengthParityError unless ``value`` is odd."""
    if value % 2 == 0:
        raise LengthParityError(f"{func}: {name} must be odd, got {value}")


def require_in_range(
    func: str, name: str, value: float, low: float, high: float
) -> None:
    """Raise RangeError unless ``low < value <= high``."""
    if not low < value <= high:
        raise RangeError(
            f"{func}: {name} must be in ({low}, {high}], got {value}"
        )


def require_at_least(func: str, name: str, value: int, minimum: int) -> None:
    """Raise RangeError if ``value < minimum``."""
    if value < minimum:
        raise RangeError(f"{func}: {name} must be >= {minimum}, got {value}")


def require_in_bounds(
    func: str, name: str, index: int, bound_name: str, bound: int
) -> None:
    """Raise BoundsError unless ``0 <= index < bound``."""
    if index < 0 or index >= bound:
        raise BoundsError(
            f"{func}: {name} must be in [0, {bound_name}={bound}), got {index}"
        )


def require_length_at_least(func: str, name: str, length: int, minimum: int) -> None:
    """Raise InvalidLengthError if ``length < minimum``."""
    if length < minimum:
        raise InvalidLengthError(
            f"{func}: {name} must be >= {minimum}, got {length}"
        )


def next_largest_power_of_two(n: int) -> int:
    """Return the smallest power of two >= n.

    Searches by doubling from 1. Values <= 1 map to 1.

    Args:
        n: Requested size.

    Returns:
        Smallest power of two >= n.

    Raises:
        PowerOfTwoOverflowError: If the result would exceed 2**30.
    """
    output = 1
    for _ in range(MAX_POWER_OF_TWO_EXPONENT):
        if output >= n:
            break
        output <<= 1

    if output < n:
        raise PowerOfTwoOverflowError(
            f"next power of two >= {n} exceeds 2**{MAX_POWER_OF_TWO_EXPONENT}"
        )
    return output
