"""Elementary sequence operations.

Symmetric and interlaced decompositions, real-to-complex lifting, zero
padding and the in-place real/imaginary swap used by the inverse FFT.
Everything except :func:`swap_complex` returns a new array.
"""

from typing import Tuple

import numpy as np

from .utils import (
    check_1d_array,
    check_sequence,
    require_even_length,
    require_length_at_least,
)


def interlaced_decompose(x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Split a sequence into its even-indexed and odd-indexed samples.

    Works for real and complex input; the dtype is preserved.

    Args:
        x: Sequence of even length 2K.

    Returns:
        Tuple (x_even, x_odd), each of length K, in original order.

    Raises:
        LengthParityError: If len(x) is odd.
    """
    x = check_sequence(x)
    require_even_length("interlaced_decompose", "length of x", len(x))
    return x[0::2].copy(), x[1::2].copy()


def even_decompose(x: np.ndarray) -> np.ndarray:
    """Even part of a sequence under circular symmetry.

    x_e[0] = x[0] and x_e[i] = (x[i] + x[N-i]) / 2 for i >= 1.

    Raises:
        LengthParityError: If len(x) is odd.
    """
    x = check_1d_array(x)
    n = len(x)
    require_even_length("even_decompose", "length of x", n)

    x_even = np.empty(n, dtype=float)
    x_even[0] = x[0]
    # x[N-i] for i = 1..N-1 is x reversed without its first sample
    x_even[1:] = (x[1:] + x[:0:-1]) / 2.0
    return x_even


def odd_decompose(x: np.ndarray) -> np.ndarray:
    """Odd part of a sequence under circular symmetry.

    x_o[0] = 0 and x_o[i] = (x[i] - x[N-i]) / 2 for i >= 1.

    Raises:
        LengthParityError: If len(x) is odd.
    """
    x = check_1d_array(x)
    n = len(x)
    require_even_length("odd_decompose", "length of x", n)

    x_odd = np.empty(n, dtype=float)
    x_odd[0] = 0.0
    x_odd[1:] = (x[1:] - x[:0:-1]) / 2.0
    return x_odd


def convert_to_complex(x: np.ndarray) -> np.ndarray:
    """Lift a real sequence to complex128 with zero imaginary parts."""
    x = check_1d_array(x)
    return x.astype(complex)


def zero_pad(x: np.ndarray, new_length: int) -> np.ndarray:
    """Append zeros so the returned sequence has ``new_length`` samples.

    Real input gives a float64 result, complex input a complex128 result.

    Raises:
        InvalidLengthError: If new_length < len(x).
    """
    x = check_sequence(x)
    require_length_at_least("zero_pad", "new_length", new_length, len(x))

    padded = np.zeros(new_length, dtype=x.dtype)
    padded[: len(x)] = x
    return padded


def swap_complex(x: np.ndarray) -> None:
    """Swap the real and imaginary parts of every sample, in place.

    Args:
        x: complex128 array. It is modified; nothing is returned.

    Raises:
        TypeError: If x is not a complex numpy array.
    """
    if not isinstance(x, np.ndarray) or not np.iscomplexobj(x):
        raise TypeError("swap_complex requires a complex numpy array")
    real = x.real.copy()
    x.real = x.imag
    x.imag = real
