"""Discrete Fourier transforms.

Implements the O(N^2) reference DFT/IDFT, a recursive radix-2
decimation-in-time FFT (Cooley-Tukey) and its inverse computed with the
real/imaginary swap trick, plus helpers to inspect a complex spectrum.

The FFT zero-pads its input to the next power of two. The original length
is not tracked; callers that need it must trim the result themselves.
"""

from typing import Union

import numpy as np

from .logging import get_logger
from .sequence import interlaced_decompose, swap_complex, zero_pad
from .utils import (
    check_1d_array,
    check_complex_array,
    next_largest_power_of_two,
    require_length_at_least,
)

logger = get_logger(__name__)


def dft(x: np.ndarray) -> np.ndarray:
    """Discrete Fourier Transform of a real sequence.

    X[k] = sum_n x[n] * exp(-2*pi*i*k*n/N), evaluated directly in O(N^2).
    Intended as a reference for checking :func:`fft`.

    Args:
        x: Real input sequence.

    Returns:
        Complex spectrum of length len(x).
    """
    x = check_1d_array(x)
    require_length_at_least("dft", "length of x", len(x), 1)
    n_samples = len(x)
    n = np.arange(n_samples)
    k = n.reshape(-1, 1)
    basis = np.exp(-2j * np.pi * k * n / n_samples)
    return basis @ x


def idft(X: np.ndarray) -> np.ndarray:
    """Inverse Discrete Fourier Transform, keeping only the real part.

    x[n] = (1/N) * Re(sum_k X[k] * exp(2*pi*i*k*n/N)). Only meaningful when
    the time-domain signal is known to be real.

    Args:
        X: Complex spectrum.

    Returns:
        Real sequence of length len(X).
    """
    X = check_complex_array(X)
    require_length_at_least("idft", "length of X", len(X), 1)
    n_samples = len(X)
    k = np.arange(n_samples)
    n = k.reshape(-1, 1)
    basis = np.exp(2j * np.pi * k * n / n_samples)
    return (basis @ X).real / n_samples


def _dit_fft(x: np.ndarray) -> np.ndarray:
    # len(x) must be a power of two
    n_samples = len(x)
    if n_samples == 1:
        return x.copy()

    x_even, x_odd = interlaced_decompose(x)
    p = _dit_fft(x_even)
    q = np.exp(-2j * np.pi * np.arange(n_samples // 2) / n_samples) * _dit_fft(x_odd)

    out = np.empty(n_samples, dtype=complex)
    out[: n_samples // 2] = p + q
    out[n_samples // 2 :] = p - q
    return out


def fft(x: np.ndarray) -> np.ndarray:
    """Fast Fourier Transform of a real or complex sequence.

    The input is zero-padded to the next power of two, then transformed by
    recursive decimation in time: the sequence is split into even- and
    odd-indexed halves, each half is transformed, and the halves are merged
    with the butterfly (p + q, p - q), q = exp(-2*pi*i*k/N) * O[k].

    Args:
        x: Real or complex input sequence.

    Returns:
        Complex spectrum whose length is the next power of two >= len(x).

    Raises:
        InvalidLengthError: If x is empty.
        PowerOfTwoOverflowError: If len(x) exceeds 2**30.
    """
    x = check_complex_array(x)
    require_length_at_least("fft", "length of x", len(x), 1)
    n_fft = next_largest_power_of_two(len(x))
    if n_fft != len(x):
        logger.debug("fft: zero-padding input from %d to %d samples", len(x), n_fft)
        x = zero_pad(x, n_fft)
    return _dit_fft(x)


def ifft(X: np.ndarray) -> np.ndarray:
    """Inverse Fast Fourier Transform via the swap trick.

    Swaps real and imaginary parts, runs the forward FFT, swaps back and
    divides by the transform length. Input that is not a power of two long
    is zero-padded first, so the output has the padded length.

    Args:
        X: Complex (or real) spectrum.

    Returns:
        Complex time-domain sequence.
    """
    x_inverse = check_complex_array(X).copy()
    require_length_at_least("ifft", "length of X", len(x_inverse), 1)
    swap_complex(x_inverse)
    x_inverse = fft(x_inverse)
    swap_complex(x_inverse)
    return x_inverse / len(x_inverse)


def magnitude(X: np.ndarray) -> np.ndarray:
    """Magnitude |X[k]| of each sample of a complex sequence."""
    return np.abs(check_complex_array(X))


def phase(X: np.ndarray) -> np.ndarray:
    """Phase angle of each sample of a complex sequence, in radians."""
    return np.angle(check_complex_array(X))


def real_part(X: np.ndarray) -> np.ndarray:
    """Real component of each sample of a complex sequence."""
    return check_complex_array(X).real.copy()


def decibels(x: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Amplitude in decibels, 20 * log10(x).

    Accepts a scalar or an array; zero maps to -inf as in numpy.
    """
    if np.isscalar(x):
        return float(20.0 * np.log10(x))
    return 20.0 * np.log10(np.asarray(x, dtype=float))
