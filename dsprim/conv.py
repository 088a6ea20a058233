"""Time-domain convolution.

Implements a reference convolution with explicit bounds checks, an
optimized full convolution split into ramp-up, steady-state and ramp-down
regions, a truncated ("same" length) convolution and a moving average filter
built on the same region layout.

All convolutions are commutative; operands are reordered internally so the
shorter sequence plays the role of the kernel.
"""

from typing import Tuple

import numpy as np

from .logging import get_logger
from .utils import (
    check_1d_array,
    require_at_least,
    require_length_at_least,
    require_odd,
)

logger = get_logger(__name__)


def _order_operands(func: str, x, h) -> Tuple[np.ndarray, np.ndarray]:
    # Both non-empty, longer sequence first
    x = check_1d_array(x)
    h = check_1d_array(h)
    require_length_at_least(func, "length of x", len(x), 1)
    require_length_at_least(func, "length of h", len(h), 1)
    if len(h) > len(x):
        logger.debug("%s: swapping operands (len(x)=%d < len(h)=%d)", func, len(x), len(h))
        return h, x
    return x, h


def _tap_sum(x: np.ndarray, h: np.ndarray, i: int, j_start: int, j_stop: int) -> float:
    # sum_{j in [j_start, j_stop)} h[j] * x[i - j]
    return float(np.dot(h[j_start:j_stop], x[i - j_stop + 1 : i - j_start + 1][::-1]))


def naive_conv(x: np.ndarray, h: np.ndarray) -> np.ndarray:
    """Full convolution with an explicit bounds check on every term.

    y[i] = sum_j h[j] * x[i - j] over all j with 0 <= i - j < len(x).
    O(N*M); kept as the reference for :func:`optim_conv`.

    Args:
        x: First input sequence.
        h: Second input sequence.

    Returns:
        Convolved sequence of length len(x) + len(h) - 1.

    Raises:
        InvalidLengthError: If either input is empty.
    """
    x, h = _order_operands("naive_conv", x, h)

    n = len(x)
    m = len(h)
    out_len = n + m - 1
    y = np.zeros(out_len, dtype=float)

    for i in range(out_len):
        for j in range(m):
            if i - j < 0:
                continue
            if i - j >= n:
                continue
            y[i] += h[j] * x[i - j]

    return y


def optim_conv(x: np.ndarray, h: np.ndarray) -> np.ndarray:
    """Full convolution without per-term bounds checks.

    The output is computed in three index regions, with M the kernel length
    and L = N + M - 1 the output length:

    - ramp-up, i in [0, M-1): taps j in [0, i+1)
    - steady state, i in [M-1, L-M+1): all taps j in [0, M)
    - ramp-down, i in [L-M+1, L): taps j in [i-L+M, M)

    Args:
        x: First input sequence.
        h: Second input sequence.

    Returns:
        Convolved sequence of length len(x) + len(h) - 1, equal to
        :func:`naive_conv` up to rounding.
    """
    x, h = _order_operands("optim_conv", x, h)

    n = len(x)
    m = len(h)
    out_len = n + m - 1
    y = np.empty(out_len, dtype=float)

    for i in range(0, m - 1):
        y[i] = _tap_sum(x, h, i, 0, i + 1)

    for i in range(m - 1, out_len - m + 1):
        y[i] = _tap_sum(x, h, i, 0, m)

    for i in range(out_len - m + 1, out_len):
        y[i] = _tap_sum(x, h, i, i - out_len + m, m)

    return y


def trunc_conv(x: np.ndarray, h: np.ndarray) -> np.ndarray:
    """Convolution truncated to the length of the longer input.

    Computes the central window of the full convolution: output sample k is
    full-convolution sample k + M//2, so the leading and trailing M//2
    samples are discarded and the result stays aligned with x for a
    centered (odd-length) kernel.

    Args:
        x: First input sequence.
        h: Second input sequence.

    Returns:
        Sequence of length max(len(x), len(h)).
    """
    x, h = _order_operands("trunc_conv", x, h)

    n = len(x)
    m = len(h)
    half = m // 2
    out_len = n + m - 1
    y = np.empty(n, dtype=float)

    for i in range(half, m - 1):
        y[i - half] = _tap_sum(x, h, i, 0, i + 1)

    for i in range(m - 1, out_len - m + 1):
        y[i - half] = _tap_sum(x, h, i, 0, m)

    for i in range(out_len - m + 1, n + half):
        y[i - half] = _tap_sum(x, h, i, i - out_len + m, m)

    return y


def average_filter(x: np.ndarray, box_size: int) -> np.ndarray:
    """Centered moving average with an odd box.

    Each output sample is the sum of the in-range samples within box_size//2
    of it, divided by box_size. Near the edges fewer samples fall inside the
    box but the divisor stays box_size.

    Args:
        x: Input sequence.
        box_size: Odd window length, 1 <= box_size <= len(x).

    Returns:
        Smoothed sequence of length len(x).

    Raises:
        LengthParityError: If box_size is even.
        RangeError: If box_size < 1.
        InvalidLengthError: If box_size > len(x).
    """
    x = check_1d_array(x)
    require_at_least("average_filter", "box_size", box_size, 1)
    require_odd("average_filter", "box_size", box_size)
    require_length_at_least("average_filter", "length of x", len(x), box_size)

    n = len(x)
    half = box_size // 2
    y = np.empty(n, dtype=float)

    for i in range(0, half):
        y[i] = x[: i + half + 1].sum()

    for i in range(half, n - half):
        y[i] = x[i - half : i + half + 1].sum()

    for i in range(n - half, n):
        y[i] = x[i - half :].sum()

    return y / box_size
