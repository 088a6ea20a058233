"""Descriptive statistics for sequences."""

from typing import Tuple

import numpy as np

from .utils import check_1d_array, require_at_least


def mean_std(x: np.ndarray) -> Tuple[float, float]:
    """Mean and sample standard deviation from running sums.

    Uses std = sqrt((sum(x^2) - sum(x)^2 / N) / (N - 1)).

    Args:
        x: Input sequence.

    Returns:
        Tuple (mean, std). An empty sequence gives (0.0, 0.0) and a single
        sample gives a standard deviation of 0.0.
    """
    x = check_1d_array(x)
    n = len(x)
    if n == 0:
        return 0.0, 0.0

    total = float(np.sum(x))
    total_sq = float(np.sum(x * x))
    mean = total / n
    if n == 1:
        return mean, 0.0

    # Rounding can push the variance slightly below zero for constant input
    variance = max((total_sq - total * total / n) / (n - 1), 0.0)
    return mean, float(np.sqrt(variance))


def histogram(x: np.ndarray) -> Tuple[np.ndarray, int, int]:
    """Histogram of an integer sequence with one bin per value.

    Bin 0 counts the minimum value and the last bin counts the maximum.

    Args:
        x: Non-empty integer sequence.

    Returns:
        Tuple (hist, min_val, max_val) with len(hist) = max_val - min_val + 1.

    Raises:
        ValueError: If x is empty or not integer-valued.
    """
    arr = np.asarray(x)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError("histogram requires a non-empty 1D sequence")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"histogram requires integer values, got {arr.dtype}")

    min_val = int(arr.min())
    max_val = int(arr.max())
    hist = np.bincount(arr - min_val, minlength=max_val - min_val + 1)
    return hist, min_val, max_val


def binned_histogram(x: np.ndarray, bins: int) -> Tuple[np.ndarray, float, float]:
    """Histogram of a real sequence over ``bins`` equal-width bins.

    A sample lands in bin floor((value - min) / width), width = (max - min) / bins;
    the index is clamped into [0, bins - 1] so the maximum falls in the last
    bin. Constant input lands entirely in bin 0.

    Args:
        x: Non-empty real sequence.
        bins: Number of bins (>= 1).

    Returns:
        Tuple (hist, min_val, max_val).

    Raises:
        RangeError: If bins < 1.
        ValueError: If x is empty.
    """
    require_at_least("binned_histogram", "bins", bins, 1)
    x = check_1d_array(x)
    if x.size == 0:
        raise ValueError("binned_histogram requires a non-empty sequence")

    min_val = float(x.min())
    max_val = float(x.max())
    width = (max_val - min_val) / bins

    if width == 0.0:
        index = np.zeros(len(x), dtype=int)
    else:
        index = np.floor((x - min_val) / width).astype(int)
    index = np.clip(index, 0, bins - 1)

    hist = np.bincount(index, minlength=bins)
    return hist, min_val, max_val
