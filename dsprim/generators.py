"""Test-signal generators.

Impulse, step, rectangle and sine sequences for exercising filters and
transforms.
"""

import numpy as np

from .utils import require_at_least, require_in_bounds


def impulse(M: int, magnitude: float = 1.0, delay: int = 0) -> np.ndarray:
    """Sequence of M zeros except ``magnitude`` at index ``delay``.

    Raises:
        BoundsError: If delay is outside [0, M).
    """
    require_in_bounds("impulse", "delay", delay, "M", M)

    x = np.zeros(M, dtype=float)
    x[delay] = magnitude
    return x


def step(M: int, magnitude: float = 1.0, delay: int = 0) -> np.ndarray:
    """Sequence of M samples equal to ``magnitude`` from index ``delay`` on.

    Raises:
        RangeError: If M < 1.
        BoundsError: If delay is outside [0, M).
    """
    require_at_least("step", "M", M, 1)
    require_in_bounds("step", "delay", delay, "M", M)

    x = np.zeros(M, dtype=float)
    x[delay:] = magnitude
    return x


def rectangle(M: int, L: int, magnitude: float = 1.0, delay: int = 0) -> np.ndarray:
    """Sequence of M samples with a pulse of L samples starting at ``delay``.

    The pulse is cut off at the end of the sequence if delay + L > M.

    Args:
        M: Sequence length.
        L: Pulse length.
        magnitude: Pulse height (default: 1.0).
        delay: Index of the first pulse sample (default: 0).

    Raises:
        RangeError: If M < 1 or L < 0.
        BoundsError: If delay is outside [0, M).
    """
    require_at_least("rectangle", "M", M, 1)
    require_at_least("rectangle", "L", L, 0)
    require_in_bounds("rectangle", "delay", delay, "M", M)

    x = np.zeros(M, dtype=float)
    x[delay : min(M, delay + L)] = magnitude
    return x


def sin_sequence(M: int, k: int, amplitude: float = 1.0) -> np.ndarray:
    """Sine completing k cycles over M samples.

    x[i] = amplitude * sin(2*pi*k*i/M). For example k=2 gives two full
    periods across the sequence.

    Raises:
        BoundsError: If k is outside [0, M//2).
    """
    require_in_bounds("sin_sequence", "k", k, "M/2", M // 2)

    i = np.arange(M, dtype=float)
    return amplitude * np.sin(2.0 * np.pi * k * i / M)
