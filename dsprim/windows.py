"""Window functions for filter design.

Symmetric Hamming and Blackman windows with denominator M-1, the form used
to taper a windowed-sinc kernel.
"""

import numpy as np

from .utils import require_at_least


def hamming(M: int) -> np.ndarray:
    """Generate a symmetric Hamming window.

    Hamming window: w[n] = 0.54 - 0.46 * cos(2πn/(M-1))

    Args:
        M: Window length (must be positive integer).

    Returns:
        Window array of length M, dtype float64.

    Raises:
        RangeError: If M < 1.
    """
    require_at_least("hamming", "M", M, 1)
    if M == 1:
        return np.array([1.0], dtype=float)

    n = np.arange(M, dtype=float)
    return 0.54 - 0.46 * np.cos(2.0 * np.pi * n / (M - 1))


def blackman(M: int) -> np.ndarray:
    """Generate a symmetric Blackman window.

    Blackman window: w[n] = 0.42 - 0.5*cos(2πn/(M-1)) + 0.08*cos(4πn/(M-1))

    Args:
        M: Window length (must be positive integer).

    Returns:
        Window array of length M, dtype float64.

    Raises:
        RangeError: If M < 1.
    """
    require_at_least("blackman", "M", M, 1)
    if M == 1:
        return np.array([1.0], dtype=float)

    n = np.arange(M, dtype=float)
    return (
        0.42
        - 0.5 * np.cos(2.0 * np.pi * n / (M - 1))
        + 0.08 * np.cos(4.0 * np.pi * n / (M - 1))
    )
