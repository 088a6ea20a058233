"""FIR kernel design using the windowed-sinc method.

Provides the ideal lowpass sinc kernel, its windowed and DC-normalized form,
and the two kernel transformations that move a passband without redesigning
the kernel: spectral inversion (lowpass <-> highpass at the same cutoff) and
spectral reversal (frequency response mirrored about 0.25).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .logging import get_logger
from .utils import check_1d_array, require_at_least, require_in_range, require_odd
from .windows import blackman, hamming

logger = get_logger(__name__)

_WINDOWS = {
    "blackman": blackman,
    "hamming": hamming,
}

PASS_TYPES = ("lowpass", "highpass", "highpass_reversed")


def _check_kernel_params(func: str, M: int, fc: float) -> None:
    require_in_range(func, "fc", fc, 0.0, 0.5)
    require_at_least(func, "M", M, 1)
    require_odd(func, "M", M)


def sinc(M: int, fc: float) -> np.ndarray:
    """Ideal lowpass impulse response truncated to M taps.

    The center tap c = (M-1)/2 equals 2*fc; every other tap is
    sin(2*pi*fc*(i-c)) / (pi*(i-c)).

    Args:
        M: Number of taps (odd).
        fc: Cutoff as a fraction of the sampling rate, in (0, 0.5].

    Returns:
        Kernel of length M.

    Raises:
        RangeError: If fc is outside (0, 0.5] or M < 1.
        LengthParityError: If M is even.
    """
    _check_kernel_params("sinc", M, fc)

    center = (M - 1) // 2
    offsets = np.arange(M) - center
    kernel = np.empty(M, dtype=float)

    off_center = offsets != 0
    k = offsets[off_center]
    kernel[off_center] = np.sin(2.0 * np.pi * fc * k) / (np.pi * k)
    kernel[center] = 2.0 * fc
    return kernel


def windowed_sinc(M: int, fc: float, window: str = "blackman") -> np.ndarray:
    """Windowed-sinc lowpass kernel with unity gain at DC.

    Multiplies :func:`sinc` by the window and divides every tap by the sum
    of the taps.

    Args:
        M: Number of taps (odd).
        fc: Cutoff as a fraction of the sampling rate, in (0, 0.5].
        window: "blackman" (default) or "hamming".

    Returns:
        Kernel of length M whose taps sum to 1.

    Raises:
        RangeError: If fc is outside (0, 0.5] or M < 1.
        LengthParityError: If M is even.
        ValueError: If the window name is unknown.
    """
    if window not in _WINDOWS:
        raise ValueError(f"Unknown window: {window}")
    _check_kernel_params("windowed_sinc", M, fc)

    kernel = sinc(M, fc) * _WINDOWS[window](M)
    dc_gain = kernel.sum()
    logger.debug("windowed_sinc: M=%d fc=%g dc_gain=%g", M, fc, dc_gain)
    return kernel / dc_gain


def spectral_inversion(kernel: np.ndarray) -> np.ndarray:
    """Flip a kernel's frequency response top to bottom.

    Negates every tap and adds 1 to the center tap, so a lowpass kernel
    becomes a highpass kernel with the same cutoff and vice versa. Applying
    it twice returns the original kernel, bit for bit whenever 1 - c is
    exactly representable for the center tap c (e.g. c in [0.5, 2]).

    Raises:
        LengthParityError: If the kernel length is even.
    """
    kernel = check_1d_array(kernel)
    require_odd("spectral_inversion", "kernel length", len(kernel))

    inverted = -kernel
    inverted[len(inverted) // 2] += 1.0
    return inverted


def spectral_reversal(kernel: np.ndarray) -> np.ndarray:
    """Mirror a kernel's frequency response about 0.25.

    Negates every odd-indexed tap: a lowpass kernel with cutoff fc becomes
    a highpass kernel with cutoff 0.5 - fc. Applying it twice returns the
    original kernel.

    Raises:
        LengthParityError: If the kernel length is even.
    """
    kernel = check_1d_array(kernel)
    require_odd("spectral_reversal", "kernel length", len(kernel))

    reversed_kernel = kernel.copy()
    reversed_kernel[1::2] *= -1.0
    return reversed_kernel


@dataclass(frozen=True)
class KernelConfig:
    """
    Configuration for designing an FIR kernel.

    Args:
        length: Number of taps. Must be odd.
        cutoff: Cutoff as a fraction of the sampling rate, in (0, 0.5].
        window: Window name, "blackman" or "hamming". Defaults to "blackman".
        pass_type: One of "lowpass", "highpass" (spectral inversion of the
            lowpass design) or "highpass_reversed" (spectral reversal of a
            lowpass designed at 0.5 - cutoff). Defaults to "lowpass".
    """

    length: int
    cutoff: float
    window: str = "blackman"
    pass_type: str = "lowpass"


def design_kernel(config: KernelConfig) -> np.ndarray:
    """
    Design an FIR kernel from a configuration.

    Args:
        config: Kernel configuration.

    Returns:
        Kernel of length config.length.

    Raises:
        ValueError: If the pass type or window is not supported.
        RangeError: If the cutoff is out of range for the pass type.
        LengthParityError: If the length is even.
    """
    pass_type = config.pass_type.lower()
    if pass_type not in PASS_TYPES:
        raise ValueError(
            f"Unsupported pass type '{config.pass_type}'. "
            f"Supported pass types: {list(PASS_TYPES)}"
        )

    if pass_type == "lowpass":
        return windowed_sinc(config.length, config.cutoff, window=config.window)
    elif pass_type == "highpass":
        lowpass = windowed_sinc(config.length, config.cutoff, window=config.window)
        return spectral_inversion(lowpass)
    else:
        # Reversal maps a lowpass at 0.5 - fc onto a highpass at fc
        require_in_range("design_kernel", "cutoff", config.cutoff, 0.0, 0.5)
        lowpass = windowed_sinc(config.length, 0.5 - config.cutoff, window=config.window)
        return spectral_reversal(lowpass)
