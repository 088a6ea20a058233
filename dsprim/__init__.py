"""dsprim - deterministic digital-signal-processing primitives.

This package provides:
- Sequence operations (even/odd and interlaced decomposition, zero padding)
- Reference DFT/IDFT and a recursive radix-2 FFT/IFFT
- Direct, region-optimized and truncated convolution
- Window functions (Hamming, Blackman) and windowed-sinc FIR design
- Spectral inversion and reversal of filter kernels
- Test-signal generators and descriptive statistics

All functions are NumPy-first, pure and validate their arguments up front.
"""

__version__ = "0.1.0"

from .conv import average_filter, naive_conv, optim_conv, trunc_conv
from .errors import (
    BoundsError,
    InvalidLengthError,
    LengthParityError,
    PowerOfTwoOverflowError,
    RangeError,
    SignalError,
)
from .fir import (
    KernelConfig,
    design_kernel,
    sinc,
    spectral_inversion,
    spectral_reversal,
    windowed_sinc,
)
from .generators import impulse, rectangle, sin_sequence, step
from .logging import configure_logging, get_logger, set_log_level
from .sequence import (
    convert_to_complex,
    even_decompose,
    interlaced_decompose,
    odd_decompose,
    swap_complex,
    zero_pad,
)
from .stats import binned_histogram, histogram, mean_std
from .transform import (
    decibels,
    dft,
    fft,
    idft,
    ifft,
    magnitude,
    phase,
    real_part,
)
from .utils import check_1d_array, check_complex_array, next_largest_power_of_two
from .windows import blackman, hamming

__all__ = [
    "__version__",
    # Errors
    "SignalError",
    "LengthParityError",
    "RangeError",
    "BoundsError",
    "InvalidLengthError",
    "PowerOfTwoOverflowError",
    # Utils
    "check_1d_array",
    "check_complex_array",
    "next_largest_power_of_two",
    # Sequence operations
    "interlaced_decompose",
    "even_decompose",
    "odd_decompose",
    "convert_to_complex",
    "zero_pad",
    "swap_complex",
    # Transforms
    "dft",
    "idft",
    "fft",
    "ifft",
    "magnitude",
    "phase",
    "real_part",
    "decibels",
    # Convolution
    "naive_conv",
    "optim_conv",
    "trunc_conv",
    "average_filter",
    # Windows
    "hamming",
    "blackman",
    # FIR design
    "sinc",
    "windowed_sinc",
    "spectral_inversion",
    "spectral_reversal",
    "KernelConfig",
    "design_kernel",
    # Generators
    "impulse",
    "step",
    "rectangle",
    "sin_sequence",
    # Statistics
    "mean_std",
    "histogram",
    "binned_histogram",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
