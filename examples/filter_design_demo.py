"""Example: FIR Filter Design and Spectral Inspection with dsprim

Designs lowpass and highpass kernels, filters a two-tone test signal and
inspects the result in the frequency domain.
"""

import numpy as np

import dsprim as dp
from dsprim import KernelConfig, design_kernel


def example_lowpass_two_tones():
    """Example: Separating a low tone from a high tone."""
    print("=" * 60)
    print("Example 1: Lowpass Filtering a Two-Tone Signal")
    print("=" * 60)

    n = 256
    low = dp.sin_sequence(n, 8)  # 8 cycles -> f = 8/256
    high = dp.sin_sequence(n, 96, amplitude=0.5)  # f = 96/256
    x = low + high

    kernel = design_kernel(KernelConfig(length=101, cutoff=0.15))
    print(f"Kernel taps: {len(kernel)}, DC gain: {np.sum(kernel):.6f}")

    y = dp.trunc_conv(x, kernel)
    spectrum = dp.magnitude(dp.fft(y))

    print(f"|Y| at low tone bin (8):   {spectrum[8]:.2f}")
    print(f"|Y| at high tone bin (96): {spectrum[96]:.4f}")
    print()


def example_highpass_variants():
    """Example: Spectral inversion versus spectral reversal."""
    print("=" * 60)
    print("Example 2: Two Ways to Build a Highpass Kernel")
    print("=" * 60)

    n_fft = 512
    freqs = np.arange(n_fft // 2 + 1) / n_fft

    for pass_type in ("highpass", "highpass_reversed"):
        kernel = design_kernel(KernelConfig(length=61, cutoff=0.3, pass_type=pass_type))
        response = dp.magnitude(dp.fft(dp.zero_pad(kernel, n_fft)))[: n_fft // 2 + 1]
        stop = response[freqs < 0.2].max()
        passband = response[freqs > 0.4].min()
        print(f"{pass_type:>18}: max stopband {dp.decibels(stop):7.1f} dB, "
              f"min passband {passband:.4f}")
    print()


def example_signal_statistics():
    """Example: Smoothing a noisy step and summarizing it."""
    print("=" * 60)
    print("Example 3: Moving Average and Statistics")
    print("=" * 60)

    rng = np.random.default_rng(42)
    x = dp.step(200, delay=100) + 0.2 * rng.standard_normal(200)
    y = dp.average_filter(x, 9)

    mean, std = dp.mean_std(y)
    hist, lo, hi = dp.binned_histogram(y, 8)
    print(f"Mean: {mean:.3f}, std: {std:.3f}")
    print(f"Histogram over [{lo:.2f}, {hi:.2f}]: {hist.tolist()}")
    print()


if __name__ == "__main__":
    example_lowpass_two_tones()
    example_highpass_variants()
    example_signal_statistics()
