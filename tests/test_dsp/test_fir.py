"""Tests for dsprim.fir module."""

import dataclasses

import numpy as np
import pytest

from dsprim.errors import LengthParityError, RangeError
from dsprim.fir import (
    KernelConfig,
    design_kernel,
    sinc,
    spectral_inversion,
    spectral_reversal,
    windowed_sinc,
)
from dsprim.transform import fft, magnitude


def _response(kernel: np.ndarray, n_fft: int = 512) -> np.ndarray:
    # Magnitude response on [0, 0.5] in n_fft // 2 + 1 points
    padded = np.zeros(n_fft)
    padded[: len(kernel)] = kernel
    return magnitude(fft(padded))[: n_fft // 2 + 1]


def test_sinc_center_tap():
    """Center tap equals 2*fc."""
    kernel = sinc(5, 0.25)
    assert len(kernel) == 5
    assert kernel[2] == 0.5


def test_sinc_values():
    """Off-center taps follow sin(2*pi*fc*k)/(pi*k)."""
    kernel = sinc(7, 0.2)
    for i, value in enumerate(kernel):
        k = i - 3
        expected = 0.4 if k == 0 else np.sin(2 * np.pi * 0.2 * k) / (np.pi * k)
        assert abs(value - expected) < 1e-15
    # Symmetric about the center
    np.testing.assert_array_almost_equal(kernel, kernel[::-1])


def test_sinc_errors():
    """Test precondition checks."""
    with pytest.raises(LengthParityError):
        sinc(4, 0.25)
    with pytest.raises(RangeError):
        sinc(5, 0.0)
    with pytest.raises(RangeError):
        sinc(5, 0.6)
    with pytest.raises(RangeError):
        sinc(5, -0.1)
    # fc = 0.5 is allowed
    assert len(sinc(5, 0.5)) == 5


@pytest.mark.parametrize("M,fc", [(1, 0.1), (11, 0.05), (51, 0.2), (101, 0.25), (31, 0.5)])
def test_windowed_sinc_unity_dc_gain(M, fc):
    """Taps sum to one."""
    kernel = windowed_sinc(M, fc)
    assert len(kernel) == M
    assert abs(np.sum(kernel) - 1.0) < 1e-12


def test_windowed_sinc_hamming():
    """Alternative window is accepted and still normalized."""
    kernel = windowed_sinc(51, 0.2, window="hamming")
    assert abs(np.sum(kernel) - 1.0) < 1e-12
    assert not np.allclose(kernel, windowed_sinc(51, 0.2))

    with pytest.raises(ValueError):
        windowed_sinc(51, 0.2, window="kaiser")


def test_windowed_sinc_errors():
    """Same preconditions as sinc."""
    with pytest.raises(LengthParityError):
        windowed_sinc(50, 0.2)
    with pytest.raises(RangeError):
        windowed_sinc(51, 0.75)


def test_windowed_sinc_is_lowpass():
    """Passband near 1, stopband strongly attenuated."""
    h = _response(windowed_sinc(101, 0.1))
    freqs = np.linspace(0.0, 0.5, len(h))

    assert np.all(np.abs(h[freqs < 0.05] - 1.0) < 0.01)
    assert np.all(h[freqs > 0.15] < 1e-3)


def test_spectral_inversion_makes_highpass():
    """Inversion turns a lowpass into a highpass at the same cutoff."""
    lowpass = windowed_sinc(101, 0.1)
    highpass = spectral_inversion(lowpass)
    h = _response(highpass)
    freqs = np.linspace(0.0, 0.5, len(h))

    assert abs(np.sum(highpass)) < 1e-12
    assert np.all(h[freqs < 0.05] < 1e-3)
    assert np.all(np.abs(h[freqs > 0.15] - 1.0) < 0.01)


def test_spectral_reversal_mirrors_response():
    """Reversal maps a lowpass at fc onto a highpass at 0.5 - fc."""
    lowpass = windowed_sinc(101, 0.1)
    h_low = _response(lowpass)
    h_rev = _response(spectral_reversal(lowpass))

    # |H_rev(f)| == |H_low(0.5 - f)|
    np.testing.assert_allclose(h_rev, h_low[::-1], atol=1e-9)


def test_spectral_inversion_involution(rng):
    """Applying inversion twice gives back the kernel."""
    kernel = np.array([0.25, -0.5, 0.75, -0.5, 0.25])
    np.testing.assert_array_equal(spectral_inversion(spectral_inversion(kernel)), kernel)

    kernel = windowed_sinc(31, 0.3)
    np.testing.assert_array_equal(spectral_inversion(spectral_inversion(kernel)), kernel)

    kernel = rng.standard_normal(15)
    np.testing.assert_allclose(spectral_inversion(spectral_inversion(kernel)), kernel, atol=1e-15)


def test_spectral_reversal_involution(rng):
    """Applying reversal twice gives back the kernel exactly."""
    kernel = rng.standard_normal(21)
    np.testing.assert_array_equal(spectral_reversal(spectral_reversal(kernel)), kernel)


def test_spectral_transforms_do_not_mutate(rng):
    """Inputs are left untouched."""
    kernel = rng.standard_normal(9)
    original = kernel.copy()
    spectral_inversion(kernel)
    spectral_reversal(kernel)
    np.testing.assert_array_equal(kernel, original)


def test_spectral_transforms_require_odd_length():
    """Even kernels are rejected."""
    with pytest.raises(LengthParityError):
        spectral_inversion(np.ones(4))
    with pytest.raises(LengthParityError):
        spectral_reversal(np.ones(4))


def test_kernel_config_frozen():
    """Configs are immutable."""
    config = KernelConfig(length=51, cutoff=0.2)
    assert config.window == "blackman"
    assert config.pass_type == "lowpass"
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.length = 11


def test_design_kernel_lowpass():
    """Lowpass design is the windowed sinc."""
    kernel = design_kernel(KernelConfig(length=51, cutoff=0.2))
    np.testing.assert_array_equal(kernel, windowed_sinc(51, 0.2))


def test_design_kernel_highpass():
    """Highpass design is the inverted lowpass."""
    kernel = design_kernel(KernelConfig(length=51, cutoff=0.2, window="hamming", pass_type="highpass"))
    np.testing.assert_array_equal(kernel, spectral_inversion(windowed_sinc(51, 0.2, window="hamming")))
    assert abs(np.sum(kernel)) < 1e-12


def test_design_kernel_highpass_reversed():
    """Reversed highpass has its cutoff at the requested frequency."""
    kernel = design_kernel(KernelConfig(length=101, cutoff=0.4, pass_type="highpass_reversed"))
    h = _response(kernel)
    freqs = np.linspace(0.0, 0.5, len(h))

    assert np.all(h[freqs < 0.35] < 1e-3)
    assert np.all(np.abs(h[freqs > 0.45] - 1.0) < 0.01)


def test_design_kernel_errors():
    """Test design error handling."""
    with pytest.raises(ValueError):
        design_kernel(KernelConfig(length=51, cutoff=0.2, pass_type="bandpass"))
    with pytest.raises(LengthParityError):
        design_kernel(KernelConfig(length=50, cutoff=0.2, pass_type="highpass"))
    with pytest.raises(RangeError):
        design_kernel(KernelConfig(length=51, cutoff=0.5, pass_type="highpass_reversed"))
