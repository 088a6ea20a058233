"""Tests for dsprim.generators module."""

import numpy as np
import pytest

from dsprim.errors import BoundsError, RangeError
from dsprim.generators import impulse, rectangle, sin_sequence, step


def test_impulse():
    """Test impulse generation."""
    np.testing.assert_array_equal(impulse(4), [1.0, 0.0, 0.0, 0.0])
    np.testing.assert_array_equal(impulse(4, magnitude=2.5, delay=2), [0.0, 0.0, 2.5, 0.0])

    with pytest.raises(BoundsError):
        impulse(4, delay=4)
    with pytest.raises(BoundsError):
        impulse(4, delay=-1)


def test_step():
    """Test step generation."""
    np.testing.assert_array_equal(step(5, delay=2), [0.0, 0.0, 1.0, 1.0, 1.0])
    np.testing.assert_array_equal(step(3, magnitude=-1.0), [-1.0, -1.0, -1.0])

    with pytest.raises(RangeError):
        step(0)
    with pytest.raises(BoundsError):
        step(3, delay=5)


def test_rectangle():
    """Test rectangle pulse generation."""
    np.testing.assert_array_equal(rectangle(6, 2, delay=1), [0.0, 1.0, 1.0, 0.0, 0.0, 0.0])
    # Pulse is cut at the end of the sequence
    np.testing.assert_array_equal(rectangle(4, 10, magnitude=3.0, delay=2), [0.0, 0.0, 3.0, 3.0])
    # Empty pulse
    np.testing.assert_array_equal(rectangle(3, 0), [0.0, 0.0, 0.0])

    with pytest.raises(RangeError):
        rectangle(4, -1)
    with pytest.raises(BoundsError):
        rectangle(4, 2, delay=4)


def test_sin_sequence():
    """Test sine generation."""
    x = sin_sequence(8, 1)
    np.testing.assert_array_almost_equal(x, np.sin(2 * np.pi * np.arange(8) / 8))

    x = sin_sequence(16, 2, amplitude=3.0)
    assert abs(np.max(x) - 3.0) < 1e-12

    # k = 0 is a flat line
    np.testing.assert_array_equal(sin_sequence(4, 0), np.zeros(4))

    with pytest.raises(BoundsError):
        sin_sequence(8, 4)
    with pytest.raises(BoundsError):
        sin_sequence(8, -1)


def test_impulse_through_conv():
    """An impulse reproduces a kernel under convolution."""
    from dsprim.conv import optim_conv
    from dsprim.fir import windowed_sinc

    kernel = windowed_sinc(11, 0.2)
    y = optim_conv(impulse(20, delay=3), kernel)

    np.testing.assert_allclose(y[3 : 3 + len(kernel)], kernel, atol=1e-15)
