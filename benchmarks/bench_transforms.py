"""Benchmark Fourier transforms and convolution."""

import time
from typing import Callable, Dict

import numpy as np

import dsprim as dp


def _time_call(func: Callable[[], object], repeats: int) -> float:
    # Warmup
    func()

    start = time.perf_counter()
    for _ in range(repeats):
        func()
    end = time.perf_counter()
    return (end - start) / repeats


def benchmark_fft(n: int, repeats: int = 10, seed: int = 0) -> Dict[str, float]:
    """Benchmark recursive FFT against the reference DFT.

    Args:
        n: Sequence length.
        repeats: Number of timed calls per transform.
        seed: RNG seed for the input sequence.

    Returns:
        Dictionary with timing results.
    """
    x = np.random.default_rng(seed).standard_normal(n)

    fft_time = _time_call(lambda: dp.fft(x), repeats)
    dft_time = _time_call(lambda: dp.dft(x), repeats)

    return {
        "n": n,
        "fft_time_sec": fft_time,
        "dft_time_sec": dft_time,
        "speedup": dft_time / fft_time,
    }


def benchmark_conv(n: int, m: int, repeats: int = 5, seed: int = 0) -> Dict[str, float]:
    """Benchmark bounds-checked against region-split convolution.

    Args:
        n: Signal length.
        m: Kernel length.
        repeats: Number of timed calls per method.
        seed: RNG seed for the inputs.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(seed)
    x = rng.standard_normal(n)
    h = rng.standard_normal(m)

    naive_time = _time_call(lambda: dp.naive_conv(x, h), repeats)
    optim_time = _time_call(lambda: dp.optim_conv(x, h), repeats)

    return {
        "n": n,
        "m": m,
        "naive_time_sec": naive_time,
        "optim_time_sec": optim_time,
        "speedup": naive_time / optim_time,
    }


if __name__ == "__main__":
    print("Benchmarking transforms...")

    for n in (256, 1024):
        results = benchmark_fft(n)
        print(f"FFT vs DFT (n={n}):")
        print(f"  FFT: {results['fft_time_sec']*1e3:.2f} ms")
        print(f"  DFT: {results['dft_time_sec']*1e3:.2f} ms")
        print(f"  Speedup: {results['speedup']:.1f}x")

    results = benchmark_conv(n=2000, m=51)
    print("Convolution (n=2000, m=51):")
    print(f"  naive: {results['naive_time_sec']*1e3:.2f} ms")
    print(f"  optim: {results['optim_time_sec']*1e3:.2f} ms")
    print(f"  Speedup: {results['speedup']:.1f}x")
