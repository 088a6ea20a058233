"""Performance benchmarks for dsprim.

This package contains microbenchmarks for the recursive FFT against the
reference DFT and for the region-split convolution against the bounds-checked
reference.
"""
