"""GEMM loop orderings, Strassen multiplication, matrix swaps, binary matrix I/O and benchmarks."""

__version__ = "0.1.0"