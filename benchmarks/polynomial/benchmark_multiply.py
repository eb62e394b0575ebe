"""Benchmark polynomial multiplication.

Compares direct (O(n^2)) vs FFT-based (O(n log n)) multiplication
across different polynomial degrees, and the hand-written transform
against torch.fft.
"""

import time

import torch

from torchfftpoly.polynomial import (
    polynomial,
    polynomial_multiply,
    polynomial_multiply_auto,
    polynomial_multiply_fft,
)
from torchfftpoly.transform import fourier_transform


def benchmark_multiply(
    degree: int,
    n_iterations: int = 100,
    device: str = "cpu",
    method: str = "auto",
) -> float:
    """Benchmark multiplication at given degree.

    Parameters
    ----------
    degree : int
        Degree of polynomials to multiply.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'auto', 'direct', or 'fft'.

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    a = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))
    b = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))

    # Select multiplication function
    if method == "auto":
        multiply_fn = polynomial_multiply_auto
    elif method == "direct":
        multiply_fn = polynomial_multiply
    elif method == "fft":
        multiply_fn = polynomial_multiply_fft
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(10):
        _ = multiply_fn(a, b)

    # Synchronize before timing (important for CUDA)
    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = multiply_fn(a, b)

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_transform(n: int, n_iterations: int = 100) -> tuple:
    """Time fourier_transform and torch.fft.ifft at length n, in ms."""
    x = torch.randn(n, dtype=torch.complex128)

    timings = []
    for transform_fn in (fourier_transform, torch.fft.ifft):
        for _ in range(10):
            _ = transform_fn(x)

        start = time.perf_counter()
        for _ in range(n_iterations):
            _ = transform_fn(x)
        timings.append((time.perf_counter() - start) / n_iterations * 1000)

    return tuple(timings)


def main():
    """Run multiplication benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256, 512, 1024, 2048]

    print("Polynomial Multiplication Benchmark")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Direct (ms)':>14} {'FFT (ms)':>14} {'Auto (ms)':>14}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_direct = benchmark_multiply(degree, method="direct")
        ms_fft = benchmark_multiply(degree, method="fft")
        ms_auto = benchmark_multiply(degree, method="auto")

        print(
            f"{degree:>8} {ms_direct:>14.4f} {ms_fft:>14.4f} {ms_auto:>14.4f}"
        )

    print()
    print("Transform Benchmark")
    print("=" * 70)
    print(f"{'Length':>8} {'Cooley-Tukey (ms)':>20} {'torch.fft (ms)':>16}")
    print("-" * 70)

    for log in range(4, 15, 2):
        n = 1 << log
        ms_ours, ms_torch = benchmark_transform(n)
        print(f"{n:>8} {ms_ours:>20.4f} {ms_torch:>16.4f}")

    print()
    print("Notes:")
    print("- Direct uses O(n^2) shifted-copy convolution")
    print("- FFT uses O(n log n) radix-2 Cooley-Tukey convolution")
    print("- Auto switches from Direct to FFT at degree >= 64")


if __name__ == "__main__":
    main()
