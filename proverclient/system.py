"""System information and rough performance measurements."""

from __future__ import annotations

import functools
import math
import os
import platform
import sys
import time

import psutil

NUM_TESTS = 1_000_000
OPERATIONS_PER_ITERATION = 4  # sin, add, multiply, divide
NUM_REPEATS = 5

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def num_cores() -> int:
    """Number of logical cores available, 1 if unknown."""
    return os.cpu_count() or 1


def cpu_stats() -> tuple[int, int]:
    """Return (logical_cores, frequency_mhz); frequency is 0 when unavailable."""
    try:
        freq = psutil.cpu_freq()
    except (NotImplementedError, OSError, FileNotFoundError):
        freq = None
    mhz = int(freq.current) if freq is not None and freq.current else 0
    return num_cores(), mhz


def flops_per_cycle_per_core() -> int:
    """Double-precision operations per cycle assumed for one core."""
    if platform.machine().lower() in ("x86_64", "amd64"):
        # SSE2 is the x86-64 baseline: 128-bit vectors, 4 FP64 ops.
        return 4
    return 1


def estimate_peak_gflops(num_provers: int) -> float:
    """Estimate peak GFLOP/s from prover thread count and clock speed."""
    _, mhz = cpu_stats()
    return (num_provers * mhz * flops_per_cycle_per_core()) / 1000.0


@functools.lru_cache(maxsize=None)
def measure_gflops() -> float:
    """Measure GFLOP/s by timing a floating-point loop; cached after first call."""
    cores = os.cpu_count()
    if cores is None:
        print(
            "Warning: Unable to determine the number of logical cores. Defaulting to 1.",
            file=sys.stderr,
        )
        cores = 1

    rates = []
    for _ in range(NUM_REPEATS):
        start = time.perf_counter()
        total_flops = 0
        for _ in range(cores):
            x = 1.0
            for _ in range(NUM_TESTS):
                x = (math.sin(x) + 1.0) * 0.5 / 1.1
            total_flops += NUM_TESTS * OPERATIONS_PER_ITERATION
        elapsed = max(time.perf_counter() - start, 1e-9)
        rates.append(total_flops / elapsed)

    return sum(rates) / len(rates) / 1e9


def bytes_to_mb(num_bytes: int) -> int:
    """Convert bytes to thousandths of a MiB, rounded and clamped to 32 bits."""
    value = num_bytes * 1000.0 / 1_048_576.0
    rounded = math.floor(value + 0.5) if value >= 0 else -math.floor(-value + 0.5)
    return max(_I32_MIN, min(_I32_MAX, rounded))


def get_memory_info() -> tuple[int, int]:
    """Return (process memory, total system memory) as encoded by bytes_to_mb."""
    process_bytes = psutil.Process(os.getpid()).memory_info().rss
    total_bytes = psutil.virtual_memory().total
    return bytes_to_mb(process_bytes), bytes_to_mb(total_bytes)


def total_memory_gb() -> float:
    """Total system memory in GB (decimal)."""
    return psutil.virtual_memory().total / 1000.0 / 1000.0 / 1000.0


def process_memory_gb() -> float:
    """Memory used by the current process in GB (decimal)."""
    return psutil.Process(os.getpid()).memory_info().rss / 1000.0 / 1000.0 / 1000.0