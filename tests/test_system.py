from collections import namedtuple
from unittest import mock

import psutil
import pytest

from proverclient import system

Freq = namedtuple("Freq", "current min max")


def test_num_cores_positive():
    assert system.num_cores() >= 1


def test_cpu_stats_cores_match():
    cores, mhz = system.cpu_stats()
    assert cores == system.num_cores()
    assert mhz >= 0


def test_cpu_stats_without_frequency():
    with mock.patch.object(psutil, "cpu_freq", return_value=None):
        assert system.cpu_stats()[1] == 0


def test_flops_per_cycle_choices():
    assert system.flops_per_cycle_per_core() in (1, 4)


def test_estimate_peak_gflops_scales_with_provers():
    with mock.patch.object(psutil, "cpu_freq", return_value=Freq(2000.0, 0.0, 0.0)):
        four = system.estimate_peak_gflops(4)
        two = system.estimate_peak_gflops(2)
    assert four > 0.0
    assert four == pytest.approx(2 * two)


def test_estimate_peak_gflops_zero_without_frequency():
    with mock.patch.object(psutil, "cpu_freq", return_value=None):
        assert system.estimate_peak_gflops(8) == 0.0


def test_bytes_to_mb_one_mib():
    assert system.bytes_to_mb(1_048_576) == 1000
    assert system.bytes_to_mb(0) == 0


def test_bytes_to_mb_monotonic():
    values = [system.bytes_to_mb(n) for n in range(0, 10_000, 37)]
    assert values == sorted(values)


def test_bytes_to_mb_saturates():
    assert system.bytes_to_mb(10**18) == 2**31 - 1


def test_memory_info_consistent():
    process_mb, total_mb = system.get_memory_info()
    assert 0 < process_mb <= total_mb


def test_memory_gb_values():
    total = system.total_memory_gb()
    assert total > 0.0
    assert 0.0 < system.process_memory_gb() <= total


def test_measure_gflops_cached(monkeypatch):
    monkeypatch.setattr(system, "NUM_TESTS", 200)
    monkeypatch.setattr(system, "NUM_REPEATS", 1)
    system.measure_gflops.cache_clear()
    try:
        first = system.measure_gflops()
        assert first > 0.0
        assert system.measure_gflops() == first
    finally:
        system.measure_gflops.cache_clear()