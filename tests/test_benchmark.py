import time

import numpy as np
import pytest

from parallel_primer.benchmark import (
    compare,
    run_blackscholes,
    run_pi,
    run_walks,
    speedup_table,
    time_call,
)
from parallel_primer.config import BenchmarkConfig
from parallel_primer.types import SpeedupReport, TimingResult


def test_time_call_keeps_value_and_measures():
    r = time_call(time.sleep, 0.02, label="sleep")
    assert isinstance(r, TimingResult)
    assert r.label == "sleep"
    assert r.seconds >= 0.015
    assert r.value is None


def test_priming_call_is_not_timed():
    calls = []

    def fn(x):
        calls.append(x)
        if x == "prime":
            time.sleep(0.2)
        return x

    r = time_call(fn, "real", warmup=("prime",))
    assert calls == ["prime", "real"]
    assert r.value == "real"
    assert r.seconds < 0.2


def test_warmup_true_primes_with_same_args():
    calls = []
    time_call(calls.append, 1, warmup=True)
    assert calls == [1, 1]


def test_repeats_report_fastest():
    calls = []
    r = time_call(calls.append, 0, repeats=3)
    assert len(calls) == 3
    assert r.seconds >= 0.0
    with pytest.raises(ValueError):
        time_call(calls.append, 0, repeats=0)


def test_speedup_and_throughput():
    report = SpeedupReport(
        label="k",
        serial=TimingResult("serial", 2.0),
        parallel=TimingResult("parallel", 0.5),
        n_ops=1_000,
        n_workers=4,
    )
    assert report.speedup == pytest.approx(4.0)
    assert report.serial_throughput == pytest.approx(500.0)
    assert report.parallel_throughput == pytest.approx(2_000.0)
    text = report.summary()
    assert "speedup  4.00x" in text
    assert "4 workers" in text


def test_zero_elapsed_gives_infinite_ratios():
    r = TimingResult("x", 0.0)
    assert r.throughput(10) == float("inf")


def test_kernel_errors_propagate():
    def bad(_):
        raise ArithmeticError("kernel failed")

    with pytest.raises(ArithmeticError):
        compare(bad, bad, (1,), n_ops=1, n_workers=1)


def test_compare_without_warmup():
    calls = []
    compare(
        calls.append,
        calls.append,
        ("x",),
        n_ops=1,
        n_workers=1,
        cfg=BenchmarkConfig(warmup=False),
    )
    assert calls == ["x", "x"]


def test_speedup_table_columns():
    df = speedup_table(
        np.sum,
        lambda k: np.sum,
        [1, 2],
        (np.ones(10),),
        n_ops=10,
    )
    assert list(df.columns) == [
        "workers",
        "serial_s",
        "parallel_s",
        "speedup",
        "serial_ops_per_s",
        "parallel_ops_per_s",
    ]
    assert df["workers"].tolist() == [1, 2]


def test_run_blackscholes_checksums_agree():
    report, cs_serial, cs_parallel = run_blackscholes(2_000, n_workers=2)
    assert report.n_ops == 2_000
    assert report.serial.value.shape == (2_000,)
    assert cs_parallel == pytest.approx(cs_serial, rel=1e-9)


def test_run_pi_and_walks_report_values():
    report = run_pi(20_000, n_workers=2, backend="thread", seed=1)
    assert 2.9 < report.serial.value < 3.4
    assert 2.9 < report.parallel.value < 3.4

    report = run_walks(4, 100, n_workers=2, backend="thread", seed=1)
    assert report.parallel.value.shape == (4, 101)
    assert report.n_ops == 400
