"""Serial vs. parallel timing harness.

Each kernel variant is run once (after an optional priming call that is kept
out of the measurement) and the wall times are reported as a speedup ratio
plus throughput in operations per second. Exceptions raised by a kernel are
not caught.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import Any

import numpy as np
import pandas as pd

from .config import BenchmarkConfig
from .kernels.blackscholes import blackscholes, blackscholes_parallel, checksum
from .kernels.montecarlo import (
    estimate_pi,
    estimate_pi_parallel,
    random_walks,
    random_walks_parallel,
)
from .parallel.executors import resolve_workers
from .types import Backend, SpeedupReport, TimingResult

__all__ = [
    "time_call",
    "compare",
    "speedup_table",
    "run_blackscholes",
    "run_pi",
    "run_walks",
]


def time_call(
    fn: Callable[..., Any],
    /,
    *args: Any,
    warmup: bool | tuple = False,
    label: str | None = None,
    repeats: int = 1,
    **kwargs: Any,
) -> TimingResult:
    """
    Time ``fn(*args, **kwargs)`` with ``time.perf_counter``.

    Parameters
    ----------
    warmup : bool | tuple, default False
        ``True`` primes with the same arguments, a tuple primes with those
        positional arguments instead (e.g. a zero-length input). The priming
        call is not timed.
    repeats : int, default 1
        Number of timed calls; the fastest one is reported.
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")
    if warmup is True:
        fn(*args, **kwargs)
    elif isinstance(warmup, tuple):
        fn(*warmup, **kwargs)

    best = float("inf")
    value = None
    for _ in range(repeats):
        t0 = time.perf_counter()
        value = fn(*args, **kwargs)
        best = min(best, time.perf_counter() - t0)
    return TimingResult(label=label or getattr(fn, "__name__", "call"), seconds=best, value=value)


def compare(
    serial: Callable[..., Any],
    parallel: Callable[..., Any],
    args: Sequence[Any],
    *,
    n_ops: int,
    n_workers: int,
    label: str = "kernel",
    warmup_args: tuple | None = None,
    cfg: BenchmarkConfig | None = None,
) -> SpeedupReport:
    """Time a sequential and a parallel variant on the same arguments."""
    cfg = cfg or BenchmarkConfig()
    warmup: bool | tuple = False
    if cfg.warmup:
        warmup = warmup_args if warmup_args is not None else True

    s = time_call(serial, *args, warmup=warmup, label="serial", repeats=cfg.repeats)
    p = time_call(parallel, *args, warmup=warmup, label="parallel", repeats=cfg.repeats)
    return SpeedupReport(
        label=label, serial=s, parallel=p, n_ops=int(n_ops), n_workers=int(n_workers)
    )


def speedup_table(
    serial: Callable[..., Any],
    make_parallel: Callable[[int], Callable[..., Any]],
    worker_counts: Sequence[int],
    args: Sequence[Any],
    *,
    n_ops: int,
    warmup_args: tuple | None = None,
    cfg: BenchmarkConfig | None = None,
) -> pd.DataFrame:
    """
    Speedup of a parallel variant for several worker counts.

    ``make_parallel(k)`` must return the parallel callable using ``k`` workers.
    The serial variant is timed once and shared by every row.

    Returns a DataFrame with columns:
        workers, serial_s, parallel_s, speedup, serial_ops_per_s, parallel_ops_per_s
    """
    cfg = cfg or BenchmarkConfig()
    warmup: bool | tuple = False
    if cfg.warmup:
        warmup = warmup_args if warmup_args is not None else True

    s = time_call(serial, *args, warmup=warmup, label="serial", repeats=cfg.repeats)

    rows: list[dict[str, object]] = []
    for k in worker_counts:
        p = time_call(
            make_parallel(int(k)),
            *args,
            warmup=warmup,
            label=f"parallel[{k}]",
            repeats=cfg.repeats,
        )
        report = SpeedupReport(
            label="", serial=s, parallel=p, n_ops=int(n_ops), n_workers=int(k)
        )
        rows.append(
            {
                "workers": int(k),
                "serial_s": s.seconds,
                "parallel_s": p.seconds,
                "speedup": report.speedup,
                "serial_ops_per_s": report.serial_throughput,
                "parallel_ops_per_s": report.parallel_throughput,
            }
        )
    return pd.DataFrame(rows)


# -------------------------
# Canned demos (used by the CLI and examples/)
# -------------------------
def run_blackscholes(
    n_options: int,
    *,
    spot: float = 42.0,
    strike: float = 40.0,
    rate: float = 0.5,
    sigma: float = 0.2,
    tau: float = 0.5,
    n_workers: int | None = None,
    backend: Backend | str = Backend.THREAD,
) -> tuple[SpeedupReport, float, float]:
    """
    Time the per-element put kernel against its chunked parallel variant.

    Strikes are ``strike + i / n_options`` for ``i`` in ``range(n_options)``.
    Both variants are primed with a zero-length strike vector.

    Returns
    -------
    (report, serial_checksum, parallel_checksum)
    """
    workers = resolve_workers(n_workers)
    strikes = strike + np.arange(n_options, dtype=np.float64) / max(n_options, 1)
    empty = np.empty(0, dtype=np.float64)

    def parallel(sp, k, r, v, t):
        return blackscholes_parallel(sp, k, r, v, t, n_workers=workers, backend=backend)

    report = compare(
        blackscholes,
        parallel,
        (spot, strikes, rate, sigma, tau),
        n_ops=n_options,
        n_workers=workers,
        label="blackscholes",
        warmup_args=(spot, empty, rate, sigma, tau),
    )
    return report, checksum(report.serial.value), checksum(report.parallel.value)


def run_pi(
    n_trials: int,
    *,
    n_workers: int | None = None,
    backend: Backend | str = Backend.PROCESS,
    seed: int | None = None,
) -> SpeedupReport:
    """Time a single-stream pi estimate against the partitioned one; both primed with 1000 trials."""
    workers = resolve_workers(n_workers)

    def serial(n):
        return estimate_pi(n, seed=seed)

    def parallel(n):
        return estimate_pi_parallel(n, n_workers=workers, backend=backend, seed=seed)

    return compare(
        serial,
        parallel,
        (n_trials,),
        n_ops=n_trials,
        n_workers=workers,
        label="estimate_pi",
        warmup_args=(1000,),
    )


def run_walks(
    n_walkers: int,
    numsteps: int,
    *,
    n_workers: int | None = None,
    backend: Backend | str = Backend.PROCESS,
    seed: int | None = None,
) -> SpeedupReport:
    """Time generating independent walkers in one stream vs. across workers."""
    workers = resolve_workers(n_workers)

    def serial(w, s):
        return random_walks(w, s, seed=seed)

    def parallel(w, s):
        return random_walks_parallel(
            w, s, n_workers=workers, backend=backend, seed=seed
        )

    return compare(
        serial,
        parallel,
        (n_walkers, numsteps),
        n_ops=n_walkers * numsteps,
        n_workers=workers,
        label="random_walks",
        warmup_args=(1, 10),
    )
