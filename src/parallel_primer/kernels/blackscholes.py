from __future__ import annotations

import math
from concurrent.futures import Future
from functools import partial

import numpy as np

from ..config import ParallelConfig
from ..models import bs as bs_model
from ..parallel.darray import DistributedArray
from ..parallel.executors import WorkerPool, make_executor, resolve_workers
from ..parallel.partition import partition_range
from ..types import Backend
from ..typing import ArrayLike, FloatArray

__all__ = [
    "blackscholes",
    "blackscholes_vec",
    "blackscholes_parallel",
    "blackscholes_distributed",
    "checksum",
]


# -------------------------
# Sequential kernels
# -------------------------
def _put_one(
    spot: float,
    strike: float,
    vol_sqrt_t: float,
    drift: float,
    discount: float,
) -> float:
    d1 = (math.log(spot / strike) + drift) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    future_value = strike * discount
    call = spot * bs_model.norm_cdf_scalar(d1) - future_value * bs_model.norm_cdf_scalar(
        d2
    )
    return call - future_value + spot


def blackscholes(
    spot: float, strikes: ArrayLike, rate: float, sigma: float, tau: float
) -> FloatArray:
    """
    Benchmark put kernel, one strike at a time.

    Parameters
    ----------
    spot : float
        Spot price of the underlying.
    strikes : array_like
        Strike prices; one output per strike, in the same order.
    rate : float
        Continuously-compounded risk-free rate.
    sigma : float
        Volatility.
    tau : float
        Time to expiry.

    Returns
    -------
    np.ndarray
        Put values, ``float64``, same length as ``strikes``.

    Notes
    -----
    Per strike: ``futureValue = K e^{-r tau}``,
    ``call = S N(d1) - futureValue N(d2)`` and
    ``put = call - futureValue + S``. That last combination is the benchmark's
    own and is kept as is; it exceeds the arbitrage-free put of
    :func:`parallel_primer.models.bs.put_price` by ``2 (S - futureValue)``.

    Each output element depends only on its strike and the four scalars.
    Non-positive strikes, volatility or time are not checked; Python's math
    domain errors propagate.
    """
    strikes = np.asarray(strikes, dtype=np.float64)
    out = np.empty(strikes.shape[0], dtype=np.float64)

    vol_sqrt_t = sigma * math.sqrt(tau)
    drift = (rate + 0.5 * sigma * sigma) * tau
    discount = bs_model.discount_factor(rate, tau)
    for i in range(out.shape[0]):
        out[i] = _put_one(spot, float(strikes[i]), vol_sqrt_t, drift, discount)
    return out


def blackscholes_vec(
    spot: float, strikes: ArrayLike, rate: float, sigma: float, tau: float
) -> FloatArray:
    """Same kernel as :func:`blackscholes`, as whole-array NumPy expressions."""
    strikes = np.asarray(strikes, dtype=np.float64)
    d1, d2 = bs_model.d1_d2(spot=spot, strike=strikes, rate=rate, sigma=sigma, tau=tau)
    future_value = strikes * bs_model.discount_factor(rate, tau)
    call = spot * bs_model.norm_cdf(d1) - future_value * bs_model.norm_cdf(d2)
    return np.asarray(call - future_value + spot, dtype=np.float64)


def _put_for_strikes(
    strikes: np.ndarray, *, spot: float, rate: float, sigma: float, tau: float
) -> FloatArray:
    # module-level so a process pool can pickle it
    return blackscholes_vec(spot, strikes, rate, sigma, tau)


# -------------------------
# Data-parallel fan-out
# -------------------------
def blackscholes_parallel(
    spot: float,
    strikes: ArrayLike,
    rate: float,
    sigma: float,
    tau: float,
    *,
    n_workers: int | None = None,
    backend: Backend | str | None = None,
    chunks: int | None = None,
    cfg: ParallelConfig | None = None,
) -> FloatArray:
    """
    Price the strikes in contiguous chunks on several execution units.

    The output is allocated at full length before any work is dispatched and
    each unit owns a disjoint index range of it, so no locking is needed.

    Parameters
    ----------
    spot, strikes, rate, sigma, tau
        As for :func:`blackscholes`.
    n_workers : int | None
        Number of workers. Falls back to ``cfg.n_workers``, then to one per CPU.
    backend : {"thread", "process"} | None
        ``"thread"`` writes each chunk straight into its slice of the shared
        output. ``"process"`` ships a copy of each strike chunk to a worker
        process and copies the returned chunk into place after all units
        have completed. Falls back to ``cfg.backend`` (threads by default).
    chunks : int | None
        Number of index partitions; defaults to one per worker.
    cfg : ParallelConfig | None
        Defaults for the three options above; explicit keywords win.

    Returns
    -------
    np.ndarray
        Element-wise equal (up to floating point) to :func:`blackscholes`.
    """
    cfg = cfg or ParallelConfig()
    strikes = np.asarray(strikes, dtype=np.float64)
    n = strikes.shape[0]
    out = np.empty(n, dtype=np.float64)
    if n == 0:
        return out

    workers = resolve_workers(n_workers if n_workers is not None else cfg.n_workers)
    backend = Backend(backend if backend is not None else cfg.backend)
    n_chunks = chunks if chunks is not None else (cfg.chunks or workers)
    parts = [p for p in partition_range(n, min(n_chunks, n)) if len(p) > 0]

    kernel = partial(_put_for_strikes, spot=spot, rate=rate, sigma=sigma, tau=tau)

    with make_executor(backend, min(workers, len(parts))) as ex:
        if backend == Backend.THREAD:

            def fill(sl: slice) -> None:
                out[sl] = kernel(strikes[sl])

            futures: list[Future] = [ex.submit(fill, p.slice) for p in parts]
            for f in futures:
                f.result()
        else:
            futures = [ex.submit(kernel, strikes[p.slice].copy()) for p in parts]
            for p, f in zip(parts, futures, strict=True):
                out[p.slice] = f.result()
    return out


def blackscholes_distributed(
    spot: float,
    strikes: DistributedArray,
    rate: float,
    sigma: float,
    tau: float,
    *,
    pool: WorkerPool | None = None,
) -> DistributedArray:
    """Price a distributed strike array chunk by chunk; the result keeps the same partition map."""
    kernel = partial(_put_for_strikes, spot=spot, rate=rate, sigma=sigma, tau=tau)
    return strikes.map_local(kernel, pool=pool)


def checksum(prices: ArrayLike) -> float:
    """Sum of a result vector, as printed by the timing demos."""
    return float(np.sum(np.asarray(prices, dtype=np.float64)))
