from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from ..config import RandomConfig
from ..parallel.executors import make_executor, resolve_workers
from ..parallel.partition import split_evenly
from ..types import Backend
from ..typing import IntArray

__all__ = [
    "trials",
    "estimate_pi",
    "combine_counts",
    "estimate_pi_parallel",
    "walk_steps",
    "walk_final_position",
    "random_walk",
    "random_walks",
    "random_walks_parallel",
]

# points drawn per batch; bounds memory for large trial counts
_BATCH = 1 << 20

type Seed = int | np.random.SeedSequence | None


def _make_rng(seed: Seed, rng: np.random.Generator | None) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def _check_count(name: str, n: int) -> int:
    n = int(n)
    if n < 0:
        raise ValueError(f"{name} must be >= 0")
    return n


# -------------------------
# Pi estimation
# -------------------------
def trials(
    n: int, *, seed: Seed = None, rng: np.random.Generator | None = None
) -> int:
    """
    Count how many of ``n`` uniform points in the unit square fall inside the unit circle.

    Parameters
    ----------
    n : int
        Number of points. ``0`` returns ``0``.
    seed : int | np.random.SeedSequence | None
        Seed for a fresh generator when ``rng`` is not provided.
    rng : np.random.Generator | None
        Generator to draw from; takes precedence over ``seed``.

    Returns
    -------
    int
        Hit count, ``0 <= count <= n``.
    """
    n = _check_count("n", n)
    gen = _make_rng(seed, rng)

    hits = 0
    remaining = n
    while remaining > 0:
        m = min(remaining, _BATCH)
        xy = gen.random((2, m))
        hits += int(np.count_nonzero(xy[0] * xy[0] + xy[1] * xy[1] < 1.0))
        remaining -= m
    return hits


def combine_counts(counts: Iterable[int], n_total: int) -> float:
    """``4 * sum(counts) / n_total``; an empty budget (``n_total == 0``) gives ``0.0``."""
    n_total = _check_count("n_total", n_total)
    if n_total == 0:
        return 0.0
    return 4.0 * sum(int(c) for c in counts) / n_total


def estimate_pi(
    n: int, *, seed: Seed = None, rng: np.random.Generator | None = None
) -> float:
    """Monte Carlo estimate of pi from ``n`` points; ``n == 0`` gives ``0.0``."""
    return combine_counts([trials(n, seed=seed, rng=rng)], n)


def _trials_from_seed(job: tuple[int, np.random.SeedSequence]) -> int:
    n, ss = job
    return trials(n, seed=ss)


def estimate_pi_parallel(
    n: int,
    *,
    n_workers: int | None = None,
    backend: Backend | str = Backend.PROCESS,
    seed: int | None = None,
    cfg: RandomConfig | None = None,
) -> float:
    """
    Estimate pi with the trial budget split across independent workers.

    Each partition draws from its own child stream of
    ``SeedSequence(seed)``, so the partial counts are independent. Counts are
    gathered once every worker has finished and then summed.

    Notes
    -----
    The result is statistically, not bitwise, equivalent to
    :func:`estimate_pi` on the same budget: with a fixed ``seed`` it is
    reproducible for a fixed number of workers only.
    """
    n = _check_count("n", n)
    if n == 0:
        return 0.0
    if seed is None and cfg is not None:
        seed = cfg.seed
    cfg = RandomConfig(seed=seed)
    workers = min(resolve_workers(n_workers), n)

    sizes = split_evenly(n, workers)
    jobs = list(zip(sizes, cfg.spawn(workers), strict=True))
    with make_executor(backend, workers) as ex:
        counts = list(ex.map(_trials_from_seed, jobs))
    return combine_counts(counts, n)


# -------------------------
# Random walks
# -------------------------
def walk_steps(
    n: int, *, seed: Seed = None, rng: np.random.Generator | None = None
) -> IntArray:
    """``n`` independent steps, each -1 or +1 with equal probability."""
    n = _check_count("n", n)
    gen = _make_rng(seed, rng)
    return 2 * gen.integers(0, 2, size=n, dtype=np.int64) - 1


def walk_final_position(
    n: int, *, seed: Seed = None, rng: np.random.Generator | None = None
) -> int:
    """Position of a walker after ``n`` +-1 steps from the origin."""
    return int(walk_steps(n, seed=seed, rng=rng).sum())


def random_walk(
    numsteps: int, *, seed: Seed = None, rng: np.random.Generator | None = None
) -> IntArray:
    """
    Trajectory of a single +-1 walk, origin included.

    Returns
    -------
    np.ndarray
        ``int64`` positions of length ``numsteps + 1``; ``out[0] == 0`` and
        ``abs(out[k+1] - out[k]) == 1``.

    Notes
    -----
    Each position depends on the previous one, so a single trajectory is never
    split across workers; only whole walkers are (see
    :func:`random_walks_parallel`).
    """
    steps = walk_steps(numsteps, seed=seed, rng=rng)
    out = np.zeros(steps.shape[0] + 1, dtype=np.int64)
    out[1:] = np.cumsum(steps)
    return out


def random_walks(
    n_walkers: int,
    numsteps: int,
    *,
    seed: Seed = None,
    rng: np.random.Generator | None = None,
) -> IntArray:
    """Independent trajectories, one per row: shape ``(n_walkers, numsteps + 1)``."""
    n_walkers = _check_count("n_walkers", n_walkers)
    numsteps = _check_count("numsteps", numsteps)
    gen = _make_rng(seed, rng)

    steps = 2 * gen.integers(0, 2, size=(n_walkers, numsteps), dtype=np.int64) - 1
    out = np.zeros((n_walkers, numsteps + 1), dtype=np.int64)
    out[:, 1:] = np.cumsum(steps, axis=1)
    return out


def _walk_from_seed(job: tuple[int, np.random.SeedSequence]) -> IntArray:
    numsteps, ss = job
    return random_walk(numsteps, seed=ss)


def random_walks_parallel(
    n_walkers: int,
    numsteps: int,
    *,
    n_workers: int | None = None,
    backend: Backend | str = Backend.PROCESS,
    seed: int | None = None,
    cfg: RandomConfig | None = None,
) -> IntArray:
    """
    Generate independent walkers on a pool of workers, one random stream per walker.

    Returns the same layout as :func:`random_walks`.
    """
    n_walkers = _check_count("n_walkers", n_walkers)
    numsteps = _check_count("numsteps", numsteps)
    out = np.zeros((n_walkers, numsteps + 1), dtype=np.int64)
    if n_walkers == 0:
        return out
    if seed is None and cfg is not None:
        seed = cfg.seed
    cfg = RandomConfig(seed=seed)
    workers = min(resolve_workers(n_workers), n_walkers)

    jobs = [(numsteps, ss) for ss in cfg.spawn(n_walkers)]
    with make_executor(backend, workers) as ex:
        for i, path in enumerate(ex.map(_walk_from_seed, jobs)):
            out[i] = path
    return out
