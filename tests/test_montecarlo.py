import math

import numpy as np
import pytest

from parallel_primer.config import RandomConfig
from parallel_primer.kernels.montecarlo import (
    combine_counts,
    estimate_pi,
    estimate_pi_parallel,
    trials,
)
from parallel_primer.parallel.partition import split_evenly

# standard deviation of one point-in-circle indicator
_SD = math.sqrt(math.pi / 4.0 * (1.0 - math.pi / 4.0))


def test_zero_trials():
    assert trials(0) == 0
    assert estimate_pi(0) == 0.0
    assert estimate_pi_parallel(0) == 0.0
    assert combine_counts([], 0) == 0.0


def test_negative_trials_rejected():
    with pytest.raises(ValueError):
        trials(-1)
    with pytest.raises(ValueError):
        estimate_pi_parallel(-5)


def test_count_is_bounded_by_trials(rng):
    for n in (1, 10, 1_000):
        c = trials(n, rng=rng(n))
        assert 0 <= c <= n


def test_seed_makes_trials_reproducible():
    assert trials(10_000, seed=5) == trials(10_000, seed=5)


def test_batched_draws_count_every_point(monkeypatch, rng):
    """Trial counts larger than one batch are drawn in several batches."""
    import parallel_primer.kernels.montecarlo as mc

    monkeypatch.setattr(mc, "_BATCH", 1_000)
    c = trials(10_500, rng=rng(3))
    assert 0 <= c <= 10_500
    est = 4.0 * c / 10_500
    assert abs(est - math.pi) <= 5.0 * 4.0 * _SD / math.sqrt(10_500)


def test_estimate_pi_within_a_few_standard_errors():
    n = 1_000_000
    se = 4.0 * _SD / math.sqrt(n)
    assert abs(estimate_pi(n, seed=11) - math.pi) <= 5.0 * se


def test_repeated_runs_converge_to_pi():
    """500 runs of 10_000 trials rather than 10_000 runs, to keep the suite fast.

    The mean still lands well inside the 0.05 band: its standard error is about
    0.0007 at this run count.
    """
    runs = [estimate_pi(10_000, seed=s) for s in range(500)]
    assert abs(float(np.mean(runs)) - math.pi) < 0.05
    # spread of a single run is ~4*sd/sqrt(n)
    assert float(np.std(runs)) == pytest.approx(4.0 * _SD / 100.0, rel=0.2)


def test_partial_counts_combine_like_one_run():
    n = 400_000
    seqs = RandomConfig(seed=21).spawn(4)
    counts = [trials(k, seed=ss) for k, ss in zip(split_evenly(n, 4), seqs)]
    est = combine_counts(counts, n)
    assert abs(est - math.pi) <= 5.0 * 4.0 * _SD / math.sqrt(n)


@pytest.mark.parametrize("backend", ["thread", "process"])
def test_parallel_estimate(backend):
    n = 400_000
    est = estimate_pi_parallel(n, n_workers=2, backend=backend, seed=7)
    assert abs(est - math.pi) <= 5.0 * 4.0 * _SD / math.sqrt(n)


def test_parallel_is_reproducible_for_fixed_workers():
    a = estimate_pi_parallel(50_000, n_workers=2, backend="thread", seed=3)
    b = estimate_pi_parallel(50_000, n_workers=2, backend="thread", seed=3)
    assert a == b


def test_parallel_with_fewer_trials_than_workers():
    est = estimate_pi_parallel(1, n_workers=2, backend="thread", seed=0)
    assert est in (0.0, 4.0)


def test_parallel_seed_keyword_overrides_config():
    kw = estimate_pi_parallel(50_000, n_workers=2, backend="thread", seed=1)
    both = estimate_pi_parallel(
        50_000, n_workers=2, backend="thread", seed=1, cfg=RandomConfig(seed=2)
    )
    from_cfg = estimate_pi_parallel(
        50_000, n_workers=2, backend="thread", cfg=RandomConfig(seed=2)
    )
    assert both == kw
    assert from_cfg == estimate_pi_parallel(
        50_000, n_workers=2, backend="thread", seed=2
    )
