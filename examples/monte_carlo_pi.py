"""Estimating pi by point counting, locally and across worker processes.

    PYTHONPATH=src python examples/monte_carlo_pi.py
"""

from __future__ import annotations


def main() -> None:
    import numpy as np

    from parallel_primer import WorkerPool, estimate_pi, trials
    from parallel_primer.benchmark import run_pi
    from parallel_primer.kernels.montecarlo import combine_counts
    from parallel_primer.parallel import split_evenly

    print("pi ~", estimate_pi(10_000_000, seed=1))

    # Fan-out by hand: one handle per worker, each with its own stream
    n = 10_000_000
    with WorkerPool(4) as pool:
        streams = np.random.SeedSequence(2).spawn(pool.n_workers)
        sizes = split_evenly(n, pool.n_workers)
        handles = [
            pool.spawn(trials, k, seed=ss) for k, ss in zip(sizes, streams, strict=True)
        ]
        print("handles:", handles)
        counts = [h.fetch() for h in handles]
    print("partial counts:", counts)
    print("pi ~", combine_counts(counts, n))
    print()

    report = run_pi(50_000_000, seed=3)
    print(report.summary())
    print(f"  pi serial={report.serial.value:.6f} parallel={report.parallel.value:.6f}")


if __name__ == "__main__":
    main()
