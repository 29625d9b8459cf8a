"""Serial vs. data-parallel Black-Scholes put pricing.

    PYTHONPATH=src python examples/blackscholes_speedup.py
"""

from __future__ import annotations

from functools import partial


def main() -> None:
    import matplotlib.pyplot as plt
    import numpy as np

    from parallel_primer import blackscholes_parallel, blackscholes_vec, speedup_table
    from parallel_primer.benchmark import run_blackscholes
    from parallel_primer.diagnostics import plot_speedup
    from parallel_primer.parallel import default_workers

    # Per-element loop vs. chunked threads
    report, cs_serial, cs_parallel = run_blackscholes(200_000)
    print(report.summary())
    print(f"  checksum serial={cs_serial:.6f} parallel={cs_parallel:.6f}")
    print()

    # Same kernel written as array expressions, fanned out over 1..N threads
    n = 5_000_000
    spot, rate, sigma, tau = 42.0, 0.5, 0.2, 0.5
    strikes = 40.0 + np.arange(n, dtype=np.float64) / n
    empty = np.empty(0, dtype=np.float64)

    counts = sorted({1, 2, 4, default_workers()})
    df = speedup_table(
        blackscholes_vec,
        lambda k: partial(blackscholes_parallel, n_workers=k, backend="thread"),
        counts,
        (spot, strikes, rate, sigma, tau),
        n_ops=n,
        warmup_args=(spot, empty, rate, sigma, tau),
    )
    print(df.to_string(index=False))

    plot_speedup(df)
    plt.show()


if __name__ == "__main__":
    main()
