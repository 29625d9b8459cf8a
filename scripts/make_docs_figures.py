from __future__ import annotations

from functools import partial
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from parallel_primer import blackscholes_parallel, blackscholes_vec, speedup_table
from parallel_primer.diagnostics import plot_random_walk, plot_random_walks, plot_speedup
from parallel_primer.kernels.montecarlo import random_walk, random_walks_parallel
from parallel_primer.parallel import default_workers


def main() -> None:
    out_dir = Path(__file__).resolve().parents[1] / "docs" / "assets"
    out_dir.mkdir(parents=True, exist_ok=True)

    # --- Plot 1: one walk, position vs step ---
    fig, _ = plot_random_walk(random_walk(5_000, seed=0))
    fig.savefig(out_dir / "random_walk.png", dpi=200)
    plt.close(fig)

    # --- Plot 2: independent walkers generated on worker processes ---
    fig, _ = plot_random_walks(random_walks_parallel(16, 5_000, seed=1), n_plot=16)
    fig.savefig(out_dir / "random_walks.png", dpi=200)
    plt.close(fig)

    # --- Plot 3: thread speedup of the vectorized put kernel ---
    n = 4_000_000
    spot, rate, sigma, tau = 42.0, 0.5, 0.2, 0.5
    strikes = 40.0 + np.arange(n, dtype=np.float64) / n
    empty = np.empty(0, dtype=np.float64)

    counts = list(range(1, default_workers() + 1))
    df = speedup_table(
        blackscholes_vec,
        lambda k: partial(blackscholes_parallel, n_workers=k, backend="thread"),
        counts,
        (spot, strikes, rate, sigma, tau),
        n_ops=n,
        warmup_args=(spot, empty, rate, sigma, tau),
    )
    print(df.to_string(index=False))

    fig, _ = plot_speedup(df)
    fig.savefig(out_dir / "blackscholes_speedup.png", dpi=200)
    plt.close(fig)

    print(f"Wrote figures to: {out_dir}")


if __name__ == "__main__":
    main()
