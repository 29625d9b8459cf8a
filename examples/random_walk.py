"""Random walks: one trajectory is sequential, independent walkers are not.

    PYTHONPATH=src python examples/random_walk.py
"""

from __future__ import annotations


def main() -> None:
    import matplotlib.pyplot as plt

    from parallel_primer import random_walk, random_walks_parallel
    from parallel_primer.diagnostics import plot_random_walk, plot_random_walks
    from parallel_primer.kernels.montecarlo import walk_final_position

    print("final position after 1000 steps:", walk_final_position(1000, seed=0))

    path = random_walk(10_000, seed=0)
    plot_random_walk(path)

    paths = random_walks_parallel(32, 10_000, n_workers=4, seed=1)
    print("final positions:", paths[:, -1])
    plot_random_walks(paths, n_plot=16)
    plt.show()


if __name__ == "__main__":
    main()
