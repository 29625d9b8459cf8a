import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from parallel_primer.diagnostics import (  # noqa: E402
    plot_random_walk,
    plot_random_walks,
    plot_speedup,
)
from parallel_primer.kernels.montecarlo import random_walk, random_walks  # noqa: E402


def test_plot_random_walk_draws_full_trajectory():
    path = random_walk(100, seed=0)
    fig, ax = plot_random_walk(path, label="walk")
    line = ax.get_lines()[0]
    assert len(line.get_xdata()) == 101
    assert ax.get_xlabel() == "step"
    plt.close(fig)


def test_plot_random_walk_rejects_2d():
    with pytest.raises(ValueError):
        plot_random_walk(random_walks(2, 5, seed=0))


def test_plot_random_walks_limits_lines():
    fig, ax = plot_random_walks(random_walks(20, 50, seed=1), n_plot=5)
    # five walks plus the zero line
    assert len(ax.get_lines()) == 6
    assert list(ax.get_lines()[-1].get_ydata()) == [0.0, 0.0]
    assert ax.get_title() == "Random walks (5 of 20)"
    plt.close(fig)


def test_plot_speedup_requires_columns():
    df = pd.DataFrame({"workers": [1, 2], "speedup": [1.0, 1.8]})
    fig, ax = plot_speedup(df)
    assert len(ax.get_lines()) == 2
    plt.close(fig)

    with pytest.raises(ValueError, match="missing"):
        plot_speedup(pd.DataFrame({"workers": [1]}))


def test_plot_speedup_orders_rows_by_workers():
    df = pd.DataFrame({"workers": [4, 1, 2], "speedup": [3.1, 1.0, 1.9]})
    fig, ax = plot_speedup(df)
    measured = ax.get_lines()[0]
    assert list(measured.get_xdata()) == [1.0, 2.0, 4.0]
    assert list(measured.get_ydata()) == [1.0, 1.9, 3.1]
    plt.close(fig)
