"""Random-walk and speedup charts.

Matplotlib is imported on first use so the numeric kernels work without it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import pandas as pd
    from matplotlib.axes import Axes

__all__ = [
    "plot_random_walk",
    "plot_random_walks",
    "plot_speedup",
]

_SPEEDUP_COLUMNS = ("workers", "speedup")


def _pyplot():
    try:
        import matplotlib.pyplot as plt
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "The walk and speedup charts need matplotlib: pip install matplotlib"
        ) from e
    return plt


def _fig_ax(ax: Axes | None, figsize: tuple[float, float]):
    if ax is not None:
        return ax.figure, ax
    return _pyplot().subplots(figsize=figsize, constrained_layout=True)


def _style_walk_axes(ax: Axes, title: str) -> None:
    # walks start at the origin; the zero line shows drift away from it
    ax.axhline(0.0, color="k", lw=0.6, alpha=0.5)
    ax.set_title(title)
    ax.set_xlabel("step")
    ax.set_ylabel("position")
    ax.grid(alpha=0.25)


def _speedup_columns(df: pd.DataFrame) -> tuple[np.ndarray, np.ndarray]:
    """Worker counts and speedups from a ``speedup_table`` frame, ordered by workers."""
    missing = [c for c in _SPEEDUP_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"speedup table is missing columns: {missing}")
    rows = df.sort_values("workers")
    return rows["workers"].to_numpy(dtype=float), rows["speedup"].to_numpy(dtype=float)


def plot_random_walk(trajectory, *, ax: Axes | None = None, label: str | None = None):
    """Line chart of position against step index for one walk."""
    path = np.asarray(trajectory)
    if path.ndim != 1:
        raise ValueError("trajectory must be 1-D; use plot_random_walks for several")

    fig, ax = _fig_ax(ax, (10, 4))
    ax.plot(np.arange(path.shape[0]), path, lw=0.9, label=label)
    _style_walk_axes(ax, "Random walk")
    if label is not None:
        ax.legend()
    return fig, ax


def plot_random_walks(trajectories, *, n_plot: int = 10, ax: Axes | None = None):
    """Overlay up to ``n_plot`` walks, one per row of ``trajectories``."""
    paths = np.atleast_2d(np.asarray(trajectories))
    shown = min(n_plot, paths.shape[0])

    fig, ax = _fig_ax(ax, (10, 4))
    steps = np.arange(paths.shape[1])
    for i in range(shown):
        ax.plot(steps, paths[i], lw=0.8)
    _style_walk_axes(ax, f"Random walks ({shown} of {paths.shape[0]})")
    return fig, ax


def plot_speedup(df: pd.DataFrame, *, ax: Axes | None = None):
    """Measured speedup vs. worker count (from ``speedup_table``), with the ideal line."""
    workers, speedup = _speedup_columns(df)

    fig, ax = _fig_ax(ax, (6, 4))
    ax.plot(workers, speedup, marker="o", label="measured")
    ax.plot(workers, workers, ls="--", color="0.5", label="ideal")
    ax.set_xticks(workers)
    ax.set_xlabel("workers")
    ax.set_ylabel("speedup (serial / parallel)")
    ax.set_title("Parallel speedup")
    ax.grid(alpha=0.25)
    ax.legend()
    return fig, ax
