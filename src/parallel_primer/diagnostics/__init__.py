"""Charts for the demos (matplotlib is imported on first use)."""

from .plots import plot_random_walk, plot_random_walks, plot_speedup

__all__ = [
    "plot_random_walk",
    "plot_random_walks",
    "plot_speedup",
]
