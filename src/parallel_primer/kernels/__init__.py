"""Demonstration workloads: the Black-Scholes put kernel and Monte Carlo trials."""

from .blackscholes import (
    blackscholes,
    blackscholes_distributed,
    blackscholes_parallel,
    blackscholes_vec,
    checksum,
)
from .montecarlo import (
    combine_counts,
    estimate_pi,
    estimate_pi_parallel,
    random_walk,
    random_walks,
    random_walks_parallel,
    trials,
    walk_final_position,
    walk_steps,
)

__all__ = [
    # Black-Scholes
    "blackscholes",
    "blackscholes_vec",
    "blackscholes_parallel",
    "blackscholes_distributed",
    "checksum",
    # Monte Carlo
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
