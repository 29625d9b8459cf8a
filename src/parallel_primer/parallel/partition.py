# src/parallel_primer/parallel/partition.py
from __future__ import annotations

from ..types import Partition

__all__ = [
    "partition_range",
    "split_evenly",
]


def split_evenly(total: int, n_parts: int) -> list[int]:
    """Sizes of ``n_parts`` chunks summing to ``total``; earlier chunks get the remainder."""
    if total < 0:
        raise ValueError("total must be >= 0")
    if n_parts < 1:
        raise ValueError("n_parts must be >= 1")
    base, rem = divmod(int(total), int(n_parts))
    return [base + 1 if i < rem else base for i in range(n_parts)]


def partition_range(n: int, n_parts: int) -> list[Partition]:
    """
    Split the index range ``[0, n)`` into ``n_parts`` contiguous, disjoint partitions.

    Partition sizes differ by at most one. When ``n < n_parts`` the trailing
    partitions are empty, so every worker identity still owns a (possibly
    empty) range.
    """
    parts: list[Partition] = []
    start = 0
    for i, size in enumerate(split_evenly(n, n_parts)):
        parts.append(Partition(index=i, start=start, stop=start + size))
        start += size
    return parts
