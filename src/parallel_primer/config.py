from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from parallel_primer.types import Backend


@dataclass(frozen=True, slots=True)
class ParallelConfig:
    """How a data-parallel kernel is fanned out.

    ``n_workers=None`` means one worker per available CPU. ``chunks`` is the
    number of index partitions; ``None`` uses one partition per worker.
    """

    n_workers: int | None = None
    backend: Backend = Backend.THREAD
    chunks: int | None = None

    def __post_init__(self) -> None:
        if self.n_workers is not None and self.n_workers < 1:
            raise ValueError("n_workers must be >= 1")
        if self.chunks is not None and self.chunks < 1:
            raise ValueError("chunks must be >= 1")
        # accept plain strings ("thread"/"process")
        object.__setattr__(self, "backend", Backend(self.backend))


@dataclass(frozen=True, slots=True)
class RandomConfig:
    seed: int | None = None

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def spawn(self, k: int) -> list[np.random.SeedSequence]:
        """Independent child seed sequences, one per execution context."""
        if k < 0:
            raise ValueError("k must be >= 0")
        return np.random.SeedSequence(self.seed).spawn(k)


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    warmup: bool = True
    repeats: int = 1

    def __post_init__(self) -> None:
        if self.repeats <= 0:
            raise ValueError("repeats must be > 0")
