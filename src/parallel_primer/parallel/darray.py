from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from ..types import Partition
from .executors import WorkerPool, resolve_workers
from .partition import partition_range


class DistributedArray:
    """
    A 1-D array whose index range is split across workers.

    Each worker identity owns one contiguous :class:`Partition` of the global
    index space and holds its own copy of that chunk. Nothing is assembled
    into a single contiguous array until :meth:`gather` is called.

    Parameters
    ----------
    partitions : Sequence[Partition]
        Partition map, ordered by worker identity, covering ``[0, n)``.
    chunks : Sequence[np.ndarray]
        One chunk per partition, each of the partition's length.
    """

    def __init__(
        self, partitions: Sequence[Partition], chunks: Sequence[np.ndarray]
    ) -> None:
        if len(partitions) != len(chunks):
            raise ValueError("need exactly one chunk per partition")
        expected_start = 0
        pairs = zip(partitions, chunks, strict=True)
        for position, (part, chunk) in enumerate(pairs):
            if part.index != position:
                raise ValueError(
                    f"partition {position} is labelled for worker {part.index}; "
                    "partitions must be listed in worker order"
                )
            if part.start != expected_start:
                raise ValueError("partitions must be contiguous and ordered")
            if len(chunk) != len(part):
                raise ValueError(
                    f"chunk for worker {part.index} has length {len(chunk)}, "
                    f"expected {len(part)}"
                )
            expected_start = part.stop
        self._partitions = tuple(partitions)
        self._chunks = [np.asarray(c) for c in chunks]
        self._n = expected_start

    # -------------------------
    # Constructors
    # -------------------------
    @classmethod
    def from_array(
        cls, values: Sequence[float] | np.ndarray, n_workers: int | None = None
    ) -> DistributedArray:
        arr = np.asarray(values)
        if arr.ndim != 1:
            raise ValueError("DistributedArray is 1-D")
        parts = partition_range(arr.shape[0], resolve_workers(n_workers))
        return cls(parts, [arr[p.slice].copy() for p in parts])

    @classmethod
    def full(
        cls, n: int, fill_value: float, n_workers: int | None = None, dtype=np.float64
    ) -> DistributedArray:
        parts = partition_range(n, resolve_workers(n_workers))
        return cls(parts, [np.full(len(p), fill_value, dtype=dtype) for p in parts])

    @classmethod
    def zeros(
        cls, n: int, n_workers: int | None = None, dtype=np.float64
    ) -> DistributedArray:
        return cls.full(n, 0, n_workers=n_workers, dtype=dtype)

    # -------------------------
    # Partition map
    # -------------------------
    @property
    def partitions(self) -> tuple[Partition, ...]:
        return self._partitions

    @property
    def n_workers(self) -> int:
        return len(self._partitions)

    @property
    def shape(self) -> tuple[int]:
        return (self._n,)

    def __len__(self) -> int:
        return self._n

    def owner(self, i: int) -> int:
        """Worker identity owning global index ``i`` (negative indices wrap)."""
        i = self._normalize(i)
        for part in self._partitions:
            if i in part:
                return part.index
        raise IndexError(i)  # unreachable for a normalized index

    def local_indices(self, worker: int) -> range:
        part = self._partitions[worker]
        return range(part.start, part.stop)

    def localpart(self, worker: int) -> np.ndarray:
        return self._chunks[worker]

    def __getitem__(self, i: int):
        worker = self.owner(i)
        return self._chunks[worker][self._normalize(i) - self._partitions[worker].start]

    def _normalize(self, i: int) -> int:
        i = int(i)
        if i < 0:
            i += self._n
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} out of range for length {self._n}")
        return i

    # -------------------------
    # Chunk-wise work
    # -------------------------
    def map_local(
        self,
        fn: Callable[[np.ndarray], np.ndarray],
        pool: WorkerPool | None = None,
    ) -> DistributedArray:
        """
        Apply ``fn`` to each owned chunk and return a new array with the same map.

        With a ``pool`` one unit of work per chunk is dispatched to it and the
        results are gathered once all units have completed; otherwise chunks are
        processed in order in the calling thread.
        """
        if pool is None:
            out = [np.asarray(fn(c)) for c in self._chunks]
        else:
            handles = [pool.spawn(fn, c) for c in self._chunks]
            out = [np.asarray(h.fetch()) for h in handles]
        return DistributedArray(self._partitions, out)

    def gather(self) -> np.ndarray:
        """Collect the owned chunks, in index order, into one contiguous array."""
        if not self._chunks:
            return np.empty(0)
        return np.concatenate(self._chunks)

    def __repr__(self) -> str:
        sizes = [len(p) for p in self._partitions]
        return f"DistributedArray(n={self._n}, chunks={sizes})"
