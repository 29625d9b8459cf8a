from __future__ import annotations

import asyncio
import os
import warnings
from collections.abc import Callable, Generator, Iterable
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Any

from ..types import Backend

__all__ = [
    "default_workers",
    "resolve_workers",
    "make_executor",
    "pmap",
    "RemoteHandle",
    "WorkerPool",
    "fetch",
]


def default_workers() -> int:
    return max(1, os.cpu_count() or 1)


def resolve_workers(n_workers: int | None) -> int:
    """Turn a requested worker count into a concrete one.

    ``None`` means one worker per CPU. Asking for more workers than CPUs is
    allowed but warned about, since the extra workers only time-slice.
    """
    if n_workers is None:
        return default_workers()
    n = int(n_workers)
    if n < 1:
        raise ValueError("n_workers must be >= 1")
    n_cpu = default_workers()
    if n > n_cpu:
        warnings.warn(
            f"n_workers={n} exceeds the {n_cpu} available CPUs; "
            "timings will reflect oversubscription",
            RuntimeWarning,
            stacklevel=2,
        )
    return n


def make_executor(backend: Backend | str, n_workers: int) -> Executor:
    try:
        backend = Backend(backend)
    except ValueError as e:
        raise ValueError(
            f"Unsupported backend: {backend!r} (expected 'thread' or 'process')"
        ) from e
    if backend == Backend.THREAD:
        return ThreadPoolExecutor(max_workers=n_workers)
    return ProcessPoolExecutor(max_workers=n_workers)


def pmap(
    fn: Callable[..., Any],
    items: Iterable[Any],
    *,
    n_workers: int | None = None,
    backend: Backend | str = Backend.PROCESS,
) -> list[Any]:
    """
    Apply ``fn`` to every item on a pool of workers and gather the results in order.

    This is a blocking gather: it returns only once every unit has completed.
    The first exception raised by a unit propagates to the caller.
    """
    items = list(items)
    if not items:
        return []
    n = resolve_workers(n_workers)
    with make_executor(backend, min(n, len(items))) as ex:
        return list(ex.map(fn, items))


class RemoteHandle:
    """Reference to a value being computed by a worker.

    Returned immediately by :meth:`WorkerPool.spawn`. The value is retrieved
    with a blocking :meth:`fetch`, or by awaiting the handle from a coroutine.
    """

    __slots__ = ("_future",)

    def __init__(self, future: Future) -> None:
        self._future = future

    def done(self) -> bool:
        return self._future.done()

    def fetch(self, timeout: float | None = None) -> Any:
        # re-raises whatever the worker raised
        return self._future.result(timeout=timeout)

    def __await__(self) -> Generator[Any, None, Any]:
        return asyncio.wrap_future(self._future).__await__()

    def __repr__(self) -> str:
        status = "done" if self.done() else "pending"
        return f"RemoteHandle({status})"


def fetch(handle: RemoteHandle, timeout: float | None = None) -> Any:
    return handle.fetch(timeout=timeout)


class WorkerPool:
    """
    A fixed set of independent workers that units of work are sent to.

    Parameters
    ----------
    n_workers : int | None
        Number of workers; ``None`` uses one per CPU.
    backend : Backend | str, default "process"
        ``"process"`` gives workers without shared memory: every call ships a
        copy of its arguments and returns its result by value. ``"thread"``
        runs the same calls on threads of this process.

    Notes
    -----
    Use as a context manager so the workers are shut down when the block exits.
    Functions sent to a process pool must be importable (module-level).

    Examples
    --------
    >>> with WorkerPool(4) as pool:
    ...     h = pool.spawn(sum, [1, 2, 3])
    ...     h.fetch()
    6
    """

    def __init__(
        self, n_workers: int | None = None, backend: Backend | str = Backend.PROCESS
    ) -> None:
        self.n_workers = resolve_workers(n_workers)
        self.backend = Backend(backend)
        self._executor = make_executor(self.backend, self.n_workers)

    def spawn(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> RemoteHandle:
        return RemoteHandle(self._executor.submit(fn, *args, **kwargs))

    def map(self, fn: Callable[..., Any], items: Iterable[Any]) -> list[Any]:
        handles = [self.spawn(fn, item) for item in items]
        return [h.fetch() for h in handles]

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown(wait=True)

    def __repr__(self) -> str:
        return f"WorkerPool(n_workers={self.n_workers}, backend={self.backend.value!r})"
