"""
Fan-out building blocks.

Partitioning of index ranges and trial budgets, thread/process executors,
remote-worker handles, and a partitioned (distributed) 1-D array.
"""

from .darray import DistributedArray
from .executors import (
    RemoteHandle,
    WorkerPool,
    default_workers,
    fetch,
    make_executor,
    pmap,
    resolve_workers,
)
from .partition import partition_range, split_evenly

__all__ = [
    # Partitioning
    "partition_range",
    "split_evenly",
    # Executors
    "default_workers",
    "resolve_workers",
    "make_executor",
    "pmap",
    "WorkerPool",
    "RemoteHandle",
    "fetch",
    # Distributed array
    "DistributedArray",
]
