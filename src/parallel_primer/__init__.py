"""
parallel_primer

Small, stateless kernels for learning parallelism primitives.

This package exposes the main user-facing functions at the top level, so you
can write, for example:

    from parallel_primer import blackscholes, blackscholes_parallel, estimate_pi
"""

# Re-export the demo kernels and building blocks (nice public names)
from .benchmark import compare, speedup_table, time_call
from .config import BenchmarkConfig, ParallelConfig, RandomConfig
from .exceptions import ChannelClosedError
from .kernels.blackscholes import (
    blackscholes,
    blackscholes_distributed,
    blackscholes_parallel,
    blackscholes_vec,
    checksum,
)
from .kernels.montecarlo import (
    estimate_pi,
    estimate_pi_parallel,
    random_walk,
    random_walks,
    random_walks_parallel,
    trials,
)
from .models.bs import norm_cdf
from .parallel import DistributedArray, RemoteHandle, WorkerPool, pmap
from .tasks import BlockingChannel, Channel, TaskHandle, spawn_task
from .types import Backend, Partition, SpeedupReport, TaskState, TimingResult

__all__ = [
    # Types
    "Backend",
    "Partition",
    "TaskState",
    "TimingResult",
    "SpeedupReport",
    # Config
    "ParallelConfig",
    "RandomConfig",
    "BenchmarkConfig",
    # Errors
    "ChannelClosedError",
    # Kernels
    "norm_cdf",
    "blackscholes",
    "blackscholes_vec",
    "blackscholes_parallel",
    "blackscholes_distributed",
    "checksum",
    "trials",
    "estimate_pi",
    "estimate_pi_parallel",
    "random_walk",
    "random_walks",
    "random_walks_parallel",
    # Parallel building blocks
    "pmap",
    "WorkerPool",
    "RemoteHandle",
    "DistributedArray",
    "TaskHandle",
    "spawn_task",
    "Channel",
    "BlockingChannel",
    # Timing
    "time_call",
    "compare",
    "speedup_table",
]
