from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TaskState(str, Enum):
    """Scheduling status of a cooperative task.

    A task moves ``CREATED -> RUNNABLE -> RUNNING`` and then alternates between
    ``RUNNING`` and ``BLOCKED`` at every yield point (sleep, channel put/take)
    until it ends in ``DONE`` or ``FAILED``.
    """

    CREATED = "created"
    RUNNABLE = "runnable"
    RUNNING = "running"
    BLOCKED = "blocked"
    DONE = "done"
    FAILED = "failed"

    @property
    def finished(self) -> bool:
        return self in (TaskState.DONE, TaskState.FAILED)


class Backend(str, Enum):
    """Execution units a fan-out can be scheduled on.

    Attributes
    ----------
    THREAD : str
        Shared-memory worker threads in this process ("thread").
    PROCESS : str
        Independent worker processes; inputs and results are copied ("process").
    """

    THREAD = "thread"
    PROCESS = "process"


@dataclass(frozen=True, slots=True)
class Partition:
    """A contiguous, half-open index range ``[start, stop)`` owned by one worker.

    Parameters
    ----------
    index : int
        Identity of the owning worker (0-based).
    start : int
        First global index in the range.
    stop : int
        One past the last global index in the range.
    """

    index: int
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start

    @property
    def slice(self) -> slice:
        return slice(self.start, self.stop)

    def __contains__(self, i: object) -> bool:
        return isinstance(i, int) and self.start <= i < self.stop


@dataclass(frozen=True, slots=True)
class TimingResult:
    """Wall time of one measured call together with the value it returned."""

    label: str
    seconds: float
    value: Any = None

    def throughput(self, n_ops: int) -> float:
        """Operations per second; ``inf`` when the call took no measurable time."""
        if self.seconds <= 0.0:
            return float("inf")
        return n_ops / self.seconds


@dataclass(frozen=True, slots=True)
class SpeedupReport:
    """Serial vs. parallel timing of one kernel.

    Parameters
    ----------
    label : str
        Name of the kernel being timed.
    serial : TimingResult
        Timing of the sequential variant.
    parallel : TimingResult
        Timing of the parallel variant.
    n_ops : int
        Number of elementary operations (options priced, trials drawn, ...)
        performed by each variant; used for the throughput figures.
    n_workers : int
        Number of execution units the parallel variant used.

    Attributes
    ----------
    speedup : float
        ``serial.seconds / parallel.seconds``.
    """

    label: str
    serial: TimingResult
    parallel: TimingResult
    n_ops: int
    n_workers: int

    @property
    def speedup(self) -> float:
        if self.parallel.seconds <= 0.0:
            return float("inf")
        return self.serial.seconds / self.parallel.seconds

    @property
    def serial_throughput(self) -> float:
        return self.serial.throughput(self.n_ops)

    @property
    def parallel_throughput(self) -> float:
        return self.parallel.throughput(self.n_ops)

    def summary(self) -> str:
        return "\n".join(
            [
                f"{self.label}: {self.n_ops:,} ops",
                f"  serial   {self.serial.seconds:.4f}s  "
                f"({self.serial_throughput:,.0f} ops/s)",
                f"  parallel {self.parallel.seconds:.4f}s  "
                f"({self.parallel_throughput:,.0f} ops/s, {self.n_workers} workers)",
                f"  speedup  {self.speedup:.2f}x",
            ]
        )
