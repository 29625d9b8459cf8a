"""
Cooperative tasks and channels.

Tasks run on one asyncio event loop and give up control only at await points.
Scheduling a task returns a :class:`TaskHandle` immediately; waiting on the
handle retrieves the result.
"""

from .channels import BlockingChannel, Channel
from .scheduler import (
    TaskHandle,
    blocked_on,
    current_task,
    run_tasks,
    spawn_task,
    task_sleep,
    wait_all,
    yield_now,
)

__all__ = [
    "TaskHandle",
    "spawn_task",
    "current_task",
    "blocked_on",
    "task_sleep",
    "yield_now",
    "wait_all",
    "run_tasks",
    "Channel",
    "BlockingChannel",
]
