from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Generator, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from ..types import TaskState

__all__ = [
    "TaskHandle",
    "spawn_task",
    "current_task",
    "blocked_on",
    "task_sleep",
    "yield_now",
    "wait_all",
    "run_tasks",
]

_current: ContextVar[TaskHandle | None] = ContextVar(
    "parallel_primer_current_task", default=None
)


class TaskHandle:
    """
    A cooperative task and the handle used to observe and wait for it.

    The task body is a coroutine function run on the current asyncio event
    loop. It only gives up control at ``await`` points; the yield helpers in
    this module (:func:`task_sleep`, channel ``put``/``take``) record those
    points in :attr:`state`.

    Parameters
    ----------
    fn : Callable[..., Awaitable]
        Coroutine function forming the task body.
    *args, **kwargs
        Arguments passed to ``fn`` when the task starts.
    name : str | None
        Optional task name (defaults to ``fn.__name__``).

    Notes
    -----
    A freshly constructed handle is ``CREATED``; :meth:`schedule` hands it to
    the event loop (``RUNNABLE``) and returns immediately. The caller must
    ``await handle`` (or :meth:`wait`) to retrieve the result; an exception
    raised by the body is re-raised there unchanged.
    """

    def __init__(
        self,
        fn: Callable[..., Awaitable[Any]],
        /,
        *args: Any,
        name: str | None = None,
        **kwargs: Any,
    ) -> None:
        if not inspect.iscoroutinefunction(fn):
            raise TypeError(f"task body must be a coroutine function, got {fn!r}")
        self._fn = fn
        self._args = args
        self._kwargs = kwargs
        self.name = name or getattr(fn, "__name__", "task")
        self._state = TaskState.CREATED
        self.history: list[TaskState] = [TaskState.CREATED]
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> TaskState:
        return self._state

    def _set_state(self, state: TaskState) -> None:
        if state != self._state:
            self._state = state
            self.history.append(state)

    def schedule(self) -> TaskHandle:
        if self._task is not None:
            raise RuntimeError(f"task {self.name!r} is already scheduled")
        loop = asyncio.get_running_loop()
        self._set_state(TaskState.RUNNABLE)
        self._task = loop.create_task(self._run(), name=self.name)
        return self

    async def _run(self) -> Any:
        # the task runs in its own copy of the context
        _current.set(self)
        self._set_state(TaskState.RUNNING)
        try:
            result = await self._fn(*self._args, **self._kwargs)
        except BaseException:
            self._set_state(TaskState.FAILED)
            raise
        self._set_state(TaskState.DONE)
        return result

    def done(self) -> bool:
        return self._state.finished

    async def wait(self) -> Any:
        if self._task is None:
            raise RuntimeError(f"task {self.name!r} has not been scheduled")
        with blocked_on():
            return await self._task

    def result(self) -> Any:
        if self._task is None or not self._task.done():
            raise asyncio.InvalidStateError(f"task {self.name!r} is not done")
        return self._task.result()

    def __await__(self) -> Generator[Any, None, Any]:
        return self.wait().__await__()

    def __repr__(self) -> str:
        return f"TaskHandle({self.name!r}, state={self._state.value})"


def spawn_task(
    fn: Callable[..., Awaitable[Any]], /, *args: Any, **kwargs: Any
) -> TaskHandle:
    """Create and schedule a task on the running loop; returns without waiting for it."""
    return TaskHandle(fn, *args, **kwargs).schedule()


def current_task() -> TaskHandle | None:
    return _current.get()


@contextmanager
def blocked_on(state: TaskState = TaskState.BLOCKED) -> Iterator[None]:
    """Mark the current task as ``state`` while the enclosed await is suspended."""
    handle = _current.get()
    if handle is not None:
        handle._set_state(state)
    try:
        yield
    finally:
        if handle is not None:
            handle._set_state(TaskState.RUNNING)


async def task_sleep(seconds: float) -> None:
    with blocked_on():
        await asyncio.sleep(seconds)


async def yield_now() -> None:
    """Let other runnable tasks run; the caller stays runnable, not blocked."""
    with blocked_on(TaskState.RUNNABLE):
        await asyncio.sleep(0)


async def wait_all(*handles: TaskHandle) -> list[Any]:
    return [await h for h in handles]


def run_tasks(main: Callable[..., Awaitable[Any]], /, *args: Any) -> Any:
    """Run ``main`` on a fresh event loop and return its result."""
    return asyncio.run(main(*args))
