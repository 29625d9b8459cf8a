from __future__ import annotations

import asyncio
import threading
from collections import deque
from collections.abc import Iterator
from typing import Any

from ..exceptions import ChannelClosedError
from .scheduler import blocked_on

__all__ = [
    "Channel",
    "BlockingChannel",
]


def _check_capacity(capacity: int) -> int:
    capacity = int(capacity)
    if capacity < 1:
        raise ValueError("capacity must be >= 1")
    return capacity


class Channel:
    """
    Bounded FIFO handoff between cooperative tasks.

    ``put`` suspends the calling task while the channel is full and ``take``
    suspends it while the channel is empty. The suspended task is reported as
    ``BLOCKED`` by its :class:`TaskHandle`.

    Parameters
    ----------
    capacity : int, default 1
        Maximum number of buffered items.

    Notes
    -----
    After :meth:`close`, ``put`` raises :class:`ChannelClosedError`; items
    already buffered can still be taken, after which ``take`` raises too.
    ``async for item in channel`` drains the channel and stops once it is
    closed and empty.
    """

    def __init__(self, capacity: int = 1) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._closed = False
        self._cond = asyncio.Condition()

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._items)

    def ready(self) -> bool:
        """True when a ``take`` would not block."""
        return bool(self._items)

    async def put(self, item: Any) -> None:
        async with self._cond:
            if len(self._items) >= self.capacity and not self._closed:
                with blocked_on():
                    await self._cond.wait_for(
                        lambda: self._closed or len(self._items) < self.capacity
                    )
            if self._closed:
                raise ChannelClosedError("put on a closed channel")
            self._items.append(item)
            self._cond.notify_all()

    async def take(self) -> Any:
        async with self._cond:
            if not self._items and not self._closed:
                with blocked_on():
                    await self._cond.wait_for(lambda: self._items or self._closed)
            if not self._items:
                raise ChannelClosedError("take on a closed and empty channel")
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    async def close(self) -> None:
        async with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __aiter__(self) -> Channel:
        return self

    async def __anext__(self) -> Any:
        try:
            return await self.take()
        except ChannelClosedError:
            raise StopAsyncIteration from None

    def __repr__(self) -> str:
        return (
            f"Channel(capacity={self.capacity}, items={len(self._items)}, "
            f"closed={self._closed})"
        )


class BlockingChannel:
    """Thread-safe counterpart of :class:`Channel` for producer/consumer threads."""

    def __init__(self, capacity: int = 1) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._closed = False
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def put(self, item: Any, timeout: float | None = None) -> None:
        with self._cond:
            ok = self._cond.wait_for(
                lambda: self._closed or len(self._items) < self.capacity, timeout
            )
            if self._closed:
                raise ChannelClosedError("put on a closed channel")
            if not ok:
                raise TimeoutError("channel stayed full")
            self._items.append(item)
            self._cond.notify_all()

    def take(self, timeout: float | None = None) -> Any:
        with self._cond:
            self._cond.wait_for(lambda: self._items or self._closed, timeout)
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            if self._closed:
                raise ChannelClosedError("take on a closed and empty channel")
            raise TimeoutError("channel stayed empty")

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.take()
            except ChannelClosedError:
                return

    def __repr__(self) -> str:
        return (
            f"BlockingChannel(capacity={self.capacity}, items={len(self)}, "
            f"closed={self._closed})"
        )
