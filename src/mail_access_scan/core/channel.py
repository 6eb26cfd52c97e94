"""Bounded fan-in channel for access events.

Many file parsers send, a single aggregator receives. The queue is bounded, so
senders suspend when the aggregator falls behind.
"""

from __future__ import annotations

import asyncio

from .errors import ChannelClosed
from .models import AccessEvent

DEFAULT_CAPACITY = 4

_CLOSED = object()


class EventChannel:
    """Multi-producer / single-consumer channel over a bounded asyncio.Queue.

    The channel closes for the receiver once every sender has been released
    and the buffered events are drained.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._queue: asyncio.Queue[object] = asyncio.Queue(maxsize=capacity)
        self._senders = 0
        self._closed = False
        self._finished = False
        self._closed_event = asyncio.Event()

    @property
    def capacity(self) -> int:
        return self._queue.maxsize

    @property
    def senders(self) -> int:
        return self._senders

    @property
    def closed(self) -> bool:
        return self._closed

    def sender(self) -> Sender:
        """Register and return a new sending endpoint."""
        if self._closed or self._finished:
            raise ChannelClosed("channel is closed")
        self._senders += 1
        return Sender(self)

    async def _put_or_closed(self, item: object) -> bool:
        """Put item, unless the channel closes first. Returns False when closed."""
        if self._closed:
            return False
        if not self._queue.full():
            self._queue.put_nowait(item)
            return True

        put = asyncio.ensure_future(self._queue.put(item))
        closed = asyncio.ensure_future(self._closed_event.wait())
        try:
            await asyncio.wait({put, closed}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (put, closed):
                task.cancel()
            await asyncio.gather(put, closed, return_exceptions=True)

        if self._closed:
            # A put that won the race still lands in a closed channel.
            self._drain()
            return False
        return True

    async def _put(self, event: AccessEvent) -> None:
        if not await self._put_or_closed(event):
            raise ChannelClosed("channel is closed")

    async def _release(self) -> None:
        self._senders -= 1
        if self._senders == 0:
            await self._put_or_closed(_CLOSED)

    async def recv(self) -> AccessEvent | None:
        """Return the next event, or None once closed and drained."""
        if self._closed or self._finished:
            return None
        item = await self._queue.get()
        if item is _CLOSED:
            self._finished = True
            return None
        return item

    def _drain(self) -> None:
        while not self._queue.empty():
            self._queue.get_nowait()

    def close(self) -> None:
        """Stop receiving; buffered events are dropped and pending or later sends fail."""
        self._closed = True
        self._closed_event.set()
        self._drain()

    def __aiter__(self) -> EventChannel:
        return self

    async def __anext__(self) -> AccessEvent:
        event = await self.recv()
        if event is None:
            raise StopAsyncIteration
        return event


class Sender:
    """One producer's endpoint; release it when done sending."""

    __slots__ = ("_channel", "_released")

    def __init__(self, channel: EventChannel) -> None:
        self._channel = channel
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    async def send(self, event: AccessEvent) -> None:
        """Forward an event, suspending while the channel is full."""
        if self._released:
            raise ChannelClosed("sender already released")
        await self._channel._put(event)

    async def release(self) -> None:
        """Give up this endpoint. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        await self._channel._release()

    async def __aenter__(self) -> Sender:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.release()
