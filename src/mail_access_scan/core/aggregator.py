"""Fan-in aggregation of access events into a count table."""

from __future__ import annotations

import logging

from .channel import EventChannel
from .models import AccessEvent, CountTable

LOGGER = logging.getLogger(__name__)


class Aggregator:
    """Single consumer that owns the per-address count table."""

    def __init__(self) -> None:
        self._counts: CountTable = {}
        self.received = 0

    @property
    def counts(self) -> CountTable:
        return self._counts

    def add(self, event: AccessEvent) -> None:
        self._counts[event.address] = self._counts.get(event.address, 0) + 1
        self.received += 1

    async def drain(self, channel: EventChannel) -> CountTable:
        """Receive until every sender is released and the buffer is empty."""
        async for event in channel:
            self.add(event)
        LOGGER.debug("done receiving (%d events, %d addresses)", self.received, len(self._counts))
        return self._counts
