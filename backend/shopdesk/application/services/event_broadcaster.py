"""In-process publish/subscribe for change events, streamed to clients over SSE."""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

logger = logging.getLogger(__name__)

_QUEUE_SIZE = 100


class EventBroadcaster:
    """Fans out events (e.g. ``settings_updated``) to every open stream.

    Each subscriber owns a bounded queue. A subscriber that stops draining
    its queue is disconnected rather than allowed to block publishers.
    """

    def __init__(self) -> None:
        self._queues: list[asyncio.Queue[str | None]] = []

    async def subscribe(self) -> AsyncGenerator[str, None]:
        """Yield SSE-formatted messages until the broadcaster shuts down."""
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=_QUEUE_SIZE)
        self._queues.append(queue)
        try:
            while True:
                message = await queue.get()
                if message is None:
                    break
                yield message
        finally:
            if queue in self._queues:
                self._queues.remove(queue)

    async def broadcast(self, event_type: str, data: dict[str, Any]) -> None:
        """Send an event to all subscribers."""
        message = f"event: {event_type}\ndata: {json.dumps(data)}\n\n"
        stalled: list[asyncio.Queue[str | None]] = []

        for queue in self._queues:
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                stalled.append(queue)

        for queue in stalled:
            logger.warning("Event subscriber not draining, disconnecting")
            self._queues.remove(queue)
            # Make room for the sentinel so the subscriber loop can exit
            queue.get_nowait()
            queue.put_nowait(None)

    async def shutdown(self) -> None:
        """Close every open stream."""
        for queue in self._queues:
            try:
                queue.put_nowait(None)
            except asyncio.QueueFull:
                queue.get_nowait()
                queue.put_nowait(None)
        self._queues.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)
