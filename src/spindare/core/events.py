"""
Event bus for SPIN & DARE.

The spin machine only emits events; presentation, haptics and notification
collaborators subscribe to them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Awaitable
from enum import Enum, auto
import asyncio
import inspect
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Frame clock
    TICK = auto()

    # Spin lifecycle
    SPIN_STARTED = auto()
    DRAG_STARTED = auto()
    DRAG_RELEASED = auto()
    REVEAL_SWEEP_STARTED = auto()
    REVEAL_SWEEP_COMPLETE = auto()
    SPIN_SETTLED = auto()
    SPIN_OUTCOME = auto()
    REVEAL_COMPLETE = auto()
    SPIN_CANCELLED = auto()
    STATE_CHANGED = auto()

    # Feedback requests
    HAPTIC_PULSE = auto()
    NOTIFY = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: Monotonic clock reading when the event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


SyncHandler = Callable[[Event], None]
AsyncHandler = Callable[[Event], Awaitable[None]]
Handler = SyncHandler | AsyncHandler


class EventBus:
    """
    Central event bus for component communication.

    Supports both synchronous and asynchronous handlers.
    Events can be emitted immediately or queued for batch processing.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function (sync or async)

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events. Returns an unsubscribe function."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """
        Emit an event immediately (synchronous handlers only).

        For async handlers, use queue_event and let the host loop
        drain it with process_queue.
        """
        self._add_to_history(event)
        self._dispatch_sync(event)

    def queue_event(self, event: Event) -> None:
        """Queue an event for later processing."""
        self._queue.put_nowait(event)

    async def process_queue(self) -> None:
        """Process all queued events."""
        while not self._queue.empty():
            event = await self._queue.get()
            self._add_to_history(event)
            await self._dispatch_async(event)
            self._queue.task_done()

    def _handlers_for(self, event: Event) -> list[Handler]:
        return list(self._handlers.get(event.type, [])) + list(self._global_handlers)

    def _dispatch_sync(self, event: Event) -> None:
        """Dispatch event to synchronous handlers only."""
        for handler in self._handlers_for(event):
            if inspect.iscoroutinefunction(handler):
                continue  # Skip async handlers
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler: {e}")

    async def _dispatch_async(self, event: Event) -> None:
        """Dispatch event to all handlers (sync and async)."""
        tasks = []
        for handler in self._handlers_for(event):
            if inspect.iscoroutinefunction(handler):
                tasks.append(asyncio.create_task(handler(event)))
            else:
                try:
                    handler(event)
                except Exception as e:
                    logger.error(f"Error in sync handler: {e}")

        if tasks:
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error(f"Error in async handler: {result}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | str | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


def tick_event(delta: float, frame: int) -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, data={"delta": delta, "frame": frame}, source="loop")
