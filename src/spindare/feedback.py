"""Haptic and notification feedback for spin events.

The spin machine only emits events. ``FeedbackRouter`` turns them into
HAPTIC_PULSE / NOTIFY requests queued on the bus; the host loop delivers them
with ``process_queue()`` to whatever haptics and notification collaborators
the host provides. Collaborators may be plain functions or coroutines.
"""

from typing import Awaitable, Callable, Optional, Sequence, Union
import inspect
import logging

from spindare.core.events import Event, EventBus, EventType, Handler
from spindare.wheel.models import SpinOutcome
from spindare.wheel.sectors import ColorSector

logger = logging.getLogger(__name__)

# Vibration waveform when a spin starts (off/on milliseconds)
SPIN_START_WAVEFORM: tuple[int, ...] = (0, 100, 50, 100, 50, 100)

# Single pulse on reveal
REVEAL_PULSE_MS = 200

HapticsFn = Callable[[Sequence[int]], Union[None, Awaitable[None]]]
NotifyFn = Callable[[str], Union[None, Awaitable[None]]]

_SOURCE = "feedback"


def challenge_message(color: ColorSector) -> str:
    """Transient message shown when a challenge is revealed."""
    return f"🎉 {color.value} CHALLENGE! 🎉"


def _deliver_to(callback: Callable, key: str) -> Handler:
    """Wrap a collaborator as a bus handler fed with ``event.data[key]``."""
    if inspect.iscoroutinefunction(callback):
        async def handler(event: Event) -> None:
            await callback(event.data[key])
    else:
        def handler(event: Event) -> None:
            callback(event.data[key])
    return handler


class FeedbackRouter:
    """Routes spin events to haptics and notification callbacks.

    Requests are queued, so nothing reaches a collaborator until the host
    drains the bus. Either callback may be None, in which case the request
    is still recorded on the bus for other subscribers.
    """

    def __init__(
        self,
        event_bus: EventBus,
        haptics: Optional[HapticsFn] = None,
        notify: Optional[NotifyFn] = None,
    ):
        self._event_bus = event_bus
        self._unsubscribers = [
            event_bus.subscribe(EventType.SPIN_STARTED, self._on_spin_started),
            event_bus.subscribe(EventType.DRAG_RELEASED, self._on_spin_started),
            event_bus.subscribe(EventType.SPIN_OUTCOME, self._on_outcome),
        ]
        if haptics is not None:
            self._unsubscribers.append(
                event_bus.subscribe(EventType.HAPTIC_PULSE, _deliver_to(haptics, "pattern"))
            )
        if notify is not None:
            self._unsubscribers.append(
                event_bus.subscribe(EventType.NOTIFY, _deliver_to(notify, "message"))
            )

    def close(self) -> None:
        """Stop listening to the event bus."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _on_spin_started(self, event: Event) -> None:
        self._pulse(SPIN_START_WAVEFORM)

    def _on_outcome(self, event: Event) -> None:
        outcome: SpinOutcome = event.data["outcome"]
        self._pulse((0, REVEAL_PULSE_MS))

        message = challenge_message(outcome.color)
        logger.debug(f"Queued notification: {message}")
        self._event_bus.queue_event(Event(EventType.NOTIFY, data={"message": message}, source=_SOURCE))

    def _pulse(self, pattern: Sequence[int]) -> None:
        self._event_bus.queue_event(
            Event(EventType.HAPTIC_PULSE, data={"pattern": tuple(pattern)}, source=_SOURCE)
        )
