"""
Frame loop host for a spin machine.

Emits TICK events, advances the machine with wall-clock deltas and drains
the event queue, the same way for a console game or a windowed front end.
"""

import asyncio
import logging
import time
from typing import Callable, Optional

from spindare.core.events import Event, EventBus, EventType, tick_event
from spindare.wheel.machine import SpinStateMachine
from spindare.wheel.models import SpinOutcome

logger = logging.getLogger(__name__)


class SpinLoop:
    """
    Drives a SpinStateMachine from an asyncio loop.

    ``shutdown()`` cancels any in-flight spin and stops the loop as one unit.
    """

    def __init__(
        self,
        machine: SpinStateMachine,
        event_bus: Optional[EventBus] = None,
        fps: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.machine = machine
        self.event_bus = event_bus or machine.event_bus
        self.fps = fps
        self._clock = clock
        self._running = False
        self._frame_count = 0
        self._pending: Optional[asyncio.Future] = None

        self.event_bus.subscribe(EventType.SPIN_OUTCOME, self._on_outcome)
        self.event_bus.subscribe(EventType.SPIN_CANCELLED, self._on_cancelled)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def frame_count(self) -> int:
        return self._frame_count

    async def run(self) -> None:
        """Main frame loop. Runs until ``stop()`` or ``shutdown()``."""
        self._running = True
        logger.info(f"Spin loop started ({self.fps} fps)")

        frame_time = 1.0 / self.fps
        last = self._clock()

        while self._running:
            now = self._clock()
            delta = now - last
            last = now

            self.event_bus.emit(tick_event(delta, self._frame_count))
            self.machine.update(delta * 1000)

            await self.event_bus.process_queue()

            self._frame_count += 1
            await asyncio.sleep(frame_time)

        logger.info("Spin loop stopped")

    def stop(self) -> None:
        """Stop the loop after the current frame."""
        self._running = False

    def shutdown(self) -> None:
        """Cancel any in-flight spin and stop the loop."""
        self.machine.cancel()
        self._resolve(None)
        self.stop()

    async def spin(self) -> Optional[SpinOutcome]:
        """Start a free spin and wait for its outcome.

        Returns:
            The outcome, or None if the spin was rejected or cancelled.
            A call made while another caller is waiting is rejected and
            leaves that caller's spin untouched.
        """
        if self._pending is not None and not self._pending.done():
            logger.warning("spin() rejected: another spin is awaiting its outcome")
            return None

        loop = asyncio.get_running_loop()
        self._pending = loop.create_future()
        if not self.machine.start_free_spin():
            self._resolve(None)
        return await self._pending

    def _on_outcome(self, event: Event) -> None:
        self._resolve(event.data["outcome"])

    def _on_cancelled(self, event: Event) -> None:
        self._resolve(None)

    def _resolve(self, outcome: Optional[SpinOutcome]) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.set_result(outcome)
