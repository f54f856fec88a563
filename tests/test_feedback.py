"""
Tests for haptic and notification routing.
"""

import asyncio
import random

import pytest

from conftest import ScriptedRandom
from spindare.core.events import EventType
from spindare.feedback import (
    REVEAL_PULSE_MS,
    SPIN_START_WAVEFORM,
    FeedbackRouter,
    challenge_message,
)
from spindare.runner import SpinLoop
from spindare.wheel.machine import SpinStateMachine
from spindare.wheel.sectors import ColorSector


class TestFeedbackRouter:
    """Tests for FeedbackRouter."""

    def test_message(self):
        assert challenge_message(ColorSector.RED) == "🎉 RED CHALLENGE! 🎉"

    @pytest.mark.asyncio
    async def test_spin_feedback(self, pool, event_bus, early_settings):
        pulses = []
        messages = []
        router = FeedbackRouter(event_bus, haptics=pulses.append, notify=messages.append)
        machine = SpinStateMachine(
            pool,
            settings=early_settings,
            rng=ScriptedRandom(color=ColorSector.BLUE),
            event_bus=event_bus,
        )

        machine.start_free_spin()
        assert pulses == []
        await event_bus.process_queue()
        assert pulses == [SPIN_START_WAVEFORM]

        machine.update(100.0)
        await event_bus.process_queue()
        assert pulses[-1] == (0, REVEAL_PULSE_MS)
        assert messages == ["🎉 BLUE CHALLENGE! 🎉"]
        assert event_bus.get_history(EventType.NOTIFY)[0].data["message"] == messages[0]
        assert len(event_bus.get_history(EventType.HAPTIC_PULSE)) == 2

        router.close()

    @pytest.mark.asyncio
    async def test_async_notifier(self, pool, event_bus, early_settings):
        messages = []

        async def notify(message):
            await asyncio.sleep(0)
            messages.append(message)

        FeedbackRouter(event_bus, notify=notify)
        machine = SpinStateMachine(
            pool,
            settings=early_settings,
            rng=ScriptedRandom(color=ColorSector.GREEN),
            event_bus=event_bus,
        )
        machine.start_free_spin()
        machine.update(100.0)
        await event_bus.process_queue()

        assert messages == ["🎉 GREEN CHALLENGE! 🎉"]

    @pytest.mark.asyncio
    async def test_drag_release_pulses(self, pool, event_bus, late_settings):
        pulses = []
        FeedbackRouter(event_bus, haptics=pulses.append)
        machine = SpinStateMachine(pool, settings=late_settings, rng=random.Random(1), event_bus=event_bus)

        machine.start_drag(30.0)
        await event_bus.process_queue()
        assert pulses == []

        machine.end_drag()
        await event_bus.process_queue()
        assert pulses == [SPIN_START_WAVEFORM]

    @pytest.mark.asyncio
    async def test_close_unsubscribes(self, pool, event_bus, late_settings):
        pulses = []
        router = FeedbackRouter(event_bus, haptics=pulses.append)
        router.close()

        machine = SpinStateMachine(pool, settings=late_settings, rng=random.Random(1), event_bus=event_bus)
        machine.start_free_spin()
        await event_bus.process_queue()
        assert pulses == []
        assert event_bus.get_history(EventType.HAPTIC_PULSE) == []

    @pytest.mark.asyncio
    async def test_loop_delivers_feedback(self, pool, event_bus, early_settings):
        """The frame loop drains queued requests without an explicit process_queue call."""
        messages = []
        FeedbackRouter(event_bus, notify=messages.append)
        machine = SpinStateMachine(pool, settings=early_settings, rng=random.Random(4), event_bus=event_bus)
        loop = SpinLoop(machine, fps=200)
        task = asyncio.create_task(loop.run())

        outcome = await asyncio.wait_for(loop.spin(), timeout=5.0)
        loop.stop()
        await asyncio.wait_for(task, timeout=1.0)

        assert messages == [challenge_message(outcome.color)]
