"""
Tests for the asyncio frame loop.
"""

import asyncio
import random

import pytest

from conftest import make_settings
from spindare.config.settings import TimingSettings
from spindare.core.events import EventType
from spindare.runner import SpinLoop
from spindare.wheel.machine import SpinStateMachine
from spindare.wheel.sectors import sector_of


def _loop(pool, settings, fps=200):
    machine = SpinStateMachine(pool, settings=settings, rng=random.Random(8))
    return SpinLoop(machine, fps=fps)


class TestSpinLoop:
    """Tests for SpinLoop."""

    @pytest.mark.asyncio
    async def test_spin_returns_outcome(self, pool):
        loop = _loop(pool, make_settings("early"))
        task = asyncio.create_task(loop.run())

        outcome = await asyncio.wait_for(loop.spin(), timeout=5.0)

        assert outcome is not None
        assert sector_of(outcome.final_angle) == outcome.color
        assert loop.machine.is_idle

        loop.shutdown()
        await asyncio.wait_for(task, timeout=1.0)
        assert not loop.is_running
        assert loop.frame_count > 0
        assert loop.event_bus.get_history(EventType.TICK)

    @pytest.mark.asyncio
    async def test_consecutive_spins(self, pool):
        loop = _loop(pool, make_settings("late"))
        task = asyncio.create_task(loop.run())

        first = await asyncio.wait_for(loop.spin(), timeout=5.0)
        second = await asyncio.wait_for(loop.spin(), timeout=5.0)
        assert first is not None and second is not None

        loop.stop()
        await asyncio.wait_for(task, timeout=1.0)

    @pytest.mark.asyncio
    async def test_overlapping_spin_keeps_first_outcome(self, pool):
        """A second spin() during a spin returns None; the first still gets its outcome."""
        loop = _loop(pool, make_settings("early"))
        task = asyncio.create_task(loop.run())

        first = asyncio.create_task(loop.spin())
        await asyncio.sleep(0)
        assert not loop.machine.is_idle

        second = await loop.spin()
        assert second is None

        outcome = await asyncio.wait_for(first, timeout=5.0)
        assert outcome is not None
        assert sector_of(outcome.final_angle) == outcome.color

        loop.stop()
        await asyncio.wait_for(task, timeout=1.0)

    @pytest.mark.asyncio
    async def test_shutdown_cancels_in_flight_spin(self, pool):
        settings = make_settings("early", timing=TimingSettings(spin_duration_ms=60000.0))
        loop = _loop(pool, settings)
        task = asyncio.create_task(loop.run())

        spin = asyncio.create_task(loop.spin())
        await asyncio.sleep(0.05)
        assert not loop.machine.is_idle

        loop.shutdown()
        assert await asyncio.wait_for(spin, timeout=1.0) is None
        await asyncio.wait_for(task, timeout=1.0)
        assert loop.machine.is_idle

    @pytest.mark.asyncio
    async def test_rejected_spin_returns_none(self, pool):
        loop = _loop(pool, make_settings("early"))
        loop.machine.start_drag(10.0)
        assert await loop.spin() is None
