"""
Tests for the event bus and the phase state machine.
"""

import pytest

from spindare.core.events import Event, EventBus, EventType, tick_event
from spindare.core.state import Phase, StateMachine


class TestEventBus:
    """Tests for EventBus."""

    def test_emit_and_unsubscribe(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe(EventType.SPIN_STARTED, received.append)

        bus.emit(Event(EventType.SPIN_STARTED))
        unsubscribe()
        bus.emit(Event(EventType.SPIN_STARTED))

        assert len(received) == 1

    def test_handler_error_is_isolated(self):
        bus = EventBus()
        received = []

        def broken(event):
            raise ValueError("bad handler")

        bus.subscribe(EventType.NOTIFY, broken)
        bus.subscribe(EventType.NOTIFY, received.append)
        bus.emit(Event(EventType.NOTIFY, data={"message": "hi"}))

        assert received[0].data["message"] == "hi"

    def test_subscribe_all(self):
        bus = EventBus()
        received = []
        bus.subscribe_all(received.append)
        bus.emit(Event(EventType.SPIN_STARTED))
        bus.emit(Event("custom"))
        assert [e.type for e in received] == [EventType.SPIN_STARTED, "custom"]

    def test_history_limit(self):
        bus = EventBus(history_limit=3)
        for frame in range(5):
            bus.emit(tick_event(0.016, frame))

        history = bus.get_history(limit=10)
        assert [e.data["frame"] for e in history] == [2, 3, 4]

        bus.clear_history()
        assert bus.get_history() == []

    def test_history_filter(self):
        bus = EventBus()
        bus.emit(Event(EventType.SPIN_STARTED))
        bus.emit(Event(EventType.SPIN_OUTCOME))
        assert len(bus.get_history(EventType.SPIN_OUTCOME)) == 1

    @pytest.mark.asyncio
    async def test_process_queue_runs_async_handlers(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event.data["frame"])

        bus.subscribe(EventType.TICK, handler)
        bus.queue_event(tick_event(0.016, 1))
        bus.queue_event(tick_event(0.016, 2))
        await bus.process_queue()

        assert received == [1, 2]

    def test_emit_skips_async_handlers(self):
        bus = EventBus()
        called = []

        async def handler(event):
            called.append(event)

        bus.subscribe(EventType.TICK, handler)
        bus.emit(tick_event(0.016, 0))
        assert called == []


class TestStateMachine:
    """Tests for phase transitions."""

    def test_valid_cycle(self):
        machine = StateMachine()
        seen = []
        machine.add_listener(lambda old, new, state: seen.append((old, new)))

        assert machine.transition(Phase.SPINNING, target_angle=720.0)
        assert machine.state.target_angle == 720.0
        assert machine.transition(Phase.REVEALING)
        assert machine.transition(Phase.IDLE)

        assert machine.state.is_idle
        assert machine.state.target_angle is None
        assert seen == [
            (Phase.IDLE, Phase.SPINNING),
            (Phase.SPINNING, Phase.REVEALING),
            (Phase.REVEALING, Phase.IDLE),
        ]

    def test_invalid_transitions(self):
        machine = StateMachine()
        assert not machine.transition(Phase.REVEALING)
        assert not machine.transition(Phase.IDLE)
        machine.transition(Phase.SPINNING)
        assert not machine.transition(Phase.SPINNING)

    def test_reset(self):
        machine = StateMachine()
        machine.transition(Phase.SPINNING, target_angle=100.0)
        machine.reset()
        assert machine.phase == Phase.IDLE
        assert machine.state.target_angle is None
