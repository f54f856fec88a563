"""Spin state machine - sequences spin, drag, settle and reveal.

Flow:
1. IDLE: waiting for ``start_free_spin()`` or ``start_drag()``
2. SPINNING: dial follows the pointer (drag) or runs the spin timeline
3. REVEALING: outcome delivered, reveal held for ``reveal_hold_ms``
4. back to IDLE

The commit policy is fixed per instance:

- ``late``: the winning color is read from where the dial stops.
- ``early``: the color is drawn when the spin starts, the dial is steered
  onto it and the reveal sweep runs before the rotation ends. The committed
  color is authoritative; the resting sector is only checked against it.

Time only advances through ``update(delta_ms)``; the host may also report the
end of its own animation with ``on_settle()``, whichever comes first wins.
"""

from typing import Callable, List, Optional
import logging
import random
import time

from spindare.animation.easing import Easing
from spindare.animation.timeline import Timeline
from spindare.config.settings import Settings, get_settings
from spindare.core.errors import InvalidStateTransition
from spindare.core.events import Event, EventBus, EventType
from spindare.core.state import Phase, SpinState, StateMachine
from spindare.wheel.challenges import ChallengePool
from spindare.wheel.models import (
    DragContinuation,
    FreeSpin,
    SpinOutcome,
    SpinRequest,
    SteeredSpin,
)
from spindare.wheel.planner import RandomSource, RotationPlanner
from spindare.wheel.sectors import ColorSector, SECTOR_ORDER, normalize_angle, sector_of
from spindare.wheel.selector import ChallengeSelector

logger = logging.getLogger(__name__)

OutcomeListener = Callable[[SpinOutcome], None]

_SOURCE = "spin_machine"


class SpinStateMachine:
    """Orchestrates one game instance's spins.

    Owns the dial angle: the presentation layer reads ``rotation`` and
    ``sweep_progress`` every frame but never writes them.
    """

    def __init__(
        self,
        pool: ChallengePool,
        settings: Optional[Settings] = None,
        rng: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
        clock: Callable[[], float] = time.monotonic,
        planner: Optional[RotationPlanner] = None,
        selector: Optional[ChallengeSelector] = None,
    ):
        self._settings = settings or get_settings()
        self._pool = pool
        self._rng = rng if rng is not None else random.Random(self._settings.seed)

        wheel = self._settings.wheel
        self._planner = planner or RotationPlanner(
            self._rng,
            turn_range=(wheel.min_full_turns, wheel.max_full_turns),
            min_spin_delta=wheel.min_spin_delta,
            momentum_factor=wheel.momentum_factor,
        )
        self._selector = selector or ChallengeSelector(self._rng)
        self._event_bus = event_bus or EventBus()
        self._clock = clock

        self._states = StateMachine()
        self._states.add_listener(self._on_phase_changed)
        self._outcome_listeners: List[OutcomeListener] = []

        # Resting angle between spins
        self._angle: float = wheel.initial_angle

        # In-flight spin
        self._timeline: Optional[Timeline] = None
        self._sweep_started = False
        self._sweep_complete = False
        self._reveal_elapsed: float = 0.0

        # Drag gesture
        self._dragging = False
        self._drag_start: float = 0.0
        self._drag_delta: float = 0.0
        self._drag_elapsed: float = 0.0

        logger.info(f"Spin machine ready (commit policy: {self._settings.commit_policy})")

    # Queries
    @property
    def commit_policy(self) -> str:
        return self._settings.commit_policy

    @property
    def pool(self) -> ChallengePool:
        return self._pool

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def current_state(self) -> SpinState:
        """Get an immutable snapshot of the current spin state."""
        return self._states.state

    @property
    def is_idle(self) -> bool:
        return self._states.phase == Phase.IDLE

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    @property
    def rotation(self) -> float:
        """Current visual dial angle."""
        if self._dragging:
            return self._drag_start + self._drag_delta
        if self._timeline is not None:
            return self._timeline.get_value("rotation")
        return self._angle

    @property
    def sweep_progress(self) -> float:
        """Reveal sweep progress, 0.0 to 1.0 (always 0.0 under late commit)."""
        if self._timeline is not None:
            return self._timeline.get_value("sweep") or 0.0
        state = self._states.state
        if state.phase == Phase.REVEALING and state.committed_color is not None:
            return 1.0
        return 0.0

    def add_outcome_listener(self, callback: OutcomeListener) -> Callable[[], None]:
        """Register an outcome callback. Returns an unsubscribe function."""
        self._outcome_listeners.append(callback)

        def remove() -> None:
            if callback in self._outcome_listeners:
                self._outcome_listeners.remove(callback)

        return remove

    # Commands
    def start_free_spin(self) -> bool:
        """Start a button-triggered spin."""
        if not self._require_idle("start_free_spin"):
            return False

        start = self._angle
        committed: Optional[ColorSector] = None
        request: SpinRequest

        if self._settings.is_early_commit:
            committed = self._rng.choice(SECTOR_ORDER)
            request = SteeredSpin(committed)
            target = self._planner.plan_steered_spin(start, committed)
            easing = Easing.EASE_OUT_CUBIC
        else:
            request = FreeSpin()
            target = self._planner.plan_free_spin(start)
            easing = Easing.EASE_IN_OUT_SINE

        self._start_timeline(start, target, committed, easing)
        self._states.transition(
            Phase.SPINNING,
            request=request,
            target_angle=target,
            started_at=self._clock(),
            committed_color=committed,
        )
        if self._cancelled_during_start():
            return True

        self._emit(EventType.SPIN_STARTED, {
            "request": request,
            "target_angle": target,
            "committed_color": committed,
            "duration_ms": self._settings.timing.spin_duration_ms,
        })
        logger.info(f"Spin started: {start:.1f} -> {target:.1f}")
        return True

    def start_drag(self, pointer_delta: float) -> bool:
        """Grab the dial; it follows the pointer until ``end_drag()``."""
        if not self._require_idle("start_drag"):
            return False

        self._dragging = True
        self._drag_start = self._angle
        self._drag_delta = pointer_delta
        self._drag_elapsed = 0.0

        self._states.transition(
            Phase.SPINNING,
            request=DragContinuation(self._drag_start, pointer_delta),
            started_at=self._clock(),
        )
        if self._cancelled_during_start():
            return True

        self._emit(EventType.DRAG_STARTED, {"start_angle": self._drag_start})
        logger.debug(f"Drag started at {self._drag_start:.1f}")
        return True

    def continue_drag(self, pointer_delta: float) -> bool:
        """Move the held dial by another pointer delta."""
        if not self._dragging:
            return self._reject("continue_drag")

        self._drag_delta += pointer_delta
        self._states.update(request=DragContinuation(self._drag_start, self._drag_delta))
        return True

    def end_drag(self) -> bool:
        """Release the dial and let momentum carry it."""
        if not self._dragging:
            return self._reject("end_drag")

        self._dragging = False
        released_at = self._drag_start + self._drag_delta
        target = self._planner.plan_drag_continuation(
            self._drag_start, self._drag_delta, self._drag_elapsed
        )

        # Under early commit the color is fixed at release, from the planned rest
        committed = sector_of(target) if self._settings.is_early_commit else None

        self._states.update(target_angle=target, committed_color=committed)
        self._start_timeline(released_at, target, committed, Easing.EASE_OUT_QUART)

        self._emit(EventType.DRAG_RELEASED, {
            "request": self._states.state.request,
            "target_angle": target,
            "committed_color": committed,
            "elapsed_ms": self._drag_elapsed,
        })
        logger.info(f"Drag released: {released_at:.1f} -> {target:.1f}")
        return True

    def on_settle(self) -> bool:
        """Host reports that its spin animation has finished."""
        if self._states.phase != Phase.SPINNING or self._dragging or self._timeline is None:
            return self._reject("on_settle")

        self._timeline.finish()
        self._check_sweep()
        self._settle()
        return True

    def on_reveal_complete(self) -> bool:
        """Finish the reveal and return to IDLE."""
        if self._states.phase != Phase.REVEALING:
            return self._reject("on_reveal_complete")

        outcome = self._states.state.outcome
        self._states.transition(Phase.IDLE)
        self._emit(EventType.REVEAL_COMPLETE, {"outcome": outcome})
        return True

    def cancel(self) -> bool:
        """Abort any in-flight spin without delivering an outcome.

        Returns:
            True if a spin was cancelled, False if already idle
        """
        if self._states.phase == Phase.IDLE:
            return False

        self._angle = normalize_angle(self.rotation)
        if self._timeline is not None:
            self._timeline.stop()
        self._timeline = None
        self._dragging = False
        self._states.reset()

        self._emit(EventType.SPIN_CANCELLED, {"angle": self._angle})
        logger.info(f"Spin cancelled at {self._angle:.1f}")
        return True

    def update(self, delta_ms: float) -> None:
        """Advance timers by one frame.

        Args:
            delta_ms: Time since last update in milliseconds
        """
        phase = self._states.phase

        if phase == Phase.SPINNING:
            if self._dragging:
                self._drag_elapsed += delta_ms
                return
            if self._timeline is None:
                return
            self._timeline.update(delta_ms)
            self._check_sweep()
            if self._timeline.is_finished:
                self._settle()

        elif phase == Phase.REVEALING:
            self._reveal_elapsed += delta_ms
            if self._reveal_elapsed >= self._settings.timing.reveal_hold_ms:
                self.on_reveal_complete()

    # Internals
    def _start_timeline(
        self,
        start: float,
        target: float,
        committed: Optional[ColorSector],
        easing: Easing,
    ) -> None:
        timing = self._settings.timing
        self._timeline = Timeline.spin(
            start,
            target,
            timing.spin_duration_ms,
            easing=easing,
            sweep_delay=timing.sweep_delay_ms if committed is not None else None,
            sweep_duration=timing.sweep_duration_ms,
        ).play(from_start=True)
        self._sweep_started = False
        self._sweep_complete = False

    def _check_sweep(self) -> None:
        """Emit reveal sweep events once their time is reached."""
        color = self._states.state.committed_color
        if color is None or self._timeline is None:
            return

        timing = self._settings.timing
        now = self._timeline.current_time

        if not self._sweep_started and now >= timing.sweep_delay_ms:
            self._sweep_started = True
            self._emit(EventType.REVEAL_SWEEP_STARTED, {
                "color": color,
                "duration_ms": timing.sweep_duration_ms,
            })

        if not self._sweep_complete and now >= timing.sweep_delay_ms + timing.sweep_duration_ms:
            self._sweep_complete = True
            self._emit(EventType.REVEAL_SWEEP_COMPLETE, {"color": color})

    def _settle(self) -> None:
        """Resolve the outcome and enter REVEALING."""
        state = self._states.state
        target = state.target_angle
        resting = sector_of(target)

        if state.committed_color is None:
            color = resting
        else:
            color = state.committed_color
            if resting != color:
                logger.error(
                    f"Dial rests on {resting.value} but {color.value} was committed"
                )

        outcome = SpinOutcome(
            final_angle=normalize_angle(target),
            color=color,
            challenge=self._selector.pick(self._pool, color),
        )

        self._angle = outcome.final_angle
        self._timeline = None
        self._reveal_elapsed = 0.0

        self._emit(EventType.SPIN_SETTLED, {"final_angle": outcome.final_angle})
        self._states.transition(Phase.REVEALING, outcome=outcome)
        logger.info(
            f"Spin settled at {outcome.final_angle:.1f}: {color.value} "
            f"challenge #{outcome.challenge.id}"
        )
        self._deliver(outcome)

        # A listener may already have cancelled the reveal
        if self._states.phase == Phase.REVEALING and self._settings.timing.reveal_hold_ms <= 0:
            self.on_reveal_complete()

    def _deliver(self, outcome: SpinOutcome) -> None:
        self._emit(EventType.SPIN_OUTCOME, {"outcome": outcome})
        for listener in list(self._outcome_listeners):
            try:
                listener(outcome)
            except Exception as e:
                logger.error(f"Error in outcome listener: {e}")

    def _cancelled_during_start(self) -> bool:
        """A STATE_CHANGED handler may cancel the spin it was told about."""
        if self._states.phase == Phase.SPINNING:
            return False
        logger.info("Spin cancelled before it started")
        return True

    def _require_idle(self, command: str) -> bool:
        if self._states.phase == Phase.IDLE:
            return True
        return self._reject(command)

    def _reject(self, command: str) -> bool:
        phase = self._states.phase.name
        logger.warning(f"{command} rejected while {phase}")
        if self._settings.strict_commands:
            raise InvalidStateTransition(command, phase)
        return False

    def _on_phase_changed(self, old: Phase, new: Phase, state: SpinState) -> None:
        self._emit(EventType.STATE_CHANGED, {"from": old, "to": new})

    def _emit(self, event_type: EventType, data: dict) -> None:
        self._event_bus.emit(Event(event_type, data=data, source=_SOURCE))
