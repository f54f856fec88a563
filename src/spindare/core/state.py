"""
Phase state machine for a single spin.

States:
    IDLE: Waiting for a spin or drag to start
    SPINNING: Dial is moving (or following the pointer during a drag)
    REVEALING: Outcome has been delivered, reveal is being shown
"""

from enum import Enum, auto
from dataclasses import dataclass, replace
from typing import Callable, Any
import logging

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Spin phases."""
    IDLE = auto()
    SPINNING = auto()
    REVEALING = auto()


@dataclass(frozen=True)
class SpinState:
    """Immutable snapshot of the current spin.

    Attributes:
        phase: Current phase
        request: How the in-flight spin was initiated (SPINNING/REVEALING)
        target_angle: Planned resting angle, None while a drag is still held
        started_at: Clock reading when the spin started
        committed_color: Color fixed at spin start (early commit only)
        outcome: Delivered outcome (REVEALING only)
    """
    phase: Phase = Phase.IDLE
    request: Any = None
    target_angle: float | None = None
    started_at: float | None = None
    committed_color: Any = None
    outcome: Any = None

    @property
    def is_idle(self) -> bool:
        return self.phase == Phase.IDLE


StateListener = Callable[[Phase, Phase, SpinState], None]


class StateMachine:
    """
    Guards phase transitions and notifies listeners of changes.

    Only one spin may be in flight: every spin must start from IDLE and
    return to IDLE before the next one is accepted.
    """

    VALID_TRANSITIONS: list[tuple[Phase, Phase]] = [
        (Phase.IDLE, Phase.SPINNING),

        (Phase.SPINNING, Phase.REVEALING),
        (Phase.SPINNING, Phase.IDLE),  # Cancel

        (Phase.REVEALING, Phase.IDLE),
    ]

    def __init__(self) -> None:
        self._state = SpinState()
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)

    @property
    def state(self) -> SpinState:
        """Get current state snapshot."""
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    def can_transition(self, to_phase: Phase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._state.phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: Phase, **updates: Any) -> bool:
        """
        Attempt to move to a new phase.

        Args:
            to_phase: Target phase
            **updates: SpinState fields to set on the new snapshot

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._state.phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._state.phase
        if to_phase == Phase.IDLE:
            self._state = SpinState()
        else:
            self._state = replace(self._state, phase=to_phase, **updates)

        logger.debug(f"Phase transition: {old_phase.name} -> {to_phase.name}")
        self._notify(old_phase)
        return True

    def update(self, **updates: Any) -> None:
        """Update fields of the current snapshot without changing phase."""
        self._state = replace(self._state, **updates)

    def add_listener(self, callback: StateListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def reset(self) -> None:
        """Force the machine back to IDLE."""
        old_phase = self._state.phase
        self._state = SpinState()
        if old_phase != Phase.IDLE:
            self._notify(old_phase)
        logger.debug("StateMachine reset to IDLE")

    def _notify(self, old_phase: Phase) -> None:
        for listener in list(self._listeners):
            try:
                listener(old_phase, self._state.phase, self._state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")
