"""Core framework components for SPIN & DARE."""

from .state import Phase, SpinState, StateMachine
from .events import EventBus, Event, EventType
from .errors import SpinDareError, ConfigurationError, InvalidStateTransition

__all__ = [
    "Phase",
    "SpinState",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "SpinDareError",
    "ConfigurationError",
    "InvalidStateTransition",
]
