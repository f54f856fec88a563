"""
Pytest fixtures for SPIN & DARE tests.
"""

from typing import Any, Optional, Sequence

import pytest

from spindare.config.settings import Settings, TimingSettings
from spindare.core.events import EventBus
from spindare.wheel.challenges import ChallengePool
from spindare.wheel.deck import default_pool
from spindare.wheel.sectors import ColorSector


class ScriptedRandom:
    """Random source with fixed answers.

    ``randint`` returns ``turns``, ``uniform`` returns ``offset`` and
    ``choice`` returns ``color`` when the sequence holds it, otherwise the
    first element.
    """

    def __init__(self, turns: int = 3, offset: float = 45.0, color: Optional[ColorSector] = None):
        self.turns = turns
        self.offset = offset
        self.color = color
        self.choices = 0

    def randint(self, a: int, b: int) -> int:
        return self.turns

    def uniform(self, a: float, b: float) -> float:
        return self.offset

    def choice(self, seq: Sequence[Any]) -> Any:
        self.choices += 1
        if self.color is not None and self.color in seq:
            return self.color
        return seq[0]


def make_settings(commit_policy: str = "early", **overrides: Any) -> Settings:
    """Build settings with short timings, ignoring the environment file."""
    reveal_hold_ms = overrides.pop("reveal_hold_ms", 0.0)
    timing = overrides.pop("timing", None) or TimingSettings(
        spin_duration_ms=100.0,
        sweep_delay_ms=60.0,
        sweep_duration_ms=30.0,
        reveal_hold_ms=reveal_hold_ms,
    )
    return Settings(_env_file=None, commit_policy=commit_policy, timing=timing, **overrides)


@pytest.fixture
def pool() -> ChallengePool:
    """The default 80-card deck."""
    return default_pool()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus(history_limit=500)


@pytest.fixture
def early_settings() -> Settings:
    return make_settings("early")


@pytest.fixture
def late_settings() -> Settings:
    return make_settings("late")
