"""SPIN & DARE - spin the wheel, draw a challenge."""

from spindare.core.errors import ConfigurationError, InvalidStateTransition
from spindare.wheel import (
    ChallengeEntry,
    ChallengePool,
    ChallengeSelector,
    ColorSector,
    RotationPlanner,
    SpinOutcome,
    SpinStateMachine,
    default_pool,
    sector_of,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidStateTransition",
    "ChallengeEntry",
    "ChallengePool",
    "ChallengeSelector",
    "ColorSector",
    "RotationPlanner",
    "SpinOutcome",
    "SpinStateMachine",
    "default_pool",
    "sector_of",
]
