"""Spin resolution and challenge selection."""

from spindare.wheel.sectors import (
    ColorSector,
    SectorInfo,
    SECTOR_ORDER,
    SECTOR_TABLE,
    normalize_angle,
    sector_of,
    sectors_of,
    sector_bounds,
    display_color,
    pointer_angle,
    angular_delta,
)
from spindare.wheel.models import (
    ChallengeEntry,
    FreeSpin,
    SteeredSpin,
    DragContinuation,
    SpinRequest,
    SpinOutcome,
)
from spindare.wheel.challenges import ChallengePool
from spindare.wheel.deck import DEFAULT_DECK, default_pool
from spindare.wheel.planner import RandomSource, RotationPlanner
from spindare.wheel.selector import ChallengeSelector
from spindare.wheel.machine import SpinStateMachine

__all__ = [
    # Geometry
    "ColorSector",
    "SectorInfo",
    "SECTOR_ORDER",
    "SECTOR_TABLE",
    "normalize_angle",
    "sector_of",
    "sectors_of",
    "sector_bounds",
    "display_color",
    "pointer_angle",
    "angular_delta",
    # Values
    "ChallengeEntry",
    "FreeSpin",
    "SteeredSpin",
    "DragContinuation",
    "SpinRequest",
    "SpinOutcome",
    # Pool
    "ChallengePool",
    "DEFAULT_DECK",
    "default_pool",
    # Engine
    "RandomSource",
    "RotationPlanner",
    "ChallengeSelector",
    "SpinStateMachine",
]
