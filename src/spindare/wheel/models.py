"""Value types passed between the wheel components."""

from dataclasses import dataclass
from typing import Union

from spindare.wheel.sectors import ColorSector


@dataclass(frozen=True)
class ChallengeEntry:
    """One challenge card.

    Attributes:
        id: Unique, stable identifier
        color: Sector whose pool holds this card
        category: Human-readable category name
        text: The challenge itself (opaque to the engine)
    """

    id: int
    color: ColorSector
    category: str
    text: str


@dataclass(frozen=True)
class FreeSpin:
    """Fully random outcome."""


@dataclass(frozen=True)
class SteeredSpin:
    """Outcome color fixed before the animation finishes."""

    target_color: ColorSector


@dataclass(frozen=True)
class DragContinuation:
    """User-driven spin; outcome is wherever the dial stops."""

    current_angle: float
    delta_angle: float


SpinRequest = Union[FreeSpin, SteeredSpin, DragContinuation]


@dataclass(frozen=True)
class SpinOutcome:
    """Result of one completed spin.

    Attributes:
        final_angle: Resting angle normalized to [0, 360)
        color: Winning sector
        challenge: Card drawn from that sector's pool
    """

    final_angle: float
    color: ColorSector
    challenge: ChallengeEntry
