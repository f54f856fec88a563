"""Dial geometry: the canonical sector table and angle-to-sector mapping.

Angles are degrees measured clockwise from the pointer's rest position.
Each sector owns the half-open range [start, end); a value exactly on a
boundary belongs to the sector that starts there.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple
import math

import numpy as np


FULL_TURN = 360.0
SECTOR_SPAN = 90.0


class ColorSector(Enum):
    """The four dial colors, in dial order."""

    RED = "RED"
    BLUE = "BLUE"
    GREEN = "GREEN"
    YELLOW = "YELLOW"


@dataclass(frozen=True)
class SectorInfo:
    """Angular range and display color of one sector."""

    sector: ColorSector
    start: float
    end: float
    rgb: Tuple[int, int, int]

    @property
    def label(self) -> str:
        return self.sector.value


# Dial order is fixed: index i covers [i * 90, (i + 1) * 90)
SECTOR_ORDER: Tuple[ColorSector, ...] = (
    ColorSector.RED,
    ColorSector.BLUE,
    ColorSector.GREEN,
    ColorSector.YELLOW,
)

_DISPLAY_COLORS: Dict[ColorSector, Tuple[int, int, int]] = {
    ColorSector.RED: (255, 107, 107),     # #FF6B6B
    ColorSector.BLUE: (78, 205, 196),     # #4ECDC4
    ColorSector.GREEN: (76, 175, 80),     # #4CAF50
    ColorSector.YELLOW: (255, 230, 109),  # #FFE66D
}

SECTOR_TABLE: Dict[ColorSector, SectorInfo] = {
    sector: SectorInfo(
        sector=sector,
        start=i * SECTOR_SPAN,
        end=(i + 1) * SECTOR_SPAN,
        rgb=_DISPLAY_COLORS[sector],
    )
    for i, sector in enumerate(SECTOR_ORDER)
}


def normalize_angle(degrees: float) -> float:
    """Fold any angle into [0, 360).

    NaN and infinities have no position on the dial and fold to 0.0.
    """
    if not math.isfinite(degrees):
        return 0.0
    n = ((degrees % FULL_TURN) + FULL_TURN) % FULL_TURN
    # Tiny negative inputs round up to exactly 360.0
    if n >= FULL_TURN:
        return 0.0
    return n


def sector_of(degrees: float) -> ColorSector:
    """Get the sector under the pointer for a dial rotation."""
    index = int(normalize_angle(degrees) // SECTOR_SPAN)
    return SECTOR_ORDER[min(index, len(SECTOR_ORDER) - 1)]


def sectors_of(degrees: np.ndarray) -> np.ndarray:
    """Vectorized sector lookup.

    Args:
        degrees: Array of angles in degrees

    Returns:
        Integer array of indices into SECTOR_ORDER, same shape as the input;
        non-finite angles map to index 0 like normalize_angle
    """
    a = np.asarray(degrees, dtype=np.float64)
    n = np.mod(np.where(np.isfinite(a), a, 0.0), FULL_TURN)
    n = np.where(n >= FULL_TURN, 0.0, n)
    index = np.floor_divide(n, SECTOR_SPAN).astype(np.intp)
    return np.clip(index, 0, len(SECTOR_ORDER) - 1)


def sector_bounds(sector: ColorSector) -> Tuple[float, float]:
    """Get the [low, high) range of a sector."""
    info = SECTOR_TABLE[sector]
    return info.start, info.end


def display_color(sector: ColorSector) -> Tuple[int, int, int]:
    """Get the RGB display color of a sector."""
    return SECTOR_TABLE[sector].rgb


def pointer_angle(center: Tuple[float, float], point: Tuple[float, float]) -> float:
    """Clockwise angle of a touch point around the dial center.

    Screen coordinates (y grows downward); 0 is straight up at the pointer.
    """
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return normalize_angle(math.degrees(math.atan2(dx, -dy)))


def angular_delta(previous: float, current: float) -> float:
    """Signed shortest rotation from one pointer angle to another, in (-180, 180]."""
    delta = normalize_angle(current - previous)
    if delta > FULL_TURN / 2:
        delta -= FULL_TURN
    return delta
