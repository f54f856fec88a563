"""Headless dial rasterizer.

Paints the four sectors, the reveal sweep and the center hub into an RGB
numpy buffer. Colors come from the canonical sector table.
"""

from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from spindare.wheel.sectors import (
    ColorSector,
    FULL_TURN,
    SECTOR_ORDER,
    display_color,
    sectors_of,
)

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]

HUB_COLOR: Color = (255, 255, 255)
HUB_RATIO = 0.15

_PALETTE = np.array([display_color(s) for s in SECTOR_ORDER], dtype=np.uint8)


def screen_angles(height: int, width: int) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Per-pixel clockwise angle from the pointer (straight up) and distance from center."""
    cy = (height - 1) / 2
    cx = (width - 1) / 2
    y, x = np.ogrid[:height, :width]
    dx = x - cx
    dy = y - cy
    theta = np.mod(np.degrees(np.arctan2(dx, -dy)), FULL_TURN)
    dist = np.hypot(dx, dy)
    return theta, dist


def render_dial(
    buffer: Buffer,
    rotation: float,
    sweep_color: Optional[ColorSector] = None,
    sweep_progress: float = 0.0,
) -> None:
    """Draw the dial into ``buffer``.

    Args:
        buffer: Target numpy array (height, width, 3)
        rotation: Dial angle; the pixel under the pointer shows sector_of(rotation)
        sweep_color: Winning color filling the dial during the reveal sweep
        sweep_progress: Fraction of the dial covered by the sweep, 0.0 to 1.0
    """
    h, w = buffer.shape[:2]
    theta, dist = screen_angles(h, w)
    radius = min(h, w) / 2
    disk = dist <= radius

    # Dial point under each pixel
    sector_index = sectors_of(rotation - theta)
    frame = _PALETTE[sector_index]

    if sweep_color is not None and sweep_progress > 0:
        swept = theta < max(0.0, min(1.0, sweep_progress)) * FULL_TURN
        frame[swept] = display_color(sweep_color)

    buffer[disk] = frame[disk]
    buffer[dist <= radius * HUB_RATIO] = HUB_COLOR
