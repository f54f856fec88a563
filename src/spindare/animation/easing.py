"""Easing functions for dial animations.

All functions take a normalized time t (0.0 to 1.0) and return a normalized value.
"""

from enum import Enum, auto
from typing import Callable
import math


class Easing(Enum):
    """Available easing function types."""

    LINEAR = auto()
    EASE_OUT_CUBIC = auto()
    EASE_OUT_QUART = auto()
    EASE_IN_OUT_SINE = auto()


# Type alias for easing functions
EasingFunc = Callable[[float], float]


def linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_out_cubic(t: float) -> float:
    """Decelerate to zero velocity (cubic)."""
    return 1 - pow(1 - t, 3)


def ease_out_quart(t: float) -> float:
    """Decelerate to zero velocity (quartic)."""
    return 1 - pow(1 - t, 4)


def ease_in_out_sine(t: float) -> float:
    """Accelerate then decelerate along a half cosine."""
    return -(math.cos(math.pi * t) - 1) / 2


_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.EASE_OUT_QUART: ease_out_quart,
    Easing.EASE_IN_OUT_SINE: ease_in_out_sine,
}


def get_easing(easing: Easing | str) -> EasingFunc:
    """Get an easing function by enum or name.

    Args:
        easing: Easing enum member or its name (case-insensitive)

    Returns:
        The easing function; unknown names fall back to linear
    """
    if isinstance(easing, str):
        try:
            easing = Easing[easing.upper()]
        except KeyError:
            return linear
    return _EASING_FUNCTIONS.get(easing, linear)


def interpolate(start: float, end: float, t: float, easing: Easing | str = Easing.LINEAR) -> float:
    """Interpolate between two values with easing.

    Args:
        start: Start value
        end: End value
        t: Normalized time, clamped to 0.0-1.0
        easing: Easing to apply
    """
    t = max(0.0, min(1.0, t))
    return start + (end - start) * get_easing(easing)(t)
