"""Animation module for SPIN & DARE."""

from spindare.animation.easing import Easing, get_easing, interpolate
from spindare.animation.timeline import Timeline, Track, Keyframe, PlayState

__all__ = [
    # Easing
    "Easing",
    "get_easing",
    "interpolate",
    # Timeline
    "Timeline",
    "Track",
    "Keyframe",
    "PlayState",
]
