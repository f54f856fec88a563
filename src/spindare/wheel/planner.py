"""Rotation planner - picks where a spin should come to rest.

All randomness comes from the injected source, so a seeded ``random.Random``
or a scripted stand-in makes every plan reproducible.
"""

from typing import Any, Optional, Protocol, Sequence, Tuple
import logging
import math
import random

from spindare.core.errors import ConfigurationError
from spindare.wheel.sectors import (
    ColorSector,
    FULL_TURN,
    SECTOR_ORDER,
    SECTOR_SPAN,
    sector_bounds,
    sector_of,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Interface of the random source consumed by the planner and selector.

    ``random.Random`` satisfies it; tests substitute scripted sources.
    """

    def randint(self, a: int, b: int) -> int: ...

    def uniform(self, a: float, b: float) -> float: ...

    def choice(self, seq: Sequence[Any]) -> Any: ...


class RotationPlanner:
    """Plans target angles for free, steered and drag-continued spins.

    Every free or steered plan moves forward by at least ``min_spin_delta``
    degrees; short draws get extra full turns instead of a re-roll.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        turn_range: Tuple[int, int] = (3, 6),
        min_spin_delta: float = 1080.0,
        momentum_factor: float = 2.0,
    ):
        min_turns, max_turns = turn_range
        if min_turns < 0 or min_turns > max_turns:
            raise ConfigurationError(f"Invalid full-turn range: {turn_range}")
        if not min_spin_delta > 0:
            raise ConfigurationError(f"min_spin_delta must be positive, got {min_spin_delta}")
        if momentum_factor < 1:
            raise ConfigurationError(f"momentum_factor must be >= 1, got {momentum_factor}")

        self._rng = rng if rng is not None else random.Random()
        self.turn_range = (min_turns, max_turns)
        self.min_spin_delta = float(min_spin_delta)
        self.momentum_factor = float(momentum_factor)

    def plan_free_spin(self, current_angle: float) -> float:
        """Plan a spin landing anywhere.

        target = current + turns * 360 + sector_offset + within_offset
        """
        turns = self._draw_turns()
        sector_offset = sector_bounds(self._rng.choice(SECTOR_ORDER))[0]
        within = self._draw_within_offset()

        delta = turns * FULL_TURN + sector_offset + within
        delta += self._floor_turns(delta) * FULL_TURN
        target = current_angle + delta

        logger.debug(
            f"Free spin planned: {current_angle:.1f} -> {target:.1f} "
            f"(turns={turns}, sector={sector_offset:.0f}, within={within:.1f})"
        )
        return target

    def plan_steered_spin(self, current_angle: float, target_color: ColorSector) -> float:
        """Plan a spin guaranteed to rest on ``target_color``.

        Offsets are measured from the last whole turn at or below
        ``current_angle`` so the landing sector does not depend on where
        the dial started.
        """
        turns = self._draw_turns()
        low, _ = sector_bounds(target_color)
        within = self._draw_within_offset()

        base = math.floor(current_angle / FULL_TURN) * FULL_TURN
        target = base + turns * FULL_TURN + low + within
        target += self._floor_turns(target - current_angle) * FULL_TURN

        # Float rounding on large angles can land exactly on the next boundary
        for _ in range(4):
            if sector_of(target) == target_color:
                break
            target = math.nextafter(target, -math.inf)
        else:
            logger.error(f"Steered target {target} missed {target_color.value}")

        logger.debug(
            f"Steered spin planned: {current_angle:.1f} -> {target:.1f} "
            f"({target_color.value}, turns={turns}, within={within:.1f})"
        )
        return target

    def plan_drag_continuation(
        self,
        current_angle: float,
        pointer_delta: float,
        elapsed_drag_ms: float,
    ) -> float:
        """Extend a drag gesture with momentum. The landing sector is not constrained."""
        target = current_angle + pointer_delta * self.momentum_factor

        if elapsed_drag_ms > 0:
            speed = pointer_delta / elapsed_drag_ms * 1000
            logger.debug(f"Drag released at {speed:.0f} deg/s")
        logger.debug(f"Drag continuation planned: {current_angle:.1f} -> {target:.1f}")
        return target

    def _draw_turns(self) -> int:
        return self._rng.randint(*self.turn_range)

    def _draw_within_offset(self) -> float:
        within = self._rng.uniform(0.0, SECTOR_SPAN)
        # uniform() may return the upper bound
        if within >= SECTOR_SPAN:
            within = math.nextafter(SECTOR_SPAN, 0.0)
        return within

    def _floor_turns(self, delta: float) -> int:
        """Whole turns to add so the forward delta reaches the floor."""
        if delta >= self.min_spin_delta:
            return 0
        return math.ceil((self.min_spin_delta - delta) / FULL_TURN)
