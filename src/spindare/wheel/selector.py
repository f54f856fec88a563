"""Uniform challenge selection."""

from typing import Optional
import logging
import random

from spindare.core.errors import ConfigurationError
from spindare.wheel.challenges import ChallengePool
from spindare.wheel.models import ChallengeEntry
from spindare.wheel.planner import RandomSource
from spindare.wheel.sectors import ColorSector

logger = logging.getLogger(__name__)


class ChallengeSelector:
    """Draws challenges uniformly from a pool using its own random source."""

    def __init__(self, rng: Optional[RandomSource] = None):
        self._rng = rng if rng is not None else random.Random()

    def pick(self, pool: ChallengePool, color: ColorSector) -> ChallengeEntry:
        """Pick one entry of ``color``."""
        entries = pool.entries_for(color)
        if not entries:
            raise ConfigurationError(f"No challenges for color {color.value}")
        entry = self._rng.choice(entries)
        logger.debug(f"Picked challenge {entry.id} from {color.value} ({len(entries)} cards)")
        return entry

    def pick_any(self, pool: ChallengePool) -> ChallengeEntry:
        """Pick one entry of any color."""
        entries = pool.all_entries()
        if not entries:
            raise ConfigurationError("Challenge pool is empty")
        return self._rng.choice(entries)
