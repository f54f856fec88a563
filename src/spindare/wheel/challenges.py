"""Immutable challenge pool grouped by dial color."""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence, Tuple
import logging

from spindare.core.errors import ConfigurationError
from spindare.wheel.models import ChallengeEntry
from spindare.wheel.sectors import ColorSector, SECTOR_ORDER

logger = logging.getLogger(__name__)

# {color: (category, [texts...])}
ChallengeTable = Mapping[ColorSector, Tuple[str, Sequence[str]]]


class ChallengePool:
    """Challenge cards bucketed by color.

    Every bucket is non-empty and every id is unique; the constructor checks
    both and the pool never changes afterwards, so a pool can be shared by any
    number of game instances.
    """

    def __init__(self, buckets: Mapping[ColorSector, Sequence[ChallengeEntry]]):
        """Wrap already grouped entries. Prefer ``load()`` or ``from_table()``.

        Raises:
            ConfigurationError: A color has no entries, an entry sits in
                another color's bucket, or an id is duplicated
        """
        empty = [sector.value for sector in SECTOR_ORDER if not buckets.get(sector)]
        if empty:
            raise ConfigurationError(f"No challenges for color(s): {', '.join(empty)}")

        by_id: Dict[int, ChallengeEntry] = {}
        for sector in SECTOR_ORDER:
            for entry in buckets[sector]:
                if entry.color != sector:
                    raise ConfigurationError(
                        f"Challenge {entry.id} ({entry.color}) filed under {sector.value}"
                    )
                if entry.id in by_id:
                    raise ConfigurationError(f"Duplicate challenge id: {entry.id}")
                by_id[entry.id] = entry

        self._buckets = MappingProxyType({sector: tuple(buckets[sector]) for sector in SECTOR_ORDER})
        self._by_id = by_id
        self._all = tuple(by_id.values())

    @classmethod
    def load(cls, entries: Iterable[ChallengeEntry]) -> "ChallengePool":
        """Build a pool, validating its invariants.

        Raises:
            ConfigurationError: A color has no entries, an id is duplicated,
                or an item is not a ChallengeEntry
        """
        grouped: Dict[ColorSector, list] = {sector: [] for sector in SECTOR_ORDER}

        for entry in entries:
            if not isinstance(entry, ChallengeEntry):
                raise ConfigurationError(f"Not a challenge entry: {entry!r}")
            if not isinstance(entry.color, ColorSector):
                raise ConfigurationError(f"Challenge {entry.id} has invalid color {entry.color!r}")
            grouped[entry.color].append(entry)

        pool = cls(grouped)
        logger.info(
            f"Challenge pool loaded: {len(pool)} entries "
            f"({', '.join(f'{s.value}={pool.count(s)}' for s in SECTOR_ORDER)})"
        )
        return pool

    @classmethod
    def from_table(cls, table: ChallengeTable) -> "ChallengePool":
        """Build a pool from per-color text lists, numbering ids from 1 in dial order."""
        entries = []
        next_id = 1
        for sector in SECTOR_ORDER:
            if sector not in table:
                continue
            category, texts = table[sector]
            for text in texts:
                entries.append(ChallengeEntry(
                    id=next_id,
                    color=sector,
                    category=category,
                    text=text,
                ))
                next_id += 1
        return cls.load(entries)

    def entries_for(self, color: ColorSector) -> Tuple[ChallengeEntry, ...]:
        """Get the ordered entries of one color."""
        return self._buckets.get(color, ())

    def all_entries(self) -> Tuple[ChallengeEntry, ...]:
        """Get every entry, in dial order."""
        return self._all

    def get(self, challenge_id: int) -> ChallengeEntry:
        """Look up an entry by id. Raises KeyError if unknown."""
        return self._by_id[challenge_id]

    def count(self, color: ColorSector) -> int:
        return len(self.entries_for(color))

    def __len__(self) -> int:
        return len(self._all)

    def __contains__(self, entry: object) -> bool:
        return isinstance(entry, ChallengeEntry) and self._by_id.get(entry.id) == entry
