"""Combat stat table used by breakpoint analysis.

The table maps unit names to hit points and single-hit damage. It is loaded
independently of the unit catalog and usually covers fewer units.

Usage:
    stats = parse_stat_table({"Crawler": {"hp": 277, "damage": 79}})
    stats.get("crawler").hp  # 277
"""

import json
import logging
from dataclasses import dataclass
from importlib import resources
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Union

from matchup_master.errors import DataFormatError, UnitNotFound
from .names import normalize_unit_name

logger = logging.getLogger(__name__)

Number = Union[int, float]

BUNDLED_STATS_RESOURCE = "unit_stats.json"


@dataclass(frozen=True)
class CombatStat:
    """Hit points and single-hit damage of one unit."""

    hp: Number
    damage: Number


class StatTable:
    """Immutable unit name -> CombatStat table with case-insensitive lookup."""

    def __init__(self, stats: Dict[str, CombatStat]):
        self._stats = dict(stats)
        self._normalized_lookup: Dict[str, str] = {}
        for name in self._stats:
            self._normalized_lookup[normalize_unit_name(name)] = name

    def __len__(self) -> int:
        return len(self._stats)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_unit_name(name) in self._normalized_lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._stats)

    def canonical_name(self, name: str) -> str:
        """Return the table's spelling of a unit name, raising UnitNotFound."""
        original = self._normalized_lookup.get(normalize_unit_name(name))
        if original is None:
            raise UnitNotFound(name)
        return original

    def get(self, name: str) -> CombatStat:
        """Get the stats of a unit, raising UnitNotFound for unknown names."""
        return self._stats[self.canonical_name(name)]

    def items(self) -> List[Tuple[str, CombatStat]]:
        """All (name, stat) pairs in source order."""
        return list(self._stats.items())


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_stat_table(raw_data: Any) -> StatTable:
    """Parse raw JSON data into a StatTable.

    Raises:
        DataFormatError: if any entry is not {hp: positive number,
            damage: non-negative number}. Nothing is returned on failure.
    """
    if not isinstance(raw_data, Mapping):
        raise DataFormatError(
            f"Stat table must be an object keyed by unit name, got {type(raw_data).__name__}"
        )

    result: Dict[str, CombatStat] = {}
    seen: Dict[str, str] = {}

    for name, data in raw_data.items():
        if not isinstance(name, str) or not name.strip():
            raise DataFormatError(f"Invalid unit name in stat table: {name!r}")
        if not isinstance(data, Mapping):
            raise DataFormatError(f"Stats for {name!r} must be an object")

        normalized = normalize_unit_name(name)
        if normalized in seen:
            raise DataFormatError(f"Duplicate unit {name!r} in stat table (already have {seen[normalized]!r})")
        seen[normalized] = name

        hp = data.get("hp")
        damage = data.get("damage")
        if not _is_number(hp) or hp <= 0:
            raise DataFormatError(f"Stats for {name!r}: hp must be a positive number, got {hp!r}")
        if not _is_number(damage) or damage < 0:
            raise DataFormatError(f"Stats for {name!r}: damage must be a non-negative number, got {damage!r}")

        result[name] = CombatStat(hp=hp, damage=damage)

    return StatTable(result)


def load_bundled_stats() -> StatTable:
    """Load the stat table shipped with the package."""
    text = resources.files("matchup_master.data").joinpath(BUNDLED_STATS_RESOURCE).read_text(encoding="utf-8")
    try:
        raw_data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataFormatError(f"Bundled stat table is not valid JSON: {e}") from e

    stats = parse_stat_table(raw_data)
    logger.debug(f"Loaded bundled stats for {len(stats)} units")
    return stats
