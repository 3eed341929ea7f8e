"""Static game data: unit catalog, combat stats and rosters."""

from .catalog import Catalog, UnitRecord, parse_catalog
from .stats import CombatStat, StatTable, load_bundled_stats, parse_stat_table
from .roster import AIR_UNITS, UNIT_ROSTER
from .assets import GameData, get_game_data, init_game_data, load_catalog, load_stat_table

__all__ = [
    "Catalog",
    "UnitRecord",
    "parse_catalog",
    "CombatStat",
    "StatTable",
    "load_bundled_stats",
    "parse_stat_table",
    "AIR_UNITS",
    "UNIT_ROSTER",
    "GameData",
    "get_game_data",
    "init_game_data",
    "load_catalog",
    "load_stat_table",
]
