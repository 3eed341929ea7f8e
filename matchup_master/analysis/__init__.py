"""Unit classification and breakpoint analysis."""

from .classifier import UnitCategory, categorize, filter_catalog, matches_search
from .breakpoints import (
    OneShotEntry,
    OneShotResult,
    analyze_unit,
    efficiency,
    format_breakpoint_report,
    format_damage_ranking,
    one_shot_targets_of,
    one_shotters_of,
    rank_by_damage,
)

__all__ = [
    "UnitCategory",
    "categorize",
    "filter_catalog",
    "matches_search",
    "OneShotEntry",
    "OneShotResult",
    "analyze_unit",
    "efficiency",
    "format_breakpoint_report",
    "format_damage_ranking",
    "one_shot_targets_of",
    "one_shotters_of",
    "rank_by_damage",
]
