"""Breakpoint analysis: which units eliminate which in a single hit.

A unit one-shots another when its single-hit damage meets or exceeds the
target's total hit points. The relation is neither symmetric nor transitive;
two units may one-shot each other when both thresholds hold.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from matchup_master.data.stats import CombatStat, Number, StatTable
from .classifier import matches_search

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneShotEntry:
    """A unit paired with the stat that decides the breakpoint."""

    unit: str
    value: Number  # attacker damage or target hp


@dataclass(frozen=True)
class OneShotResult:
    """Breakpoint analysis for a single unit."""

    unit: str
    stat: CombatStat
    one_shot_by: Tuple[OneShotEntry, ...]  # attackers, damage descending
    can_one_shot: Tuple[OneShotEntry, ...]  # targets, hp descending

    @property
    def efficiency(self) -> float:
        return efficiency(self.stat)


def efficiency(stat: CombatStat) -> float:
    """Damage per point of hit points.

    Raises:
        ZeroDivisionError: if hp is zero (rejected at load time)
    """
    return stat.damage / stat.hp


def one_shotters_of(stats: StatTable, target: str) -> List[Tuple[str, CombatStat]]:
    """All units whose damage meets or exceeds the target's hp, damage descending.

    Raises:
        UnitNotFound: if the target is not in the stat table
    """
    target_name = stats.canonical_name(target)
    target_hp = stats.get(target_name).hp
    attackers = [
        (name, stat) for name, stat in stats.items()
        if name != target_name and stat.damage >= target_hp
    ]
    return sorted(attackers, key=lambda item: item[1].damage, reverse=True)


def one_shot_targets_of(stats: StatTable, attacker: str) -> List[Tuple[str, CombatStat]]:
    """All units whose hp the attacker's damage meets or exceeds, hp descending.

    Raises:
        UnitNotFound: if the attacker is not in the stat table
    """
    attacker_name = stats.canonical_name(attacker)
    attacker_damage = stats.get(attacker_name).damage
    targets = [
        (name, stat) for name, stat in stats.items()
        if name != attacker_name and attacker_damage >= stat.hp
    ]
    return sorted(targets, key=lambda item: item[1].hp, reverse=True)


def rank_by_damage(stats: StatTable, search: str = "") -> List[Tuple[str, CombatStat]]:
    """All units matching the search term, damage descending, ties in table order."""
    matching = [(name, stat) for name, stat in stats.items() if matches_search(name, search)]
    return sorted(matching, key=lambda item: item[1].damage, reverse=True)


def analyze_unit(stats: StatTable, name: str) -> OneShotResult:
    """Compute both one-shot relations for a unit.

    Raises:
        UnitNotFound: if the unit is not in the stat table
    """
    unit = stats.canonical_name(name)
    result = OneShotResult(
        unit=unit,
        stat=stats.get(unit),
        one_shot_by=tuple(
            OneShotEntry(attacker, stat.damage) for attacker, stat in one_shotters_of(stats, unit)
        ),
        can_one_shot=tuple(
            OneShotEntry(target, stat.hp) for target, stat in one_shot_targets_of(stats, unit)
        ),
    )
    logger.debug(
        f"Breakpoints for {unit}: one-shot by {len(result.one_shot_by)}, "
        f"one-shots {len(result.can_one_shot)}"
    )
    return result


def _format_number(value: Number) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def format_breakpoint_report(result: OneShotResult) -> str:
    """Format a unit's breakpoint analysis for display."""
    lines = [f"## {result.unit}"]
    lines.append("")
    lines.append(f"- HP: {_format_number(result.stat.hp)}")
    lines.append(f"- Damage: {_format_number(result.stat.damage)}")
    lines.append(f"- Damage/HP Ratio: {result.efficiency:.2f}")
    lines.append("")

    lines.append(f"### Units that can one-shot {result.unit}:")
    if result.one_shot_by:
        for entry in result.one_shot_by:
            lines.append(f"- {entry.unit} ({_format_number(entry.value)} dmg)")
    else:
        lines.append("This unit cannot be one-shot by any other unit!")
    lines.append("")

    lines.append(f"### Units that {result.unit} can one-shot:")
    if result.can_one_shot:
        for entry in result.can_one_shot:
            lines.append(f"- {entry.unit} ({_format_number(entry.value)} hp)")
    else:
        lines.append("This unit cannot one-shot any other units.")

    return "\n".join(lines)


def format_damage_ranking(stats: StatTable, search: Optional[str] = None) -> str:
    """Format every unit ranked by damage with its one-shot counts."""
    ranked = rank_by_damage(stats, search or "")
    if not ranked:
        return ""

    lines = ["## Units by Damage"]
    lines.append("")
    for name, stat in ranked:
        kills = len(one_shot_targets_of(stats, name))
        threats = len(one_shotters_of(stats, name))
        lines.append(
            f"- **{name}**: {_format_number(stat.damage)} dmg, {_format_number(stat.hp)} hp, "
            f"ratio {efficiency(stat):.2f} (one-shots {kills}, one-shot by {threats})"
        )
    return "\n".join(lines)
