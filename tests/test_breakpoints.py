"""Tests for one-shot breakpoint analysis."""

import pytest

from matchup_master.analysis import (
    OneShotEntry,
    analyze_unit,
    efficiency,
    format_breakpoint_report,
    format_damage_ranking,
    one_shot_targets_of,
    one_shotters_of,
    rank_by_damage,
)
from matchup_master.data import CombatStat, load_bundled_stats, parse_stat_table
from matchup_master.errors import UnitNotFound


def _names(pairs):
    return [name for name, _ in pairs]


class TestOneShotRelations:
    """Tests for one_shotters_of and one_shot_targets_of."""

    def test_crawler_is_one_shot_by_factory_only(self, scenario_stats):
        assert _names(one_shotters_of(scenario_stats, "Crawler")) == ["Factory"]

    def test_factory_one_shots_both_small_units(self, scenario_stats):
        # Ordered by target hp, largest first
        assert _names(one_shot_targets_of(scenario_stats, "Factory")) == ["Mustang", "Crawler"]

    def test_mustang_one_shots_nothing(self, scenario_stats):
        assert one_shot_targets_of(scenario_stats, "Mustang") == []

    def test_factory_cannot_be_one_shot(self, scenario_stats):
        assert one_shotters_of(scenario_stats, "Factory") == []

    def test_threshold_is_inclusive(self):
        stats = parse_stat_table({"A": {"hp": 50, "damage": 100}, "B": {"hp": 100, "damage": 1}})
        assert _names(one_shot_targets_of(stats, "A")) == ["B"]

    def test_both_directions_can_hold(self):
        stats = parse_stat_table({"A": {"hp": 100, "damage": 150}, "B": {"hp": 120, "damage": 100}})
        assert _names(one_shot_targets_of(stats, "A")) == ["B"]
        assert _names(one_shot_targets_of(stats, "B")) == ["A"]

    def test_neither_direction_holds(self):
        stats = parse_stat_table({"A": {"hp": 100, "damage": 10}, "B": {"hp": 120, "damage": 20}})
        assert one_shotters_of(stats, "A") == []
        assert one_shotters_of(stats, "B") == []

    def test_matches_threshold_for_every_pair(self):
        stats = load_bundled_stats()
        for attacker, attacker_stat in stats.items():
            targets = set(_names(one_shot_targets_of(stats, attacker)))
            for target, target_stat in stats.items():
                if target == attacker:
                    continue
                assert (target in targets) == (attacker_stat.damage >= target_stat.hp)
                assert (attacker in _names(one_shotters_of(stats, target))) == (
                    attacker_stat.damage >= target_stat.hp
                )

    def test_never_includes_self(self):
        stats = load_bundled_stats()
        # Stormcaller out-damages its own hp
        assert stats.get("Stormcaller").damage >= stats.get("Stormcaller").hp
        for name in stats:
            assert name not in _names(one_shotters_of(stats, name))
            assert name not in _names(one_shot_targets_of(stats, name))

    def test_lookup_is_case_insensitive(self, scenario_stats):
        assert _names(one_shotters_of(scenario_stats, "crawler")) == ["Factory"]

    def test_unknown_unit_raises(self, scenario_stats):
        with pytest.raises(UnitNotFound):
            one_shotters_of(scenario_stats, "Rhino")
        with pytest.raises(UnitNotFound):
            one_shot_targets_of(scenario_stats, "Rhino")


class TestEfficiency:
    """Tests for efficiency."""

    def test_ratio(self):
        assert efficiency(CombatStat(hp=200, damage=50)) == 0.25

    def test_increases_with_damage(self):
        assert efficiency(CombatStat(hp=100, damage=60)) > efficiency(CombatStat(hp=100, damage=50))

    def test_decreases_with_hp(self):
        assert efficiency(CombatStat(hp=200, damage=50)) < efficiency(CombatStat(hp=100, damage=50))

    def test_zero_hp_raises(self):
        with pytest.raises(ZeroDivisionError):
            efficiency(CombatStat(hp=0, damage=10))


class TestRankByDamage:
    """Tests for rank_by_damage."""

    def test_descending_with_stable_ties(self):
        stats = parse_stat_table(
            {
                "A": {"hp": 1, "damage": 5},
                "B": {"hp": 1, "damage": 10},
                "C": {"hp": 1, "damage": 5},
            }
        )
        assert _names(rank_by_damage(stats)) == ["B", "A", "C"]

    def test_search_filters(self, scenario_stats):
        assert _names(rank_by_damage(scenario_stats, search="TANG")) == ["Mustang"]

    def test_search_term_is_not_trimmed(self):
        stats = load_bundled_stats()
        assert _names(rank_by_damage(stats, search="ray")) == ["Ray"]
        assert rank_by_damage(stats, search=" ray") == []


class TestAnalyzeUnit:
    """Tests for analyze_unit and report formatting."""

    def test_result_fields(self, scenario_stats):
        result = analyze_unit(scenario_stats, "crawler")
        assert result.unit == "Crawler"
        assert result.one_shot_by == (OneShotEntry("Factory", 28736),)
        assert isinstance(result.one_shot_by[0].value, int)
        assert result.can_one_shot == ()
        assert result.efficiency == pytest.approx(79 / 277)

    def test_unknown_unit_raises_instead_of_empty_result(self, scenario_stats):
        with pytest.raises(UnitNotFound):
            analyze_unit(scenario_stats, "Phantom Ray")

    def test_report_lists_attackers(self, scenario_stats):
        report = format_breakpoint_report(analyze_unit(scenario_stats, "Crawler"))
        assert "Units that can one-shot Crawler:" in report
        assert "Factory (28,736 dmg)" in report
        assert "Damage/HP Ratio: 0.29" in report
        assert "This unit cannot one-shot any other units." in report

    def test_report_for_untouchable_unit(self, scenario_stats):
        report = format_breakpoint_report(analyze_unit(scenario_stats, "Factory"))
        assert "This unit cannot be one-shot by any other unit!" in report
        assert "Mustang (343 hp)" in report

    def test_damage_ranking(self, scenario_stats):
        ranking = format_damage_ranking(scenario_stats)
        lines = [line for line in ranking.splitlines() if line.startswith("- ")]
        assert [line.split("**")[1] for line in lines] == ["Factory", "Crawler", "Mustang"]
        assert "one-shots 2, one-shot by 0" in lines[0]

    def test_damage_ranking_no_match(self, scenario_stats):
        assert format_damage_ranking(scenario_stats, search="Sandworm") == ""
