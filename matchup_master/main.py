"""Main entry point for MatchupMaster."""

import argparse
import asyncio
import logging
import sys

import httpx

from matchup_master.analysis import (
    UnitCategory,
    analyze_unit,
    categorize,
    filter_catalog,
    format_breakpoint_report,
    format_damage_ranking,
)
from matchup_master.config import Config
from matchup_master.data import init_game_data
from matchup_master.errors import IncompleteSelection, MatchupMasterError, UnitNotFound
from matchup_master.session import StrategySession

logger = logging.getLogger(__name__)


def setup_logging():
    """Configure logging based on config."""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _format_unit_line(name, record) -> str:
    good = ", ".join(record.good_against) or "-"
    countered = ", ".join(record.countered_by) or "-"
    return f"- **{name}**: good against {good}; countered by {countered}"


def show_units(catalog, search: str, category: UnitCategory) -> int:
    filtered = filter_catalog(catalog, search=search, category=category)
    if not len(filtered):
        print("No units match your search.")
        return 0

    ground, air = categorize(filtered)
    for title, group in (("Ground Units", ground), ("Air Units", air)):
        if not len(group):
            continue
        print(f"## {title}")
        for name, record in group.all():
            print(_format_unit_line(name, record))
        print()
    return 0


def show_breakpoints(stats, unit: str, search: str) -> int:
    if unit:
        try:
            result = analyze_unit(stats, unit)
        except UnitNotFound as e:
            logger.error(str(e))
            return 1
        print(format_breakpoint_report(result))
        return 0

    ranking = format_damage_ranking(stats, search)
    print(ranking or "No units match your search.")
    return 0


async def generate_strategy(opponent: list[str], own: list[str], corpus: str) -> int:
    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    logger.info(f"LLM Provider: {Config.LLM_PROVIDER}")

    session = StrategySession()
    session.select(opponent=opponent, own=own)

    try:
        outcome = await session.request_strategy(corpus)
    except IncompleteSelection as e:
        logger.error(str(e))
        return 1

    if not outcome.ok:
        logger.error(f"{outcome.error}. Please try again.")
        return 1

    print(outcome.narrative)
    return 0


async def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="MatchupMaster - Mechabellum matchup analysis")
    subparsers = parser.add_subparsers(dest="command", required=True)

    units_parser = subparsers.add_parser("units", help="List units and their counters")
    units_parser.add_argument("-s", "--search", default="", help="Filter by unit name")
    units_parser.add_argument(
        "-c",
        "--category",
        choices=[c.value for c in UnitCategory],
        default=UnitCategory.ALL.value,
        help="Show all, ground or air units (default: all)",
    )

    bp_parser = subparsers.add_parser("breakpoints", help="One-shot breakpoint analysis")
    bp_parser.add_argument("unit", nargs="?", default="", help="Unit to analyze (omit to rank all)")
    bp_parser.add_argument("-s", "--search", default="", help="Filter the ranking by unit name")

    strategy_parser = subparsers.add_parser("strategy", help="Generate a counter strategy")
    strategy_parser.add_argument("--opponent", nargs="+", default=[], help="Opponent's units")
    strategy_parser.add_argument("--own", nargs="+", default=[], help="Your units")

    args = parser.parse_args(argv)
    setup_logging()

    try:
        data = await init_game_data(
            units_source=Config.UNITS_SOURCE,
            stats_source=Config.UNIT_STATS_SOURCE,
            corpus_source=Config.STRATEGY_CORPUS_SOURCE,
            timeout=Config.ASSET_TIMEOUT,
        )
    except (MatchupMasterError, OSError, httpx.HTTPError) as e:
        logger.error(f"Failed to load game data: {e}")
        return 1

    if args.command == "units":
        return show_units(data.catalog, args.search, UnitCategory(args.category))
    if args.command == "breakpoints":
        return show_breakpoints(data.stats, args.unit, args.search)
    return await generate_strategy(args.opponent, args.own, data.corpus)


def run():
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
