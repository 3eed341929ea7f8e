"""Asset loading for the unit catalog, stat table and strategy corpus.

Assets are read from a local path or fetched over http(s). Loaded data is
cached for the process lifetime.

Usage:
    # At startup
    await init_game_data(units_source="units.json")

    # Anywhere in code
    from matchup_master.data.assets import get_game_data
    data = get_game_data()
"""

import json
import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Optional

import httpx

from matchup_master.errors import DataFormatError
from .catalog import Catalog, parse_catalog
from .stats import StatTable, load_bundled_stats, parse_stat_table

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_RESOURCE = "units.json"

# Module-level cache for loaded game data
_game_data_cache: Optional["GameData"] = None


@dataclass(frozen=True)
class GameData:
    """Everything loaded once at startup."""

    catalog: Catalog
    stats: StatTable
    corpus: str


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


async def read_text_asset(location: str, timeout: float = 30.0) -> str:
    """Read a text asset from a path or URL.

    Raises:
        OSError: if a local file cannot be read
        httpx.HTTPError: if the remote asset cannot be fetched
    """
    if _is_url(location):
        logger.info(f"Fetching asset from {location}")
        async with httpx.AsyncClient() as client:
            response = await client.get(location, timeout=timeout)
            response.raise_for_status()
            return response.text

    logger.info(f"Reading asset from {location}")
    return Path(location).read_text(encoding="utf-8")


def _decode_json(text: str, location: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DataFormatError(f"{location} is not valid JSON: {e}") from e


async def read_json_asset(location: str, timeout: float = 30.0) -> Any:
    """Read and decode a JSON asset, raising DataFormatError on bad JSON."""
    text = await read_text_asset(location, timeout=timeout)
    return _decode_json(text, location)


async def load_catalog(location: str = "", timeout: float = 30.0) -> Catalog:
    """Load the unit catalog, falling back to the bundled sample catalog."""
    if location:
        raw_data = await read_json_asset(location, timeout=timeout)
    else:
        text = resources.files("matchup_master.data").joinpath(BUNDLED_CATALOG_RESOURCE).read_text(encoding="utf-8")
        raw_data = _decode_json(text, BUNDLED_CATALOG_RESOURCE)
    return parse_catalog(raw_data)


async def load_stat_table(location: str = "", timeout: float = 30.0) -> StatTable:
    """Load the combat stat table, falling back to the bundled table."""
    if not location:
        return load_bundled_stats()
    raw_data = await read_json_asset(location, timeout=timeout)
    return parse_stat_table(raw_data)


async def load_corpus(location: str = "", timeout: float = 30.0) -> str:
    """Load the strategy corpus text. No location means an empty corpus."""
    if not location:
        logger.warning("No strategy corpus configured, prompts will carry no strategy notes")
        return ""
    return await read_text_asset(location, timeout=timeout)


def get_game_data() -> Optional[GameData]:
    """Get the cached game data.

    Returns None if init_game_data() hasn't been called yet.
    """
    return _game_data_cache


async def init_game_data(
    units_source: str = "",
    stats_source: str = "",
    corpus_source: str = "",
    timeout: float = 30.0,
) -> GameData:
    """Load and cache the catalog, stat table and corpus.

    Call this once at startup. Loading is all-or-nothing: if any asset fails
    to load, the error propagates and the cache is left untouched.

    Raises:
        DataFormatError: if the catalog or stat table is malformed
    """
    global _game_data_cache

    catalog = await load_catalog(units_source, timeout=timeout)
    stats = await load_stat_table(stats_source, timeout=timeout)
    corpus = await load_corpus(corpus_source, timeout=timeout)

    _game_data_cache = GameData(catalog=catalog, stats=stats, corpus=corpus)
    logger.info(
        f"Cached game data: {len(catalog)} catalog units, {len(stats)} stat entries, "
        f"{len(corpus)} bytes of strategy notes"
    )
    return _game_data_cache


def reset_game_data() -> None:
    """Drop the cached game data."""
    global _game_data_cache
    _game_data_cache = None
