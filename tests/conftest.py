"""Pytest fixtures for MatchupMaster tests."""

import pytest
from unittest.mock import MagicMock

from matchup_master.config import Config
from matchup_master.data import parse_catalog, parse_stat_table
from matchup_master.data.assets import reset_game_data
from matchup_master.llm import LLMProvider


@pytest.fixture
def scenario_stats():
    """Stat table with one huge unit and two small ones."""
    return parse_stat_table(
        {
            "Crawler": {"hp": 277, "damage": 79},
            "Mustang": {"hp": 343, "damage": 36},
            "Factory": {"hp": 146782, "damage": 28736},
        }
    )


@pytest.fixture
def raw_catalog():
    """Catalog source data in the on-disk JSON shape."""
    return {
        "Crawler": {"goodAgainst": ["Marksman"], "counteredBy": ["Arclight", "Vulcan"]},
        "Fang": {"goodAgainst": ["Marksman"], "counteredBy": ["Arclight"]},
        "Wasp": {"goodAgainst": ["Marksman"], "counteredBy": ["Mustang", "Phoenix"]},
        "Phoenix": {"goodAgainst": ["Overlord", "Wasp"]},
        "Mustang": {"goodAgainst": ["Wasp", "Phoenix"], "counteredBy": ["Arclight"]},
        "Overlord": {"counteredBy": ["Phoenix"]},
    }


@pytest.fixture
def catalog(raw_catalog):
    return parse_catalog(raw_catalog)


@pytest.fixture
def mock_llm():
    """Create a mock LLM provider returning a canned strategy."""
    llm = MagicMock(spec=LLMProvider)
    llm.generate.return_value = "  UNITS I SHOULD USE:\n- Mustang ⭐⭐⭐\n"
    return llm


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of the developer's .env file."""
    monkeypatch.setattr(Config, "LLM_PROVIDER", "anthropic")
    monkeypatch.setattr(Config, "ANTHROPIC_API_KEY", "test-key")
    monkeypatch.setattr(Config, "STRATEGY_MAX_TOKENS", 2000)
    monkeypatch.setattr(Config, "UNITS_SOURCE", "")
    monkeypatch.setattr(Config, "UNIT_STATS_SOURCE", "")
    monkeypatch.setattr(Config, "STRATEGY_CORPUS_SOURCE", "")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    yield
    reset_game_data()
