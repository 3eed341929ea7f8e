"""Tests for asset loading."""

import asyncio
import json

import httpx
import pytest

from matchup_master.data import assets
from matchup_master.data.assets import (
    get_game_data,
    init_game_data,
    load_catalog,
    load_corpus,
    load_stat_table,
    read_text_asset,
)
from matchup_master.errors import DataFormatError


@pytest.fixture
def mock_http(monkeypatch):
    """Route httpx.AsyncClient through a mock transport serving fixed paths."""
    routes = {}
    real_client = httpx.AsyncClient

    def handler(request):
        if request.url.path in routes:
            return httpx.Response(200, text=routes[request.url.path])
        return httpx.Response(404, text="not found")

    monkeypatch.setattr(
        assets.httpx, "AsyncClient", lambda: real_client(transport=httpx.MockTransport(handler))
    )
    return routes


class TestLoadFromPath:
    """Tests for loading local assets."""

    def test_load_catalog(self, tmp_path, raw_catalog):
        path = tmp_path / "units.json"
        path.write_text(json.dumps(raw_catalog))

        catalog = asyncio.run(load_catalog(str(path)))

        assert len(catalog) == 6
        assert catalog.get("Wasp").countered_by == ("Mustang", "Phoenix")

    def test_invalid_json_is_data_format_error(self, tmp_path):
        path = tmp_path / "units.json"
        path.write_text("{not json")
        with pytest.raises(DataFormatError):
            asyncio.run(load_catalog(str(path)))

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            asyncio.run(load_stat_table(str(tmp_path / "missing.json")))

    def test_corpus_passthrough(self, tmp_path):
        path = tmp_path / "merged_strategies.txt"
        path.write_text("Mechabellum Guide\n{raw}", encoding="utf-8")
        assert asyncio.run(load_corpus(str(path))) == "Mechabellum Guide\n{raw}"

    def test_no_corpus_is_empty(self):
        assert asyncio.run(load_corpus("")) == ""


class TestBundledAssets:
    """Tests for the assets shipped with the package."""

    def test_bundled_catalog(self):
        catalog = asyncio.run(load_catalog())
        assert "Crawler" in catalog
        assert catalog.get("Crawler").countered_by[0] == "Arclight"

    def test_bundled_stats(self):
        assert len(asyncio.run(load_stat_table())) == 28


class TestLoadFromUrl:
    """Tests for fetching assets over http."""

    def test_fetch_stats(self, mock_http):
        mock_http["/unit_stats.json"] = json.dumps({"Fang": {"hp": 117, "damage": 61}})
        stats = asyncio.run(load_stat_table("https://assets.example/unit_stats.json"))
        assert stats.get("Fang").hp == 117

    def test_http_error_propagates(self, mock_http):
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(read_text_asset("https://assets.example/missing.txt"))


class TestInitGameData:
    """Tests for init_game_data and the module cache."""

    def test_caches_loaded_data(self, tmp_path):
        corpus = tmp_path / "corpus.txt"
        corpus.write_text("notes")

        data = asyncio.run(init_game_data(corpus_source=str(corpus)))

        assert get_game_data() is data
        assert data.corpus == "notes"
        assert len(data.stats) == 28

    def test_failed_load_leaves_cache_empty(self, tmp_path):
        bad = tmp_path / "stats.json"
        bad.write_text(json.dumps({"Crawler": {"hp": 0, "damage": 1}}))

        with pytest.raises(DataFormatError):
            asyncio.run(init_game_data(stats_source=str(bad)))
        assert get_game_data() is None
