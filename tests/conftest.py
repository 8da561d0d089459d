"""Pytest fixtures: clean ODDSCAL_* env and settings cache per test; game file helpers."""

import json
import os
from pathlib import Path
from typing import Any, Callable, Generator

import pytest

from oddscal.config import get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop ODDSCAL_* env so tests see defaults; get_settings() is rebuilt per test."""
    for key in list(os.environ):
        if key.startswith("ODDSCAL_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def game(
    game_id: str,
    home_odds: float,
    away_odds: float,
    home_score: float,
    away_score: float,
    end_time: str | None = "2024-01-01T03:00:00Z",
) -> dict[str, Any]:
    """Wire-format game record."""
    return {
        "gameId": game_id,
        "endTime": end_time,
        "data": {
            "homeScore": home_score,
            "awayScore": away_score,
            "homeOdds": home_odds,
            "awayOdds": away_odds,
        },
    }


@pytest.fixture
def write_games(tmp_path: Path) -> Callable[[list[dict[str, Any]]], Path]:
    """Write {"data": games} to a temp file and return its path."""

    def _write(games: list[dict[str, Any]]) -> Path:
        path = tmp_path / "games.json"
        path.write_text(json.dumps({"data": games}), encoding="utf-8")
        return path

    return _write
