from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

SALAH = "e342ad68"
HAALAND = "1f44ac21"
ALISSON = "7a2e46a8"
SAKA = "bc7dc64d"
PARTIAL = "0d9b2d31"
GHOST = "ffffffff"


def _insert_stats(connection, table: str, player_id: str, name: str, position: str, metric: str, **stats) -> None:
    columns = ["player_id", "name", "position", '"Metric"', *stats.keys()]
    params = {"player_id": player_id, "name": name, "position": position, "metric": metric, **stats}
    values = [":player_id", ":name", ":position", ":metric", *[f":{key}" for key in stats]]
    connection.execute(
        text(f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({', '.join(values)})"),
        params,
    )


def insert_outfield_player(connection, player_id: str, name: str, position: str = "FW") -> None:
    connection.execute(
        text("INSERT INTO player_scouting (id, player, url) VALUES (:id, :player, NULL)"),
        {"id": player_id, "player": name},
    )
    _insert_stats(connection, "stats_outfield", player_id, name, position, "Per 90", assists=0.2)
    _insert_stats(connection, "stats_outfield", player_id, name, position, "Percentile", assists=60)


def _seed(connection) -> None:
    today = dt.date.today()
    connection.execute(
        text("INSERT INTO player_scouting (id, player, url) VALUES (:id, :player, :url)"),
        [
            {"id": SALAH, "player": "Mohamed Salah", "url": "https://img.example/salah.png"},
            {"id": HAALAND, "player": "Erling Haaland", "url": "https://img.example/haaland.png"},
            {"id": ALISSON, "player": "Alisson", "url": "https://img.example/alisson.png"},
            {"id": SAKA, "player": "Bukayo Saka", "url": None},
            {"id": PARTIAL, "player": "Partial Player", "url": None},
        ],
    )

    _insert_stats(connection, "stats_outfield", SALAH, "Mohamed Salah", "FW", "Per 90", non_penalty_goals=0.55, npxg=0.5, assists=0.3)
    _insert_stats(connection, "stats_outfield", SALAH, "Mohamed Salah", "FW", "Percentile", non_penalty_goals=97, npxg=95, assists=90)
    _insert_stats(connection, "stats_outfield", SALAH, "Mohamed Salah", "AM", "Per 90", non_penalty_goals=0.5, successful_take_ons=1.8)
    _insert_stats(connection, "stats_outfield", SALAH, "Mohamed Salah", "AM", "Percentile", non_penalty_goals=99, successful_take_ons=80)
    _insert_stats(connection, "stats_outfield", HAALAND, "Erling Haaland", "FW", "Per 90", non_penalty_goals=0.9, npxg=0.8, assists=0.1)
    _insert_stats(connection, "stats_outfield", HAALAND, "Erling Haaland", "FW", "Percentile", non_penalty_goals=99, npxg=99, assists=40)
    _insert_stats(connection, "stats_outfield", SAKA, "Bukayo Saka", "AM", "Per 90", non_penalty_goals=0.35, assists=0.4)
    _insert_stats(connection, "stats_outfield", SAKA, "Bukayo Saka", "AM", "Percentile", non_penalty_goals=85, assists=96)
    _insert_stats(connection, "stats_outfield", PARTIAL, "Partial Player", "MF", "Per 90", tackles=2.1)
    _insert_stats(connection, "stats_gk", ALISSON, "Alisson", "GK", "Per 90", save_pct=72.5, psxg_minus_ga=0.1)
    _insert_stats(connection, "stats_gk", ALISSON, "Alisson", "GK", "Percentile", save_pct=88, psxg_minus_ga=70)

    connection.execute(
        text("INSERT INTO league_team (id, league, team) VALUES (:id, :league, :team)"),
        [
            {"id": 1, "league": "Premier League", "team": "Liverpool"},
            {"id": 2, "league": "Premier League", "team": "Manchester City"},
            {"id": 3, "league": "La Liga", "team": "Real Madrid"},
            {"id": 4, "league": "Premier League", "team": "Arsenal"},
            {"id": 5, "league": "La Liga", "team": "Barcelona"},
        ],
    )
    connection.execute(
        text("INSERT INTO team_alias (fbref_team, club_elo_team) VALUES (:fbref_team, :club_elo_team)"),
        [
            {"fbref_team": "Manchester City", "club_elo_team": "Man City"},
            {"fbref_team": "Real Madrid", "club_elo_team": None},
        ],
    )
    connection.execute(
        text('INSERT INTO elo (team, country, level, elo, "from", "to") VALUES (:team, :country, :level, :elo, :start, :end)'),
        [
            {"team": "Liverpool", "country": "ENG", "level": 1, "elo": 1850.0, "start": "2015-01-01", "end": "2015-01-08"},
            {
                "team": "Liverpool",
                "country": "ENG",
                "level": 1,
                "elo": 2010.5,
                "start": (today - dt.timedelta(days=30)).isoformat(),
                "end": (today - dt.timedelta(days=23)).isoformat(),
            },
            {
                "team": "Liverpool",
                "country": "ENG",
                "level": 1,
                "elo": 1990.0,
                "start": (today - dt.timedelta(days=400)).isoformat(),
                "end": (today - dt.timedelta(days=393)).isoformat(),
            },
            {
                "team": "Man City",
                "country": "ENG",
                "level": 1,
                "elo": 2040.0,
                "start": (today - dt.timedelta(days=10)).isoformat(),
                "end": None,
            },
            {
                "team": "Real Madrid",
                "country": "ESP",
                "level": 1,
                "elo": 1995.0,
                "start": (today - dt.timedelta(days=5)).isoformat(),
                "end": None,
            },
        ],
    )
    connection.execute(
        text("INSERT INTO trending (id, player, url) VALUES (:id, :player, :url)"),
        [
            {"id": SALAH, "player": "Mohamed Salah", "url": "https://img.example/salah.png"},
            {"id": ALISSON, "player": "Alisson", "url": "https://img.example/alisson.png"},
            {"id": GHOST, "player": "Ghost Player", "url": None},
        ],
    )


@pytest.fixture()
def app_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PITCHLENS_DATABASE_URL", f"sqlite+pysqlite:///{tmp_path / 'pitchlens-test.db'}")
    monkeypatch.setenv("PITCHLENS_BOOTSTRAP_SCHEMA", "1")

    import src.backend.config as config
    import src.backend.db.engine as db_engine

    config.reset_settings_cache()
    db_engine.reset_engine_cache()

    from src.backend.db.session import db_transaction
    from src.backend.main import create_app

    app = create_app()

    with TestClient(app) as client:
        with db_transaction() as connection:
            _seed(connection)
        yield client

    db_engine.get_engine().dispose()
    db_engine.reset_engine_cache()
    config.reset_settings_cache()
