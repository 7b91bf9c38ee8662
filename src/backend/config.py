from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    app_env: str
    database_url: str
    bootstrap_schema: bool
    cors_allow_origins: list[str]
    request_timeout_seconds: int
    api_cache_players_seconds: int
    api_cache_search_seconds: int
    api_cache_teams_seconds: int
    api_cache_elo_seconds: int
    elo_history_years: int
    player_search_limit: int
    global_search_min_length: int
    global_search_team_limit: int
    global_search_player_limit: int
    compare_max_players: int
    radar_max_stats: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    env = os.getenv("PITCHLENS_APP_ENV", "development").strip().lower()
    default_db = PROJECT_ROOT / "data" / "pitchlens.db"
    database_url = os.getenv("PITCHLENS_DATABASE_URL", "").strip() or f"sqlite+pysqlite:///{default_db}"
    cors_raw = os.getenv("PITCHLENS_CORS_ALLOW_ORIGINS", "http://localhost:3000")
    origins = [entry.strip() for entry in cors_raw.split(",") if entry.strip()]
    if not origins:
        origins = ["http://localhost:3000"]

    return Settings(
        app_env=env,
        database_url=database_url,
        bootstrap_schema=_to_bool(
            os.getenv("PITCHLENS_BOOTSTRAP_SCHEMA"),
            default=database_url.startswith("sqlite"),
        ),
        cors_allow_origins=origins,
        request_timeout_seconds=int(os.getenv("PITCHLENS_REQUEST_TIMEOUT_SECONDS", "30")),
        api_cache_players_seconds=int(os.getenv("PITCHLENS_API_CACHE_PLAYERS_SECONDS", "60")),
        api_cache_search_seconds=int(os.getenv("PITCHLENS_API_CACHE_SEARCH_SECONDS", "30")),
        api_cache_teams_seconds=int(os.getenv("PITCHLENS_API_CACHE_TEAMS_SECONDS", "3600")),
        api_cache_elo_seconds=int(os.getenv("PITCHLENS_API_CACHE_ELO_SECONDS", "600")),
        elo_history_years=int(os.getenv("PITCHLENS_ELO_HISTORY_YEARS", "5")),
        player_search_limit=int(os.getenv("PITCHLENS_PLAYER_SEARCH_LIMIT", "25")),
        global_search_min_length=int(os.getenv("PITCHLENS_GLOBAL_SEARCH_MIN_LENGTH", "2")),
        global_search_team_limit=int(os.getenv("PITCHLENS_GLOBAL_SEARCH_TEAM_LIMIT", "3")),
        global_search_player_limit=int(os.getenv("PITCHLENS_GLOBAL_SEARCH_PLAYER_LIMIT", "5")),
        compare_max_players=int(os.getenv("PITCHLENS_COMPARE_MAX_PLAYERS", "5")),
        radar_max_stats=int(os.getenv("PITCHLENS_RADAR_MAX_STATS", "8")),
    )


def reset_settings_cache() -> None:
    get_settings.cache_clear()
