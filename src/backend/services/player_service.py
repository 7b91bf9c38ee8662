from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.engine import Connection

from src.backend.api.schemas.players import (
    PlayerComparison,
    PlayerProfile,
    PlayerSearchResult,
    StatItem,
    TrendingPlayer,
)
from src.backend.config import get_settings
from src.backend.db.models import STATS_META_COLUMNS
from src.backend.db.repositories.players_repository import fetch_stat_rows, fetch_trending, search_outfield_players

PER_90_METRIC = "Per 90"
PERCENTILE_METRIC = "Percentile"
POSITIONS = ("FW", "AM", "MF", "CB", "FB", "GK")
UNKNOWN_POSITION = "Unknown"

_META_KEYS = frozenset(STATS_META_COLUMNS)


def build_player_profile(rows: list[dict], *, position: str) -> PlayerProfile | None:
    """Merge the "Per 90" and "Percentile" rows of one player into a keyed stat map.

    Returns None when fewer than two rows exist or the per-90 row is absent.
    A missing percentile row yields percentile 0 for every stat.
    """
    if len(rows) < 2:
        return None

    raw_row = next((row for row in rows if row.get("Metric") == PER_90_METRIC), None)
    pct_row = next((row for row in rows if row.get("Metric") == PERCENTILE_METRIC), None)
    if raw_row is None:
        return None

    stats: dict[str, StatItem] = {}
    for key, value in raw_row.items():
        if key in _META_KEYS or value is None:
            continue
        stats[key] = StatItem(value=value, percentile=pct_row.get(key) if pct_row else 0)

    return PlayerProfile(
        player_id=str(raw_row.get("player_id")),
        name=raw_row.get("name"),
        position=position,
        stats=stats,
    )


def get_player_profile(connection: Connection, *, player_id: str, position: str) -> dict | None:
    rows = fetch_stat_rows(connection, player_id=player_id, position=position)
    profile = build_player_profile(rows, position=position)
    return profile.model_dump() if profile else None


def search_players(connection: Connection, *, query: str, limit: int | None = None) -> list[dict]:
    if not query:
        return []
    limit = limit or get_settings().player_search_limit
    rows = search_outfield_players(connection, query=query, limit=limit)
    return [PlayerSearchResult(**row).model_dump() for row in rows]


def resolve_trending_position(row: dict) -> str:
    return row.get("gk_position") or row.get("outfield_position") or UNKNOWN_POSITION


def list_trending(connection: Connection) -> list[dict]:
    return [
        TrendingPlayer(
            id=str(row["id"]),
            player=row["player"],
            url=row.get("url"),
            position=resolve_trending_position(row),
        ).model_dump()
        for row in fetch_trending(connection)
    ]


def parse_compare_entries(raw: Iterable[str], *, max_players: int) -> list[tuple[str, str]]:
    """Parse ``id:POS`` tokens, accepting repeated and comma separated values.

    A player appears once; the first position given for an id wins.
    """
    entries: list[tuple[str, str]] = []
    seen: set[str] = set()
    for chunk in raw:
        for token in str(chunk or "").split(","):
            player_id, sep, position = token.strip().partition(":")
            player_id = player_id.strip()
            position = position.strip().upper()
            if not sep or not player_id or position not in POSITIONS:
                continue
            if player_id in seen:
                continue
            seen.add(player_id)
            entries.append((player_id, position))
    return entries[:max_players]


def build_radar_points(profiles: list[dict], *, max_stats: int) -> list[dict]:
    if not profiles:
        return []

    stat_keys = list(profiles[0]["stats"].keys())[:max_stats]
    points = []
    for key in stat_keys:
        point: dict[str, object] = {"subject": key, "fullMark": 100}
        for profile in profiles:
            stat = profile["stats"].get(key) or {}
            point[profile["name"]] = stat.get("percentile") or 0
            point[f"{profile['name']}_raw"] = stat.get("value")
        points.append(point)
    return points


def compare_players(connection: Connection, *, entries: list[tuple[str, str]]) -> dict:
    settings = get_settings()
    profiles: list[dict] = []
    missing: list[str] = []
    for player_id, position in entries:
        profile = get_player_profile(connection, player_id=player_id, position=position)
        if profile is None:
            missing.append(f"{player_id}:{position}")
            continue
        profiles.append(profile)

    return PlayerComparison(
        players=profiles,
        missing=missing,
        radar=build_radar_points(profiles, max_stats=settings.radar_max_stats),
    ).model_dump()
