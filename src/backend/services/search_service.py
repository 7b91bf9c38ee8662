from __future__ import annotations

import logging
from urllib.parse import quote

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from src.backend.api.schemas.search import GlobalSearchResult
from src.backend.config import get_settings
from src.backend.db.repositories.players_repository import search_outfield_players
from src.backend.db.repositories.teams_repository import search_teams

logger = logging.getLogger("pitchlens.search")

DEFAULT_PLAYER_POSITION = "FW"

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def format_team_result(row: dict) -> dict:
    team = str(row["team"])
    return GlobalSearchResult(
        type="team",
        label=team,
        sub_label="Team",
        url=f"/teams?teams={encode_uri_component(team)}",
        icon="shield",
    ).model_dump(by_alias=True)


def format_player_result(row: dict) -> dict:
    positions = list(dict.fromkeys(row.get("position") or []))
    primary = positions[0] if positions else DEFAULT_PLAYER_POSITION
    return GlobalSearchResult(
        type="player",
        label=str(row["player"]),
        sub_label=", ".join(positions),
        url=f"/players?id={row['id']}&position={primary}&player={encode_uri_component(row['player'])}",
        icon="user",
    ).model_dump(by_alias=True)


def _run_lookup(connection: Connection, label: str, lookup, **kwargs) -> list[dict]:
    try:
        return lookup(connection, **kwargs)
    except SQLAlchemyError:
        logger.exception("%s search failed", label)
        connection.rollback()
        return []


def global_search(connection: Connection, *, query: str) -> list[dict]:
    settings = get_settings()
    if not query or len(query) < settings.global_search_min_length:
        return []

    teams = _run_lookup(connection, "Team", search_teams, query=query, limit=settings.global_search_team_limit)
    players = _run_lookup(
        connection,
        "Player",
        search_outfield_players,
        query=query,
        limit=settings.global_search_player_limit,
    )
    return [*map(format_team_result, teams), *map(format_player_result, players)]
