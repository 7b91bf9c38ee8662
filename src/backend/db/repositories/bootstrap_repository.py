from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.backend.db.engine import get_engine
from src.backend.db.models import metadata

HEALTH_TABLES = (
    "league_team",
    "team_alias",
    "elo",
    "player_scouting",
    "stats_outfield",
    "stats_gk",
    "trending",
)


def bootstrap_database() -> None:
    metadata.create_all(get_engine())


def fetch_health_summary(connection: Connection) -> dict:
    counts: dict[str, int] = {}
    for table in HEALTH_TABLES:
        row = connection.execute(text(f"SELECT COUNT(*) AS total FROM {table}")).mappings().first()
        counts[table] = int(row["total"] if row else 0)

    return {
        "dialect": connection.dialect.name,
        "tables": counts,
        "players": counts["player_scouting"],
        "teams": counts["league_team"],
        "elo_rows": counts["elo"],
    }
