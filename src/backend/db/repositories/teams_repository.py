from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, bindparam, text
from sqlalchemy.engine import Connection


def fetch_league_teams(connection: Connection) -> list[dict]:
    rows = connection.execute(text("SELECT * FROM league_team ORDER BY id ASC")).mappings().all()
    return [dict(row) for row in rows]


def search_teams(connection: Connection, *, query: str, limit: int) -> list[dict]:
    query = (query or "").strip()
    if not query:
        return []
    rows = connection.execute(
        text(
            """
            SELECT team
            FROM league_team
            WHERE LOWER(team) LIKE LOWER(:wild)
            ORDER BY id ASC
            LIMIT :limit
            """
        ),
        {"wild": f"%{query}%", "limit": limit},
    ).mappings().all()
    return [dict(row) for row in rows]


def resolve_club_elo_name(connection: Connection, *, fbref_team: str) -> str:
    row = connection.execute(
        text("SELECT club_elo_team FROM team_alias WHERE fbref_team = :fbref_team"),
        {"fbref_team": fbref_team},
    ).mappings().first()
    if row and row["club_elo_team"]:
        return str(row["club_elo_team"])
    return fbref_team


def fetch_elo_history(connection: Connection, *, team: str, since: dt.date) -> list[dict]:
    statement = text(
        """
        SELECT e.id, e.team, e.country, e.level, e.elo, e."from", e."to"
        FROM elo e
        WHERE e.team = :team
          AND e."from" >= :since
        ORDER BY e."from" ASC
        """
    ).bindparams(bindparam("since", type_=Date))
    rows = connection.execute(statement, {"team": team, "since": since}).mappings().all()
    return [dict(row) for row in rows]
