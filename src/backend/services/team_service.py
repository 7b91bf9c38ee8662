from __future__ import annotations

import datetime as dt
import logging

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from src.backend.api.schemas.teams import EloSeries
from src.backend.config import get_settings
from src.backend.db.repositories.teams_repository import (
    fetch_elo_history,
    fetch_league_teams,
    resolve_club_elo_name,
)

logger = logging.getLogger("pitchlens.teams")


def group_teams_by_league(rows: list[dict]) -> dict[str, list[dict]]:
    grouped: dict[str, list[dict]] = {}
    for row in rows:
        grouped.setdefault(row["league"], []).append(row)
    return grouped


def years_before(today: dt.date, years: int) -> dt.date:
    # Feb 29 rolls forward to Mar 1 when the target year has no leap day.
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return dt.date(today.year - years, 3, 1)


def elo_cutoff(today: dt.date | None = None) -> dt.date:
    today = today or dt.datetime.now(dt.timezone.utc).date()
    return years_before(today, get_settings().elo_history_years)


def list_teams_by_league(connection: Connection) -> dict[str, list[dict]]:
    return group_teams_by_league(fetch_league_teams(connection))


def get_elo_history(connection: Connection, *, name: str, today: dt.date | None = None) -> list[dict]:
    name = (name or "").strip()
    if not name:
        return []
    club_elo_name = resolve_club_elo_name(connection, fbref_team=name)
    return fetch_elo_history(connection, team=club_elo_name, since=elo_cutoff(today))


def parse_team_names(raw: str) -> list[str]:
    names = [entry.strip() for entry in (raw or "").split(",")]
    return list(dict.fromkeys(name for name in names if name))


def compare_elo_histories(connection: Connection, *, names: list[str], today: dt.date | None = None) -> list[dict]:
    series: list[dict] = []
    for name in names:
        try:
            data = get_elo_history(connection, name=name, today=today)
        except SQLAlchemyError:
            logger.exception("Failed to load ELO history", extra={"team": name})
            connection.rollback()
            continue
        series.append(EloSeries(team_name=name, data=data).model_dump(by_alias=True))
    return series
