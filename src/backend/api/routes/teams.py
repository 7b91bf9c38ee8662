from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Connection

from src.backend.api.schemas.common import ok
from src.backend.db.session import get_connection
from src.backend.services.team_service import (
    compare_elo_histories,
    get_elo_history,
    list_teams_by_league,
    parse_team_names,
)

router = APIRouter(tags=["teams"])


@router.get("/teams/all")
def get_all_teams(request: Request, connection: Connection = Depends(get_connection)):
    _ = request.state.request_id
    return ok(list_teams_by_league(connection))


@router.get("/teams/elo")
def get_team_elo(request: Request, name: str = "", connection: Connection = Depends(get_connection)):
    _ = request.state.request_id
    return ok(get_elo_history(connection, name=name))


@router.get("/teams/elo/compare")
def get_team_elo_comparison(request: Request, teams: str = "", connection: Connection = Depends(get_connection)):
    _ = request.state.request_id
    return ok(compare_elo_histories(connection, names=parse_team_names(teams)))
