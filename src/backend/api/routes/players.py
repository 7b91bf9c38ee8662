from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.engine import Connection

from src.backend.api.schemas.common import ok
from src.backend.config import get_settings
from src.backend.db.session import get_connection
from src.backend.services.player_service import (
    compare_players,
    get_player_profile,
    parse_compare_entries,
    search_players,
)

router = APIRouter(tags=["players"])


@router.get("/players")
def get_player(
    request: Request,
    id: str = "",
    position: str = "",
    connection: Connection = Depends(get_connection),
):
    _ = request.state.request_id
    if not id or not position:
        return ok({})
    payload = get_player_profile(connection, player_id=id, position=position)
    if payload is None:
        raise HTTPException(status_code=404, detail="Data not found")
    return ok(payload)


@router.get("/players/search")
def get_player_search(
    request: Request,
    query: str = "",
    connection: Connection = Depends(get_connection),
):
    _ = request.state.request_id
    return ok(search_players(connection, query=query))


@router.get("/players/compare")
def get_player_comparison(
    request: Request,
    players: list[str] = Query(default=[]),
    connection: Connection = Depends(get_connection),
):
    _ = request.state.request_id
    entries = parse_compare_entries(players, max_players=get_settings().compare_max_players)
    return ok(compare_players(connection, entries=entries))
