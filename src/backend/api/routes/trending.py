from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Connection

from src.backend.api.schemas.common import ok
from src.backend.db.session import get_connection
from src.backend.services.player_service import list_trending

router = APIRouter(tags=["trending"])


@router.get("/trending")
def get_trending(request: Request, connection: Connection = Depends(get_connection)):
    _ = request.state.request_id
    return ok(list_trending(connection))
