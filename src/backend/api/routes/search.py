from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Connection

from src.backend.api.schemas.common import ok
from src.backend.db.session import get_connection
from src.backend.services.search_service import global_search

router = APIRouter(tags=["search"])


@router.get("/global-search")
def get_global_search(request: Request, query: str = "", connection: Connection = Depends(get_connection)):
    _ = request.state.request_id
    return ok(global_search(connection, query=query))
