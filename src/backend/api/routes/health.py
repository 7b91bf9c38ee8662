from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Connection

from src.backend.api.schemas.common import ok
from src.backend.db.repositories.bootstrap_repository import fetch_health_summary
from src.backend.db.session import get_connection

router = APIRouter(tags=["health"])


@router.get("/health")
def get_health(request: Request, connection: Connection = Depends(get_connection)):
    _ = request.state.request_id
    return ok(fetch_health_summary(connection))
