from __future__ import annotations

import asyncio
import hashlib
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .api.schemas.common import fail
from .config import get_settings


class RequestContextMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, timeout_seconds: int) -> None:
        super().__init__(app)
        self._timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex
        request.state.request_id = request_id
        try:
            response = await asyncio.wait_for(call_next(request), timeout=self._timeout_seconds)
        except asyncio.TimeoutError:
            payload = fail(
                code="REQUEST_TIMEOUT",
                message="Request timed out.",
                request_id=request_id,
            )
            return JSONResponse(status_code=504, content=payload, headers={"X-Request-Id": request_id})

        response.headers["X-Request-Id"] = request_id
        return response


class CacheHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app) -> None:
        super().__init__(app)
        self._settings = get_settings()

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        method = request.method.upper()
        path = request.url.path

        if method not in {"GET", "HEAD"}:
            response.headers.setdefault("Cache-Control", "no-store")
            return response

        self._apply_cache_control(path, response)
        if path.startswith("/api/health"):
            return response
        return await self._apply_json_etag(request, response)

    def _apply_cache_control(self, path: str, response: Response) -> None:
        if response.headers.get("Cache-Control"):
            return
        if response.status_code >= 400 or path.startswith("/api/health"):
            response.headers["Cache-Control"] = "no-store"
            return
        if path.startswith("/api/teams/elo"):
            response.headers["Cache-Control"] = (
                f"public, max-age={self._settings.api_cache_elo_seconds}, stale-while-revalidate=300"
            )
            return
        if path.startswith("/api/teams"):
            response.headers["Cache-Control"] = (
                f"public, max-age={self._settings.api_cache_teams_seconds}, stale-while-revalidate=600"
            )
            return
        if path.startswith("/api/players/search") or path.startswith("/api/global-search"):
            response.headers["Cache-Control"] = (
                f"public, max-age={self._settings.api_cache_search_seconds}, stale-while-revalidate=60"
            )
            return
        if path.startswith("/api/players") or path.startswith("/api/trending"):
            response.headers["Cache-Control"] = (
                f"public, max-age={self._settings.api_cache_players_seconds}, stale-while-revalidate=120"
            )
            return
        response.headers["Cache-Control"] = "no-store"

    async def _apply_json_etag(self, request: Request, response: Response) -> Response:
        if response.status_code != 200:
            return response
        if response.headers.get("ETag"):
            return response
        if "application/json" not in response.headers.get("content-type", ""):
            return response

        # call_next hands back a streaming response; buffer it to hash the payload.
        body = b"".join([chunk async for chunk in response.body_iterator])
        headers = dict(response.headers)
        etag = f'W/"{hashlib.sha1(body).hexdigest()}"'
        headers["ETag"] = etag

        if request.headers.get("If-None-Match", "") == etag:
            headers.pop("content-type", None)
            headers.pop("content-length", None)
            return Response(status_code=304, headers=headers)
        return Response(content=body, status_code=response.status_code, headers=headers)
