from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.backend.api.routes import health_router, players_router, search_router, teams_router, trending_router
from src.backend.api.schemas.common import fail
from src.backend.config import get_settings
from src.backend.db.repositories.bootstrap_repository import bootstrap_database
from src.backend.middleware import CacheHeadersMiddleware, RequestContextMiddleware

logger = logging.getLogger("pitchlens.api")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="PitchLens API",
        version="0.1.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(RequestContextMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_middleware(CacheHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id", "ETag"],
    )

    @app.on_event("startup")
    def on_startup() -> None:
        if settings.bootstrap_schema:
            bootstrap_database()
            logger.info("Database schema bootstrapped")

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        message = "; ".join([err.get("msg", "invalid input") for err in exc.errors()])
        return JSONResponse(
            status_code=422,
            content=fail(code="VALIDATION_ERROR", message=message, request_id=request_id),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(code="HTTP_ERROR", message=message, request_id=request_id),
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        logger.exception("Database error", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=fail(code="DATABASE_ERROR", message="Database query failed.", request_id=request_id),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", uuid.uuid4().hex)
        logger.exception("Unhandled API error", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=fail(code="INTERNAL_ERROR", message="Internal server error.", request_id=request_id),
        )

    app.include_router(health_router, prefix="/api")
    app.include_router(players_router, prefix="/api")
    app.include_router(teams_router, prefix="/api")
    app.include_router(trending_router, prefix="/api")
    app.include_router(search_router, prefix="/api")

    return app


app = create_app()
