"""
FastAPI application entry point for the StudyDeck service.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from studydeck.config import Settings, get_settings
from studydeck.db import DbClient
from studydeck.dependencies import build_db_client
from studydeck.errors import StorageError
from studydeck.routes import router

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(
        "Storage failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=500, content={"detail": "Storage operation failed"}
    )


def create_app(
    settings: Optional[Settings] = None, db: Optional[DbClient] = None
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="StudyDeck", version="0.1.0")
    app.state.db = db if db is not None else build_db_client(settings)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
