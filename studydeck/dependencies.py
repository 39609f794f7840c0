"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from fastapi import Request

from studydeck.config import Settings
from studydeck.db import DbClient, InMemoryDbClient, PostgresDbClient

logger = logging.getLogger(__name__)


def build_db_client(settings: Settings) -> DbClient:
    """
    Pick the storage backend once, at startup.

    A configured DATABASE_URL selects Postgres for the life of the process;
    there is no fallback to memory if the database later becomes unreachable.
    """
    if settings.database_url:
        logger.info("Using relational storage backend")
        return PostgresDbClient(settings.database_url)
    logger.info("DATABASE_URL not set; using in-memory storage backend")
    return InMemoryDbClient()


def get_db_client(request: Request) -> DbClient:
    return request.app.state.db
