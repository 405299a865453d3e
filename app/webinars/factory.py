"""
Webinars module factory.

Factory functions that wire the catalog service to its collaborators. They
double as FastAPI dependencies, so tests swap them through
app.dependency_overrides.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from loguru import logger

from app.webinars.protocols import WebinarRepository
from app.webinars.services.catalog import CatalogService
from app.webinars.services.repository import (
    InMemoryWebinarRepository,
    PostgresWebinarRepository,
)
from webinar_core.config import settings
from webinar_core.policy import Clock, SystemClock


@lru_cache()
def get_webinar_repository() -> WebinarRepository:
    """Get the content store configured by WEBINAR_STORE."""
    store = settings.WEBINAR_STORE.strip().lower()
    if store == "memory":
        logger.warning("Using in-memory webinar store; data is not persisted")
        return InMemoryWebinarRepository()
    if store != "postgres":
        raise ValueError(f"Unknown WEBINAR_STORE: {settings.WEBINAR_STORE!r}")
    return PostgresWebinarRepository()


@lru_cache()
def get_clock() -> Clock:
    """Get the clock used to evaluate webinars."""
    return SystemClock()


def get_catalog_service(
    repository: WebinarRepository = Depends(get_webinar_repository),
    clock: Clock = Depends(get_clock),
) -> CatalogService:
    """Get a catalog service bound to the configured store and clock."""
    return CatalogService(repository=repository, clock=clock)
