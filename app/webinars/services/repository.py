"""
Webinar repositories: read access to the content store.

PostgresWebinarRepository reads the webinars table; InMemoryWebinarRepository
holds rows in a dict for local runs and tests. Both hand every row to
ContentItem.from_record(), so malformed rows surface as InvalidItemError.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from webinar_core.domain.content import ContentItem
from webinar_core.domain.exceptions import InvalidItemError
from webinar_core.infrastructure.postgres import get_db_connection

_COLUMNS = """
    id, title, description, speaker_name, scheduled_date,
    duration_minutes, access_type, embed_url, created_by
"""


class PostgresWebinarRepository:
    """Repository for webinar records in PostgreSQL."""

    def get_by_id(self, item_id: str) -> ContentItem | None:
        """Get webinar by ID."""
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_COLUMNS} FROM webinars WHERE id = %s",
                (item_id,),
            )
            row = cursor.fetchone()

        if not row:
            return None
        return ContentItem.from_record(row)

    def list_all(self) -> list[ContentItem]:
        """List all webinars ordered by scheduled_date."""
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_COLUMNS} FROM webinars ORDER BY scheduled_date ASC"
            )
            rows = cursor.fetchall()

        logger.debug(f"Loaded {len(rows)} webinars")
        return [ContentItem.from_record(row) for row in rows]

    def list_by_creator(self, user_id: str) -> list[ContentItem]:
        """List webinars created by a host, ordered by scheduled_date."""
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_COLUMNS} FROM webinars WHERE created_by = %s ORDER BY scheduled_date ASC",
                (user_id,),
            )
            rows = cursor.fetchall()

        return [ContentItem.from_record(row) for row in rows]


class InMemoryWebinarRepository:
    """Dict-backed repository. Rows use the same columns as the webinars table."""

    def __init__(self, rows: Iterable[Mapping[str, Any]] = ()):
        self._rows: dict[str, Mapping[str, Any]] = {}
        for row in rows:
            self.add(row)

    def add(self, row: Mapping[str, Any]) -> None:
        item_id = row.get("id")
        if item_id is None:
            raise InvalidItemError("id is missing")
        self._rows[str(item_id)] = dict(row)

    def get_by_id(self, item_id: str) -> ContentItem | None:
        row = self._rows.get(item_id)
        if row is None:
            return None
        return ContentItem.from_record(row)

    def list_all(self) -> list[ContentItem]:
        return _by_start(ContentItem.from_record(row) for row in self._rows.values())

    def list_by_creator(self, user_id: str) -> list[ContentItem]:
        return _by_start(
            ContentItem.from_record(row)
            for row in self._rows.values()
            if str(row.get("created_by")) == user_id
        )


def _by_start(items: Iterable[ContentItem]) -> list[ContentItem]:
    return sorted(items, key=lambda item: item.scheduled_start)
