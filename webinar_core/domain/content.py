"""
Content record model.

ContentItem is the scheduled webinar under evaluation. Items arrive from the
content store as rows; from_record() is the only place that turns a row into
an item, and validate() is what the policy facade runs before deciding.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from webinar_core.domain.exceptions import InvalidItemError


class AccessTier(str, Enum):
    """Who a webinar is meant for."""

    OPEN = "open"
    RESTRICTED = "restricted"


_ACCESS_ALIASES: dict[str, AccessTier] = {
    "open": AccessTier.OPEN,
    "public": AccessTier.OPEN,
    "restricted": AccessTier.RESTRICTED,
    "paid_only": AccessTier.RESTRICTED,
}


@dataclass(frozen=True)
class ContentItem:
    """A scheduled webinar.

    Phase is never stored here; it is always derived from scheduled_start
    and the caller's clock.
    """

    id: str
    scheduled_start: datetime | None
    duration_minutes: int
    access_tier: AccessTier
    media_ref: str | None = None
    title: str = ""
    description: str = ""
    speaker_name: str = ""
    created_by: str | None = None

    @property
    def ends_at(self) -> datetime | None:
        """Scheduled end of the session. Display only."""
        if self.scheduled_start is None:
            return None
        return self.scheduled_start + timedelta(minutes=self.duration_minutes)

    def validate(self) -> "ContentItem":
        """Check the invariants the policy engine relies on.

        Returns:
            self, so callers can chain.

        Raises:
            InvalidItemError: On a missing or naive start, a non-positive
                duration, or an unknown access tier.
        """
        if self.scheduled_start is None:
            raise InvalidItemError("scheduled_start is missing", self.id)
        if not isinstance(self.scheduled_start, datetime):
            raise InvalidItemError("scheduled_start is not a datetime", self.id)
        if self.scheduled_start.tzinfo is None:
            raise InvalidItemError("scheduled_start must be timezone-aware", self.id)
        if (
            isinstance(self.duration_minutes, bool)
            or not isinstance(self.duration_minutes, int)
            or self.duration_minutes <= 0
        ):
            raise InvalidItemError(
                f"duration_minutes must be a positive integer, got {self.duration_minutes!r}",
                self.id,
            )
        if not isinstance(self.access_tier, AccessTier):
            raise InvalidItemError(f"unknown access tier {self.access_tier!r}", self.id)
        return self

    @classmethod
    def from_record(cls, row: Mapping[str, Any]) -> "ContentItem":
        """Build a validated item from a content-store row.

        Args:
            row: Mapping with the webinars table columns (id, title,
                description, speaker_name, scheduled_date, duration_minutes,
                access_type, embed_url, created_by).

        Returns:
            A validated ContentItem.

        Raises:
            InvalidItemError: If a required column is missing or malformed.
        """
        item_id = row.get("id")
        if item_id is None:
            raise InvalidItemError("id is missing")
        item_id = str(item_id)

        access_value = row.get("access_type")
        access_tier = _ACCESS_ALIASES.get(str(access_value).strip().lower())
        if access_tier is None:
            raise InvalidItemError(f"unknown access_type {access_value!r}", item_id)

        duration = row.get("duration_minutes")
        try:
            whole = int(duration)
        except (TypeError, ValueError, OverflowError):
            raise InvalidItemError(f"duration_minutes is not an integer: {duration!r}", item_id) from None
        if isinstance(duration, (float, Decimal)) and whole != duration:
            raise InvalidItemError(f"duration_minutes is not a whole number: {duration!r}", item_id)
        duration = whole

        item = cls(
            id=item_id,
            scheduled_start=_parse_instant(row.get("scheduled_date"), item_id),
            duration_minutes=duration,
            access_tier=access_tier,
            media_ref=(row.get("embed_url") or "").strip() or None,
            title=row.get("title") or "",
            description=row.get("description") or "",
            speaker_name=row.get("speaker_name") or "",
            created_by=str(row["created_by"]) if row.get("created_by") else None,
        )
        return item.validate()


def _parse_instant(value: Any, item_id: str) -> datetime:
    """Parse a stored timestamp, treating naive values as UTC."""
    if value is None or value == "":
        raise InvalidItemError("scheduled_date is missing", item_id)

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            # Supabase-style "Z" suffix
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise InvalidItemError(f"scheduled_date is not ISO-8601: {value!r}", item_id) from None
    else:
        raise InvalidItemError(f"scheduled_date has unsupported type {type(value).__name__}", item_id)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
