"""
Pydantic schemas for the webinars module.

The true phase of a webinar is never part of a response; viewers only get
the reported phase.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from webinar_core.domain.content import AccessTier
from webinar_core.policy import Phase, PlaybackStatus


class WebinarSummary(BaseModel):
    """A webinar card on the explore page or host dashboard."""

    id: str
    title: str
    description: str
    speaker_name: str
    scheduled_start: datetime
    ends_at: datetime
    duration_minutes: int
    access_tier: AccessTier
    reported_phase: Phase
    can_play: bool


class WebinarListResponse(BaseModel):
    """Response model for catalog listings."""

    items: list[WebinarSummary]
    total: int
    filter: str


class WebinarDetailResponse(WebinarSummary):
    """Response model for the webinar detail page."""

    can_list: bool
    playback_status: PlaybackStatus
    media_url: Optional[str] = None
