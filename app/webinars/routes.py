"""
Webinars module routes.

This module provides the read API behind the explore page, the webinar
detail page and the host dashboard. Every request resolves its viewer,
reads the clock once and asks the policy engine fresh.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from app.webinars.factory import get_catalog_service
from app.webinars.schemas import (
    WebinarDetailResponse,
    WebinarListResponse,
    WebinarSummary,
)
from app.webinars.services.catalog import CatalogEntry, CatalogService, PhaseFilter
from webinar_core.auth.dependencies import get_principal, require_host
from webinar_core.domain.exceptions import (
    AccessDeniedError,
    InvalidItemError,
    WebinarNotFoundError,
)
from webinar_core.domain.viewer import Principal, ViewerContext
from webinar_core.media import to_embed_url
from webinar_core.policy import PlaybackStatus, playback_status

router = APIRouter(prefix="/webinars", tags=["webinars"])


def _summary(entry: CatalogEntry) -> WebinarSummary:
    item, decision = entry.item, entry.decision
    return WebinarSummary(
        id=item.id,
        title=item.title,
        description=item.description,
        speaker_name=item.speaker_name,
        scheduled_start=item.scheduled_start,
        ends_at=item.ends_at,
        duration_minutes=item.duration_minutes,
        access_tier=item.access_tier,
        reported_phase=decision.reported_phase,
        can_play=decision.can_play,
    )


def _integrity_error(e: InvalidItemError) -> HTTPException:
    logger.error(f"Content store returned an invalid webinar: {e}")
    return HTTPException(status_code=500, detail="Webinar record failed validation")


@router.get("", response_model=WebinarListResponse, summary="Browse webinars")
async def list_webinars(
    search: str | None = Query(None, description="Match title, description or speaker"),
    phase: PhaseFilter = Query(PhaseFilter.ALL, alias="filter", description="all, upcoming or past"),
    principal: Principal | None = Depends(get_principal),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """List the webinars the current viewer may see."""
    try:
        entries = catalog.browse(principal, search=search, phase_filter=phase)
    except InvalidItemError as e:
        raise _integrity_error(e)

    return WebinarListResponse(
        items=[_summary(entry) for entry in entries],
        total=len(entries),
        filter=phase.value,
    )


@router.get("/mine", response_model=WebinarListResponse, summary="Host dashboard")
async def list_my_webinars(
    viewer: ViewerContext = Depends(require_host),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """List the webinars created by the signed-in host."""
    try:
        entries = catalog.hosted_by(viewer.principal, viewer.user_id)
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except InvalidItemError as e:
        raise _integrity_error(e)

    return WebinarListResponse(
        items=[_summary(entry) for entry in entries],
        total=len(entries),
        filter=PhaseFilter.ALL.value,
    )


@router.get("/{item_id}", response_model=WebinarDetailResponse, summary="Webinar detail")
async def get_webinar(
    item_id: str,
    principal: Principal | None = Depends(get_principal),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Get one webinar with the player state for the current viewer."""
    try:
        entry = catalog.detail(principal, item_id)
    except WebinarNotFoundError:
        raise HTTPException(status_code=404, detail="Webinar not found")
    except AccessDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except InvalidItemError as e:
        raise _integrity_error(e)

    status = playback_status(entry.decision, entry.item)
    media_url = None
    if status is PlaybackStatus.AVAILABLE:
        media_url = to_embed_url(entry.item.media_ref)

    return WebinarDetailResponse(
        **_summary(entry).model_dump(),
        can_list=entry.decision.can_list,
        playback_status=status,
        media_url=media_url,
    )
