"""
Policy facade.

Composes the temporal classifier, the access policy and the visibility
presenter into the one decision a view needs for a (viewer, webinar, now)
triple. Decisions are recomputed on every request and never cached: the
clock moves and viewers sign in and out between requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from webinar_core.domain.content import ContentItem
from webinar_core.domain.exceptions import InvalidItemError
from webinar_core.domain.viewer import Principal
from webinar_core.policy.access import evaluate
from webinar_core.policy.clock import Clock
from webinar_core.policy.presenter import present
from webinar_core.policy.temporal import Phase, classify


@dataclass(frozen=True)
class PolicyDecision:
    """Everything a listing or detail view needs to know about one webinar."""

    can_list: bool
    can_play: bool
    reported_phase: Phase


class PlaybackStatus(str, Enum):
    """What the detail view shows in place of the player."""

    AVAILABLE = "available"
    NO_MEDIA = "no_media"
    NOT_YET_AVAILABLE = "not_yet_available"
    RESTRICTED = "restricted"


def decide(principal: Principal | None, item: ContentItem | None, now: datetime) -> PolicyDecision:
    """Decide listing, playback and reported phase for one viewer and webinar.

    Args:
        principal: The resolved viewer, or None when anonymous.
        item: The webinar under evaluation.
        now: Evaluation instant, timezone-aware.

    Returns:
        PolicyDecision for this triple.

    Raises:
        InvalidItemError: If the item is missing or malformed. Raised before
            any phase or permission is computed.
        ValueError: If now is naive.
    """
    if item is None:
        raise InvalidItemError("no content item supplied")
    item.validate()
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    true_phase = classify(item.scheduled_start, now)
    access = evaluate(principal, item, now)
    return PolicyDecision(
        can_list=access.can_list,
        can_play=access.can_play,
        reported_phase=present(true_phase, principal),
    )


def playback_status(decision: PolicyDecision, item: ContentItem) -> PlaybackStatus:
    """Map a decision onto the player placeholder shown on the detail page."""
    if not decision.can_list:
        return PlaybackStatus.RESTRICTED
    if not decision.can_play:
        return PlaybackStatus.NOT_YET_AVAILABLE
    if not item.media_ref:
        return PlaybackStatus.NO_MEDIA
    return PlaybackStatus.AVAILABLE


class PolicyEngine:
    """decide() bound to a clock, reading now once per call."""

    def __init__(self, clock: Clock):
        self.clock = clock

    def decide(self, principal: Principal | None, item: ContentItem | None) -> PolicyDecision:
        return decide(principal, item, self.clock.now())

    def decide_many(
        self, principal: Principal | None, items: list[ContentItem]
    ) -> list[tuple[ContentItem, PolicyDecision]]:
        """Decide a whole listing against a single reading of the clock."""
        now = self.clock.now()
        return [(item, decide(principal, item, now)) for item in items]
