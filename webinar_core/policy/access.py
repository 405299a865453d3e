"""
Access policy.

Decides whether a viewer may list a webinar and whether they may play its
media. Rules are checked in order and the first match wins:

1. Hosts may list and play everything.
2. Open webinars are listable by anyone; playback needs a signed-in viewer.
3. Restricted webinars need a premium attendee for both listing and playback.
4. Attendees can only play webinars whose true phase is still UPCOMING.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from webinar_core.domain.content import AccessTier, ContentItem
from webinar_core.domain.viewer import Principal
from webinar_core.policy.temporal import Phase, classify


@dataclass(frozen=True)
class AccessDecision:
    """Listing and playback permissions for one viewer and one webinar."""

    can_list: bool
    can_play: bool


_DENIED = AccessDecision(can_list=False, can_play=False)


def evaluate(principal: Principal | None, item: ContentItem, now: datetime) -> AccessDecision:
    """Evaluate listing and playback permissions.

    The item is assumed to be validated; see ContentItem.validate().

    Args:
        principal: The resolved viewer, or None when anonymous.
        item: The webinar under evaluation.
        now: Evaluation instant.

    Returns:
        AccessDecision with the two permission flags.
    """
    if principal is not None and principal.is_host:
        return AccessDecision(can_list=True, can_play=True)

    if item.access_tier is AccessTier.OPEN:
        entitled = principal is not None
        return AccessDecision(
            can_list=True,
            can_play=entitled and _still_playable(item, now),
        )

    # Restricted
    if principal is None or not principal.is_premium:
        return _DENIED
    return AccessDecision(can_list=True, can_play=_still_playable(item, now))


def _still_playable(item: ContentItem, now: datetime) -> bool:
    # Past sessions expire for attendees
    return classify(item.scheduled_start, now) is not Phase.PAST
