"""
CatalogService: what a viewer sees when browsing webinars.

Combines the content store with the policy engine. Every call reads the
clock once and evaluates each webinar against that single instant; nothing
here caches decisions between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from app.webinars.protocols import WebinarRepository
from webinar_core.domain.content import ContentItem
from webinar_core.domain.exceptions import AccessDeniedError, WebinarNotFoundError
from webinar_core.domain.viewer import Principal
from webinar_core.policy import Clock, Phase, PolicyDecision, PolicyEngine


class PhaseFilter(str, Enum):
    """Listing filter offered on the explore page."""

    ALL = "all"
    UPCOMING = "upcoming"
    PAST = "past"


@dataclass(frozen=True)
class CatalogEntry:
    """A webinar together with the decision made for the current viewer."""

    item: ContentItem
    decision: PolicyDecision


class CatalogService:
    """
    Read-side service for the webinar catalog.

    Listing rules:
    - webinars the viewer may not list are left out entirely
    - the phase filter matches the *reported* phase, so a non-host asking
      for past webinars always gets an empty page
    - search is a case-insensitive match on title, description and speaker
    """

    def __init__(self, repository: WebinarRepository, clock: Clock):
        self.repository = repository
        self.engine = PolicyEngine(clock)

    def browse(
        self,
        principal: Principal | None,
        search: str | None = None,
        phase_filter: PhaseFilter = PhaseFilter.ALL,
    ) -> list[CatalogEntry]:
        """
        List the webinars visible to a viewer.

        Args:
            principal: The acting viewer, None when anonymous.
            search: Optional free-text search term.
            phase_filter: Restrict to reported upcoming or past webinars.

        Returns:
            Visible entries ordered by scheduled start.
        """
        items = self.repository.list_all()
        if search and search.strip():
            items = [item for item in items if _matches(item, search)]

        entries = [
            CatalogEntry(item=item, decision=decision)
            for item, decision in self.engine.decide_many(principal, items)
            if decision.can_list
        ]

        if phase_filter is not PhaseFilter.ALL:
            wanted = Phase(phase_filter.value)
            entries = [e for e in entries if e.decision.reported_phase is wanted]

        logger.debug(
            f"Catalog browse: role={_role(principal)} search={search!r} "
            f"filter={phase_filter.value} visible={len(entries)}/{len(items)}"
        )
        return entries

    def detail(self, principal: Principal | None, item_id: str) -> CatalogEntry:
        """
        Get one webinar for the detail page.

        Raises:
            WebinarNotFoundError: If the webinar does not exist.
            AccessDeniedError: If the viewer may not list it.
        """
        item = self.repository.get_by_id(item_id)
        if item is None:
            raise WebinarNotFoundError(item_id)

        decision = self.engine.decide(principal, item)
        if not decision.can_list:
            logger.info(f"Detail denied: webinar={item_id} role={_role(principal)}")
            raise AccessDeniedError(f"Webinar {item_id} requires premium access")

        return CatalogEntry(item=item, decision=decision)

    def hosted_by(self, principal: Principal | None, user_id: str | None) -> list[CatalogEntry]:
        """
        List the webinars a host created, for the host dashboard.

        Raises:
            AccessDeniedError: If the viewer is not a host.
        """
        if principal is None or not principal.is_host or not user_id:
            raise AccessDeniedError("Only hosts have a webinar dashboard")

        items = self.repository.list_by_creator(user_id)
        return [
            CatalogEntry(item=item, decision=decision)
            for item, decision in self.engine.decide_many(principal, items)
        ]


def _matches(item: ContentItem, search: str) -> bool:
    term = search.strip().lower()
    return any(
        term in field.lower()
        for field in (item.title, item.description, item.speaker_name)
    )


def _role(principal: Principal | None) -> str:
    return principal.role.value if principal else "anonymous"
