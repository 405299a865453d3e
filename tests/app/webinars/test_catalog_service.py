"""
Unit tests for CatalogService.

Uses the in-memory repository and a fixed clock so every listing is
evaluated at a known instant.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.webinars.services.catalog import CatalogService, PhaseFilter
from app.webinars.services.repository import InMemoryWebinarRepository
from webinar_core.domain.exceptions import (
    AccessDeniedError,
    InvalidItemError,
    WebinarNotFoundError,
)
from webinar_core.domain.viewer import Principal, Tier
from webinar_core.policy import FixedClock, Phase

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

HOST = Principal.host()
STANDARD = Principal.attendee(Tier.STANDARD)
PREMIUM = Principal.attendee(Tier.PREMIUM)


class TestBrowse:
    """Tests for listing webinars."""

    def test_anonymous_sees_only_open_webinars(self, catalog):
        ids = [e.item.id for e in catalog.browse(None)]

        assert ids == ["open-past", "open-next"]

    def test_premium_sees_restricted_webinars(self, catalog):
        ids = [e.item.id for e in catalog.browse(PREMIUM)]

        assert ids == ["paid-past", "open-past", "open-next", "paid-next"]

    def test_results_are_ordered_by_start(self, catalog):
        starts = [e.item.scheduled_start for e in catalog.browse(HOST)]

        assert starts == sorted(starts)

    def test_non_hosts_only_see_upcoming(self, catalog):
        phases = {e.decision.reported_phase for e in catalog.browse(PREMIUM)}

        assert phases == {Phase.UPCOMING}

    def test_host_sees_true_phases(self, catalog):
        phases = {e.item.id: e.decision.reported_phase for e in catalog.browse(HOST)}

        assert phases["open-past"] is Phase.PAST
        assert phases["open-next"] is Phase.UPCOMING

    def test_past_filter_is_empty_for_attendees(self, catalog):
        """Filtering on the reported phase never reveals expired webinars."""
        assert catalog.browse(STANDARD, phase_filter=PhaseFilter.PAST) == []

    def test_upcoming_filter_includes_disguised_webinars(self, catalog):
        ids = [e.item.id for e in catalog.browse(STANDARD, phase_filter=PhaseFilter.UPCOMING)]

        assert ids == ["open-past", "open-next"]

    def test_past_filter_for_host(self, catalog):
        ids = [e.item.id for e in catalog.browse(HOST, phase_filter=PhaseFilter.PAST)]

        assert ids == ["paid-past", "open-past"]

    @pytest.mark.parametrize("term", ["kubernetes", "KUBERNETES", "  Kubernetes "])
    def test_search_matches_title_case_insensitively(self, catalog, term):
        ids = [e.item.id for e in catalog.browse(HOST, search=term)]

        assert ids == ["open-next"]

    def test_search_matches_speaker_and_description(self, catalog):
        assert [e.item.id for e in catalog.browse(HOST, search="ada")] == ["paid-next"]
        assert [e.item.id for e in catalog.browse(HOST, search="budgeting")] == ["paid-past"]

    def test_blank_search_is_ignored(self, catalog):
        assert len(catalog.browse(HOST, search="   ")) == 4

    def test_clock_is_read_per_call(self, catalog, clock):
        """Decisions are never cached between calls."""
        before = {e.item.id: e.decision.can_play for e in catalog.browse(STANDARD)}
        clock.advance(timedelta(days=2))
        after = {e.item.id: e.decision.can_play for e in catalog.browse(STANDARD)}

        assert before["open-next"] is True
        assert after["open-next"] is False

    def test_invalid_row_propagates(self, repository, catalog):
        repository.add(_row("broken", NOW, duration_minutes=0))

        with pytest.raises(InvalidItemError):
            catalog.browse(HOST)


class TestDetail:
    """Tests for the detail lookup."""

    def test_returns_entry_with_decision(self, catalog):
        entry = catalog.detail(PREMIUM, "paid-next")

        assert entry.item.id == "paid-next"
        assert entry.decision.can_play is True

    def test_missing_webinar_raises_not_found(self, catalog):
        with pytest.raises(WebinarNotFoundError):
            catalog.detail(HOST, "nope")

    def test_unlisted_webinar_raises_access_denied(self, catalog):
        with pytest.raises(AccessDeniedError):
            catalog.detail(STANDARD, "paid-next")


class TestHostedBy:
    """Tests for the host dashboard."""

    def test_lists_only_own_webinars(self, catalog):
        ids = [e.item.id for e in catalog.hosted_by(HOST, "host-1")]

        assert ids == ["open-past", "open-next"]

    def test_attendee_is_denied(self, catalog):
        with pytest.raises(AccessDeniedError):
            catalog.hosted_by(PREMIUM, "host-1")

    def test_anonymous_is_denied(self, catalog):
        with pytest.raises(AccessDeniedError):
            catalog.hosted_by(None, None)


# --- Fixtures ---


def _row(item_id, start, access_type="public", created_by="host-1", **extra):
    row = {
        "id": item_id,
        "title": item_id.replace("-", " ").title(),
        "description": "",
        "speaker_name": "Sam Lee",
        "scheduled_date": start,
        "duration_minutes": 60,
        "access_type": access_type,
        "embed_url": "https://vimeo.com/1",
        "created_by": created_by,
    }
    row.update(extra)
    return row


@pytest.fixture
def repository():
    return InMemoryWebinarRepository(
        [
            _row("open-next", NOW + timedelta(days=1), title="Kubernetes for humans"),
            _row("open-past", NOW - timedelta(days=1)),
            _row(
                "paid-next",
                NOW + timedelta(days=7),
                access_type="paid_only",
                created_by="host-2",
                speaker_name="Ada Okafor",
            ),
            _row(
                "paid-past",
                NOW - timedelta(days=7),
                access_type="paid_only",
                created_by="host-2",
                description="Budgeting for SRE teams",
            ),
        ]
    )


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def catalog(repository, clock):
    return CatalogService(repository=repository, clock=clock)
