"""Unit tests for clocks."""

from datetime import datetime, timedelta, timezone

import pytest

from webinar_core.policy.clock import FixedClock, SystemClock


class TestSystemClock:
    """Tests for SystemClock."""

    def test_now_is_timezone_aware(self):
        """System time is reported in UTC."""
        now = SystemClock().now()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)


class TestFixedClock:
    """Tests for FixedClock."""

    def test_returns_pinned_instant(self):
        """now() always returns the configured instant."""
        instant = datetime(2025, 1, 1, tzinfo=timezone.utc)
        clock = FixedClock(instant)

        assert clock.now() == instant
        assert clock.now() == instant

    def test_advance_moves_forward(self):
        """advance() shifts the pinned instant."""
        instant = datetime(2025, 1, 1, tzinfo=timezone.utc)
        clock = FixedClock(instant)

        clock.advance(timedelta(hours=1))

        assert clock.now() == instant + timedelta(hours=1)

    def test_rejects_naive_instant(self):
        """A naive datetime cannot be compared with stored starts."""
        with pytest.raises(ValueError):
            FixedClock(datetime(2025, 1, 1))
