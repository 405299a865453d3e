"""
Temporal classification of scheduled webinars.

The split is binary and compares against the scheduled start only: a
session that has started but not yet ended is already Past.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum


class Phase(str, Enum):
    """Lifecycle phase of a webinar."""

    UPCOMING = "upcoming"
    PAST = "past"


def classify(scheduled_start: datetime, now: datetime) -> Phase:
    """Return PAST if now is strictly after scheduled_start, else UPCOMING."""
    if now > scheduled_start:
        return Phase.PAST
    return Phase.UPCOMING
