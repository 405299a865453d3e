"""
Content access & visibility policy engine.

Pure functions over (principal, item, now):
- classify: true Upcoming/Past phase of a webinar
- evaluate: listing and playback permissions
- present: the phase a viewer is shown
- decide: all three composed into a PolicyDecision
"""

from .access import AccessDecision, evaluate
from .clock import Clock, FixedClock, SystemClock
from .facade import PlaybackStatus, PolicyDecision, PolicyEngine, decide, playback_status
from .presenter import present
from .temporal import Phase, classify

__all__ = [
    "AccessDecision",
    "Clock",
    "FixedClock",
    "Phase",
    "PlaybackStatus",
    "PolicyDecision",
    "PolicyEngine",
    "SystemClock",
    "classify",
    "decide",
    "evaluate",
    "playback_status",
    "present",
]
