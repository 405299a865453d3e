"""
Visibility presenter.

Decides which phase a viewer is shown. Hosts see the true phase so they can
manage their schedule; everyone else is never shown PAST, and expired
webinars keep appearing as upcoming.
"""

from __future__ import annotations

from webinar_core.domain.viewer import Principal
from webinar_core.policy.temporal import Phase


def present(true_phase: Phase, principal: Principal | None) -> Phase:
    """Return the phase reported to the given viewer."""
    if principal is not None and principal.is_host:
        return true_phase
    return Phase.UPCOMING
