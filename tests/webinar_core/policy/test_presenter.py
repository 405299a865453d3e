"""Unit tests for the visibility presenter."""

import pytest

from webinar_core.domain.viewer import Principal, Tier
from webinar_core.policy.presenter import present
from webinar_core.policy.temporal import Phase

NON_HOSTS = [
    pytest.param(None, id="anonymous"),
    pytest.param(Principal.attendee(Tier.STANDARD), id="standard"),
    pytest.param(Principal.attendee(Tier.PREMIUM), id="premium"),
]


class TestPresentToHosts:
    """Hosts always see the true phase."""

    @pytest.mark.parametrize("phase", list(Phase))
    def test_host_sees_true_phase(self, phase):
        """The reported phase equals the true phase for hosts."""
        assert present(phase, Principal.host()) is phase


class TestPresentToOthers:
    """Everyone else never sees a past webinar."""

    @pytest.mark.parametrize("principal", NON_HOSTS)
    def test_past_is_reported_as_upcoming(self, principal):
        """Past webinars are disguised as upcoming."""
        assert present(Phase.PAST, principal) is Phase.UPCOMING

    @pytest.mark.parametrize("principal", NON_HOSTS)
    def test_upcoming_stays_upcoming(self, principal):
        """Upcoming webinars are reported unchanged."""
        assert present(Phase.UPCOMING, principal) is Phase.UPCOMING
