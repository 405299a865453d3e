"""
Viewer domain models.

This module defines who is looking at the catalog:
- Role / Tier: the two axes the access policy switches on
- Principal: a resolved viewer (None means anonymous)
- ViewerContext: request-scoped viewer context attached by the middleware
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from webinar_core.domain.exceptions import InvalidPrincipalError


class Role(str, Enum):
    """Principal role."""

    HOST = "host"
    ATTENDEE = "attendee"


class Tier(str, Enum):
    """Attendee subscription tier."""

    STANDARD = "standard"
    PREMIUM = "premium"


# Account-profile vocabulary used by the identity provider
_ROLE_ALIASES: dict[str, Role] = {
    "host": Role.HOST,
    "contributor": Role.HOST,
    "attendee": Role.ATTENDEE,
    "user": Role.ATTENDEE,
}

_TIER_ALIASES: dict[str, Tier] = {
    "standard": Tier.STANDARD,
    "public": Tier.STANDARD,
    "premium": Tier.PREMIUM,
    "paid": Tier.PREMIUM,
}


@dataclass(frozen=True)
class Principal:
    """A resolved viewer, tagged by role.

    Hosts carry no tier. Build instances through host() and attendee()
    so the tag and payload always agree.
    """

    role: Role
    tier: Tier | None = None

    @classmethod
    def host(cls) -> "Principal":
        return cls(role=Role.HOST)

    @classmethod
    def attendee(cls, tier: Tier = Tier.STANDARD) -> "Principal":
        return cls(role=Role.ATTENDEE, tier=tier)

    @property
    def is_host(self) -> bool:
        return self.role is Role.HOST

    @property
    def is_premium(self) -> bool:
        """True only for premium attendees; hosts have no tier."""
        return self.role is Role.ATTENDEE and self.tier is Tier.PREMIUM


@dataclass
class ViewerContext:
    """Request-scoped viewer context.

    Attached to request.state.viewer by the auth middleware.
    """

    principal: Principal | None
    user_id: str | None
    resolved_at: datetime
    request_id: str

    @property
    def is_anonymous(self) -> bool:
        return self.principal is None


def _lookup(value: Any, table: dict, field: str):
    key = value.value if isinstance(value, Enum) else str(value).strip().lower()
    try:
        return table[key]
    except KeyError:
        raise InvalidPrincipalError(f"Unknown {field}: {value!r}") from None


def principal_from_claims(claims: Mapping[str, Any] | None) -> Principal | None:
    """Resolve a Principal from identity-provider claims or an account profile.

    Accepts either the platform vocabulary (role host/attendee, tier
    standard/premium) or the account-profile one (role contributor/user,
    user_type public/paid).

    Args:
        claims: Decoded token payload or profile row. None or empty means
            the request carries no identity.

    Returns:
        The resolved Principal, or None for an anonymous viewer.

    Raises:
        InvalidPrincipalError: If the role or tier is not recognised.
    """
    if not claims:
        return None

    role_value = claims.get("role")
    if role_value is None:
        raise InvalidPrincipalError("Identity claims carry no role")

    role = _lookup(role_value, _ROLE_ALIASES, "role")
    if role is Role.HOST:
        return Principal.host()

    tier_value = claims.get("tier") or claims.get("user_type")
    if tier_value is None:
        return Principal.attendee()
    return Principal.attendee(_lookup(tier_value, _TIER_ALIASES, "tier"))
