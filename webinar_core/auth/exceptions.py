"""
Auth-specific exceptions.
"""

from webinar_core.domain.exceptions import WebinarError


class AuthError(WebinarError):
    """Base authentication error."""

    pass


class InvalidTokenError(AuthError):
    """Raised when a bearer token is malformed, expired or badly signed."""

    pass
