"""
Auth module for the webinar service.

Verifies identity-provider tokens, resolves the viewer on each request and
provides FastAPI dependencies for routes.
"""

from webinar_core.auth.dependencies import (
    get_principal,
    get_viewer_context,
    require_host,
)
from webinar_core.auth.jwt_service import JwtService
from webinar_core.auth.middleware import AuthMiddleware

__all__ = [
    "AuthMiddleware",
    "JwtService",
    "get_principal",
    "get_viewer_context",
    "require_host",
]
