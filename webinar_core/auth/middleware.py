"""
FastAPI auth middleware.

Resolves the viewer from an Authorization Bearer token and attaches a
ViewerContext to request.state. Requests without credentials are treated as
anonymous viewers.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from webinar_core.auth.exceptions import InvalidTokenError
from webinar_core.auth.jwt_service import JwtService
from webinar_core.domain.exceptions import InvalidPrincipalError
from webinar_core.domain.viewer import ViewerContext, principal_from_claims

# Endpoints that skip viewer resolution entirely
PUBLIC_PATHS = frozenset(
    {
        "/health",
        "/docs",
        "/openapi.json",
        "/redoc",
    }
)


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware to resolve the viewer behind each request.

    - Authorization: Bearer {jwt} resolves a host or attendee principal.
    - No credentials resolves an anonymous viewer, unless allow_anonymous
      is False, in which case the request is rejected.
    - Invalid credentials are always rejected; they never fall back to
      anonymous.
    """

    def __init__(self, app, allow_anonymous: bool = True, jwt_service: JwtService | None = None):
        """Initialize auth middleware.

        Args:
            app: The FastAPI/Starlette application.
            allow_anonymous: If False, requests without credentials get a 401.
            jwt_service: Token verifier. Built from settings on first use if None.
        """
        super().__init__(app)
        self.allow_anonymous = allow_anonymous
        self._jwt_service = jwt_service

    @property
    def jwt_service(self) -> JwtService | None:
        """Lazily initialize JWT service; None when no secret is configured."""
        if self._jwt_service is None:
            from webinar_core.config import settings

            if settings.JWT_SECRET:
                self._jwt_service = JwtService()
        return self._jwt_service

    def _resolve_bearer(self, token: str, request_id: str, now: datetime) -> ViewerContext | None:
        """Verify a bearer token and resolve its principal."""
        if not self.jwt_service:
            logger.warning(f"[{request_id}] Bearer token received but JWT service not configured")
            return None

        try:
            payload = self.jwt_service.verify_access_token(token)
            principal = principal_from_claims(payload)
        except (InvalidTokenError, InvalidPrincipalError) as e:
            logger.warning(f"[{request_id}] Rejected bearer token: {e}")
            return None

        return ViewerContext(
            principal=principal,
            user_id=payload["sub"],
            resolved_at=now,
            request_id=request_id,
        )

    async def dispatch(self, request: Request, call_next):
        """Process incoming request for viewer resolution."""
        request_id = request.headers.get("X-Request-Id", str(uuid.uuid4()))
        request.state.request_id = request_id

        path = request.url.path.rstrip("/")
        if path in PUBLIC_PATHS or request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        now = datetime.now(timezone.utc)
        auth_header = request.headers.get("Authorization")

        if auth_header:
            if not auth_header.startswith("Bearer "):
                logger.warning(f"[{request_id}] Unsupported Authorization scheme for {path}")
                return JSONResponse(status_code=401, content={"detail": "Unsupported authorization scheme"})

            viewer = self._resolve_bearer(auth_header[7:], request_id, now)
            if viewer is None:
                return JSONResponse(status_code=401, content={"detail": "Invalid or expired token"})

            logger.debug(
                f"[{request_id}] Viewer resolved: user={viewer.user_id} role={viewer.principal.role.value}"
            )
        else:
            if not self.allow_anonymous:
                logger.warning(f"[{request_id}] Missing credentials for {path}")
                return JSONResponse(status_code=401, content={"detail": "Authentication required"})

            viewer = ViewerContext(principal=None, user_id=None, resolved_at=now, request_id=request_id)

        request.state.viewer = viewer
        return await call_next(request)
