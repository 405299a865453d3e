"""
FastAPI dependencies for viewer resolution.

Provides dependency injection for:
- Extracting the viewer context from requests
- Requiring a host for management endpoints
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from webinar_core.domain.viewer import Principal, ViewerContext


def get_viewer_context(request: Request) -> ViewerContext:
    """Get viewer context from request state.

    Args:
        request: The FastAPI request object.

    Returns:
        ViewerContext attached by the auth middleware.

    Raises:
        HTTPException: 401 if the middleware did not resolve a viewer.
    """
    viewer = getattr(request.state, "viewer", None)
    if not viewer:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return viewer


def get_principal(viewer: ViewerContext = Depends(get_viewer_context)) -> Principal | None:
    """Get the acting principal; None for anonymous viewers."""
    return viewer.principal


def require_host(viewer: ViewerContext = Depends(get_viewer_context)) -> ViewerContext:
    """Require a signed-in host.

    Raises:
        HTTPException: 401 when anonymous, 403 when not a host.
    """
    if viewer.principal is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    if not viewer.principal.is_host:
        raise HTTPException(status_code=403, detail="Host access required")
    return viewer
