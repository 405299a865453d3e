"""
Standard exceptions for the webinar service.

This module defines the hierarchy of exceptions used across the platform.
A denied permission is never an exception at the policy layer; it only
becomes one (AccessDeniedError) once a caller asks for something the
decision did not grant.
"""

from __future__ import annotations


class WebinarError(Exception):
    """Base exception for all webinar service errors."""
    pass


class PolicyError(WebinarError):
    """Base exception for access policy input errors."""
    pass


class InvalidItemError(PolicyError):
    """A content item failed validation before policy evaluation."""

    def __init__(self, reason: str, item_id: str | None = None):
        self.reason = reason
        self.item_id = item_id
        where = f" (item {item_id})" if item_id else ""
        super().__init__(f"Invalid content item{where}: {reason}")


class InvalidPrincipalError(PolicyError):
    """Identity data could not be resolved to a known role or tier."""
    pass


class CatalogError(WebinarError):
    """Base exception for catalog lookups."""
    pass


class WebinarNotFoundError(CatalogError):
    """The requested webinar does not exist in the content store."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Webinar not found: {item_id}")


class AccessDeniedError(CatalogError):
    """The viewer is not allowed to see the requested resource."""
    pass
