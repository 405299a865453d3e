"""
Webinar module protocols.

The content store is an external collaborator; the catalog only needs
read access to it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from webinar_core.domain.content import ContentItem


@runtime_checkable
class WebinarRepository(Protocol):
    """Protocol for read access to the content store."""

    def get_by_id(self, item_id: str) -> ContentItem | None:
        """Get a single webinar, or None if it does not exist."""
        ...

    def list_all(self) -> list[ContentItem]:
        """List every webinar ordered by scheduled start."""
        ...

    def list_by_creator(self, user_id: str) -> list[ContentItem]:
        """List the webinars created by one host, ordered by scheduled start."""
        ...
