"""Content repository protocol and singleton management.

Defines the ContentRepository protocol that all content backends must implement,
along with get/set helpers for the process-global singleton.
"""

from typing import Protocol, runtime_checkable

from content_pipeline_core.content._types import DocumentIdentifier
from content_pipeline_core.content.models import Document, DocumentSummary


@runtime_checkable
class ContentRepository(Protocol):
    """Protocol for read-only content backends.

    Implementations: LocalContentRepository (filesystem), MemoryContentRepository (testing).
    """

    async def list_identifiers(self) -> list[DocumentIdentifier]:
        """Return the identifiers of every document. Order is unspecified."""
        ...

    async def list_summaries(self) -> list[DocumentSummary]:
        """Return every document's summary, newest first. One invalid document fails the call."""
        ...

    async def get_by_identifier(self, identifier: str) -> Document:
        """Return the full document for an identifier, body included."""
        ...


_content_repository: ContentRepository | None = None


def get_content_repository() -> ContentRepository | None:
    """Get the process-global content repository singleton."""
    return _content_repository


def set_content_repository(repository: ContentRepository | None) -> None:
    """Set the process-global content repository singleton."""
    global _content_repository
    _content_repository = repository
