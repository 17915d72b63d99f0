"""In-memory content repository for testing.

Holds raw file text keyed by identifier and runs it through the same
parsing and validation as the filesystem backend.
"""

from collections.abc import Mapping

from content_pipeline_core.content._parsing import check_unique, parse_document, sort_newest_first
from content_pipeline_core.content._types import DocumentIdentifier
from content_pipeline_core.content.models import Document, DocumentSummary
from content_pipeline_core.content.utils import validate_identifier
from content_pipeline_core.exceptions import DocumentNotFoundError


class MemoryContentRepository:
    """Dict-based content repository for unit tests."""

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: dict[DocumentIdentifier, str] = {}  # identifier -> raw file text
        for identifier, text in (files or {}).items():
            self.put(identifier, text)

    def put(self, identifier: str, text: str) -> None:
        """Add or replace the raw text backing an identifier."""
        self._files[validate_identifier(identifier)] = text

    async def list_identifiers(self) -> list[DocumentIdentifier]:
        """Return all stored identifiers."""
        check_unique(self._files)
        return list(self._files)

    async def list_summaries(self) -> list[DocumentSummary]:
        """Parse every stored document and sort newest first."""
        check_unique(self._files)
        return sort_newest_first(parse_document(identifier, text).to_summary() for identifier, text in self._files.items())

    async def get_by_identifier(self, identifier: str) -> Document:
        """Parse the stored text for one identifier."""
        validated = validate_identifier(identifier)
        text = self._files.get(validated)
        if text is None:
            raise DocumentNotFoundError(f"No document found for identifier {identifier!r}")
        return parse_document(validated, text)
