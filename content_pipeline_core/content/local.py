"""Local filesystem content repository.

Layout:
    {base_path}/{identifier}{extension}   <- front-matter + Markdown body

Every call re-reads from disk. There is no cache and no file watching.
"""

import asyncio
from pathlib import Path

from content_pipeline_core.content._parsing import check_unique, parse_document, sort_newest_first
from content_pipeline_core.content._types import DocumentIdentifier
from content_pipeline_core.content.models import Document, DocumentSummary
from content_pipeline_core.content.utils import identifier_from_filename, validate_identifier
from content_pipeline_core.exceptions import DocumentNotFoundError, DocumentValidationError, InvalidIdentifierError
from content_pipeline_core.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

DEFAULT_EXTENSION = ".md"


class LocalContentRepository:
    """Filesystem-backed content repository.

    Only the top level of ``base_path`` is scanned, so every listed identifier
    resolves to ``{base_path}/{identifier}{extension}``.
    """

    def __init__(self, base_path: Path | None = None, *, extension: str = DEFAULT_EXTENSION) -> None:
        if not extension.startswith(".") or len(extension) < 2:
            raise ValueError(f"extension must start with '.', got {extension!r}")
        self._base_path = base_path or Path.cwd()
        self._extension = extension

    @property
    def base_path(self) -> Path:
        """Root directory holding the content files."""
        return self._base_path

    @property
    def extension(self) -> str:
        """File extension that marks a content document."""
        return self._extension

    async def list_identifiers(self) -> list[DocumentIdentifier]:
        """Scan the content directory for document identifiers."""
        paths = await asyncio.to_thread(self._scan_sync)
        return list(paths)

    async def list_summaries(self) -> list[DocumentSummary]:
        """Load every document's attributes and sort newest first."""
        return await asyncio.to_thread(self._list_summaries_sync)

    async def get_by_identifier(self, identifier: str) -> Document:
        """Load one document by identifier."""
        return await asyncio.to_thread(self._get_by_identifier_sync, identifier)

    # --- Sync implementation (called via asyncio.to_thread) ---

    def _scan_sync(self) -> dict[DocumentIdentifier, Path]:
        if not self._base_path.is_dir():
            logger.warning(f"Content directory {self._base_path} does not exist")
            return {}

        root = self._base_path.resolve()
        found: dict[DocumentIdentifier, Path] = {}
        for path in sorted(self._base_path.iterdir()):
            if not path.name.endswith(self._extension) or not path.is_file():
                continue
            identifier = identifier_from_filename(path.name, self._extension)
            if identifier is None:
                logger.warning(f"Skipping content file {path.name}: name is not a valid identifier")
                continue
            if not path.resolve().is_relative_to(root):
                logger.warning(f"Skipping content file {path.name}: it resolves outside {self._base_path}")
                continue
            found[identifier] = path

        check_unique(found)
        logger.debug(f"Found {len(found)} documents in {self._base_path}")
        return found

    def _list_summaries_sync(self) -> list[DocumentSummary]:
        summaries = [self._read_document(identifier, path).to_summary() for identifier, path in self._scan_sync().items()]
        return sort_newest_first(summaries)

    def _get_by_identifier_sync(self, identifier: str) -> Document:
        validated = validate_identifier(identifier)
        path = self._document_path(validated)
        if not path.is_file():
            raise DocumentNotFoundError(f"No document found for identifier {identifier!r}")
        return self._read_document(validated, path)

    def _document_path(self, identifier: DocumentIdentifier) -> Path:
        path = self._base_path / f"{identifier}{self._extension}"
        if not path.resolve().is_relative_to(self._base_path.resolve()):
            raise InvalidIdentifierError(f"Identifier escapes content directory: {identifier!r}")
        return path

    @staticmethod
    def _read_document(identifier: DocumentIdentifier, path: Path) -> Document:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DocumentNotFoundError(f"No document found for identifier {identifier!r}") from e
        except UnicodeDecodeError as e:
            raise DocumentValidationError(f"Invalid encoding in document {identifier}: {e}") from e
        return parse_document(identifier, text)
