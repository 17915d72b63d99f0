"""Shared document parsing used by every content repository backend."""

from collections.abc import Iterable

from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from content_pipeline_core.content._frontmatter import split_front_matter
from content_pipeline_core.content._types import DocumentIdentifier
from content_pipeline_core.content.models import Document, DocumentAttributes, DocumentSummary
from content_pipeline_core.exceptions import DocumentValidationError, DuplicateIdentifierError
from content_pipeline_core.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

REQUIRED_DATE_KEY = "date"


def parse_document(identifier: DocumentIdentifier, text: str) -> Document:
    """Parse raw file text into a validated Document.

    Raises:
        DocumentValidationError: If the front-matter is malformed, the date is
            missing, or a field fails validation. The message names the identifier.
    """
    try:
        front_matter, body = split_front_matter(text)
    except (ValueError, YAMLError) as e:
        raise DocumentValidationError(f"Invalid front-matter in document {identifier}: {e}") from e

    raw_date = front_matter.get(REQUIRED_DATE_KEY)
    if raw_date is None or raw_date == "":
        logger.warning(f"Document {identifier} has no date in its front-matter")
        raise DocumentValidationError(f"Missing date in document {identifier}")

    try:
        attributes = DocumentAttributes(
            identifier=identifier,
            title=front_matter.get("title"),
            description=front_matter.get("description"),
            published_at=raw_date,
        )
    except ValidationError as e:
        raise DocumentValidationError(f"Invalid front-matter in document {identifier}: {e}") from e

    return Document(identifier=identifier, attributes=attributes, body=body)


def sort_newest_first(summaries: Iterable[DocumentSummary]) -> list[DocumentSummary]:
    """Order summaries by publication time, most recent first. Ties keep no guaranteed order."""
    return sorted(summaries, key=lambda s: s.attributes.published_at, reverse=True)


def check_unique(identifiers: Iterable[str]) -> None:
    """Reject identifier sets where two entries differ only by case.

    Raises:
        DuplicateIdentifierError: On the first collision found.
    """
    seen: dict[str, str] = {}
    for identifier in identifiers:
        key = identifier.casefold()
        if key in seen:
            logger.warning(f"Identifier collision: '{seen[key]}' and '{identifier}'")
            raise DuplicateIdentifierError(f"Duplicate document identifier {identifier!r} (collides with {seen[key]!r})")
        seen[key] = identifier
