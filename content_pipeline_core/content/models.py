"""Content document models.

Documents are read-time projections of files in the content directory.
They are never persisted by this library and are rebuilt on every request.
"""

from datetime import UTC, date, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from content_pipeline_core.content._types import DocumentIdentifier

__all__ = [
    "Document",
    "DocumentAttributes",
    "DocumentSummary",
]


class DocumentAttributes(BaseModel):
    """Validated front-matter of a content document.

    ``published_at`` comes from the ``date`` front-matter key. YAML dates and
    timestamps without an offset are taken as UTC, which is what YAML's
    timestamp rules specify; nothing else is normalized.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    identifier: DocumentIdentifier
    title: str = ""
    description: str = ""
    published_at: datetime

    @field_validator("title", "description", mode="before")
    @classmethod
    def _empty_when_null(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("published_at", mode="before")
    @classmethod
    def _date_to_datetime(cls, v: Any) -> Any:
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time(), tzinfo=UTC)
        return v

    @field_validator("published_at")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        return v.replace(tzinfo=UTC) if v.tzinfo is None else v

    @property
    def published_on(self) -> str:
        """ISO ``YYYY-MM-DD`` form of ``published_at``, as used in ``<time datetime>``."""
        return self.published_at.date().isoformat()


class DocumentSummary(BaseModel):
    """Listing entry: identifier and attributes, without the body."""

    model_config = ConfigDict(frozen=True)

    identifier: DocumentIdentifier
    attributes: DocumentAttributes


class Document(BaseModel):
    """Full content document with its raw Markdown body."""

    model_config = ConfigDict(frozen=True)

    identifier: DocumentIdentifier
    attributes: DocumentAttributes
    body: str

    def to_summary(self) -> DocumentSummary:
        """Drop the body for use in listings."""
        return DocumentSummary(identifier=self.identifier, attributes=self.attributes)
