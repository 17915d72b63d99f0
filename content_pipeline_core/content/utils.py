"""Identifier helpers for content documents."""

import re

from content_pipeline_core.content._types import DocumentIdentifier
from content_pipeline_core.exceptions import InvalidIdentifierError

_IDENTIFIER_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*(?:\.[A-Za-z0-9_-]+)*$")


def is_valid_identifier(value: str) -> bool:
    """Return True if value is a URL-safe slug with no path components."""
    return bool(_IDENTIFIER_RE.fullmatch(value))


def validate_identifier(value: str) -> DocumentIdentifier:
    """Validate a caller-supplied identifier before it is turned into a path.

    Raises:
        InvalidIdentifierError: If the value contains separators, ``..``,
            a leading dot, or any character outside ``[A-Za-z0-9._-]``.
    """
    if not isinstance(value, str) or not is_valid_identifier(value):
        raise InvalidIdentifierError(f"Invalid document identifier: {value!r}")
    return DocumentIdentifier(value)


def identifier_from_filename(filename: str, extension: str) -> DocumentIdentifier | None:
    """Derive the identifier for a content file name, or None if it is not a document."""
    if not filename.endswith(extension):
        return None
    stem = filename.removesuffix(extension)
    if not is_valid_identifier(stem):
        return None
    return DocumentIdentifier(stem)
