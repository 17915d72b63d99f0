"""Content repository protocol, backends, and document models."""

from ._types import DocumentIdentifier
from .factory import create_content_repository
from .models import Document, DocumentAttributes, DocumentSummary
from .protocol import ContentRepository, get_content_repository, set_content_repository
from .utils import is_valid_identifier, validate_identifier

__all__ = [
    "ContentRepository",
    "Document",
    "DocumentAttributes",
    "DocumentIdentifier",
    "DocumentSummary",
    "create_content_repository",
    "get_content_repository",
    "is_valid_identifier",
    "set_content_repository",
    "validate_identifier",
]
