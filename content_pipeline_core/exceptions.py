"""Exception hierarchy for Content Pipeline Core.

This module defines the exception hierarchy used throughout the Content Pipeline Core library.
All exceptions inherit from ContentPipelineError, providing a consistent error handling interface.
"""


class ContentPipelineError(Exception):
    """Base exception for all Content Pipeline Core errors."""


class DocumentValidationError(ContentPipelineError):
    """Raised when a document's front-matter fails validation."""


class DuplicateIdentifierError(DocumentValidationError):
    """Raised when two content files map to the same document identifier."""


class DocumentNotFoundError(ContentPipelineError):
    """Raised when no content file backs the requested identifier."""


class InvalidIdentifierError(DocumentNotFoundError):
    """Raised when an identifier is not a valid slug or escapes the content root."""


class HighlighterError(ContentPipelineError):
    """Base exception for syntax highlighter errors."""


class HighlighterConstructionError(HighlighterError):
    """Raised when the highlighting engine fails to load its grammars or themes."""


class HighlighterNotReadyError(HighlighterError):
    """Raised when rendering is attempted before the highlighter is ready."""


class UnsupportedLanguageError(HighlighterError):
    """Raised when a language tag is not in the supported allow-list."""
