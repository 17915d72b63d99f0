"""Domain-specific types for the content system."""

from typing import NewType

DocumentIdentifier = NewType("DocumentIdentifier", str)
"""URL-safe slug derived from a content file name (file name without extension)."""

__all__ = ["DocumentIdentifier"]
