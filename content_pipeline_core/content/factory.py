"""Factory function for creating content repository instances based on settings."""

from content_pipeline_core.content.protocol import ContentRepository
from content_pipeline_core.settings import Settings


def create_content_repository(settings: Settings) -> ContentRepository:
    """Create a ContentRepository based on settings.

    Returns a LocalContentRepository rooted at ``settings.content_directory``.
    The backend is imported lazily to avoid circular imports.
    """
    from content_pipeline_core.content.local import LocalContentRepository

    return LocalContentRepository(settings.content_directory, extension=settings.content_extension)
