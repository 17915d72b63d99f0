"""Common test fixtures for content pipeline tests."""

import pytest

from content_pipeline_core.content import set_content_repository
from content_pipeline_core.highlight import set_highlighter_cache


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Reset process-global repository and highlighter cache after each test."""
    yield
    set_content_repository(None)
    set_highlighter_cache(None)
