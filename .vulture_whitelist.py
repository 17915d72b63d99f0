"""Vulture whitelist: methods called by frameworks, not direct code."""

# Pydantic validators: called by Pydantic, not our code
from content_pipeline_core.content.models import DocumentAttributes

DocumentAttributes._empty_when_null
DocumentAttributes._date_to_datetime
DocumentAttributes._assume_utc

# asyncio done callback
from content_pipeline_core.highlight.cache import HighlighterCache

HighlighterCache._on_construction_done

# Add more as vulture reports false positives
