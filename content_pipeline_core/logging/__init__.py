"""Logging infrastructure for Content Pipeline Core.

@public

Prefect-integrated logging with YAML configuration support.

Key components:
    get_pipeline_logger: Factory function for creating pipeline loggers
    setup_logging: Initialize logging configuration from YAML
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from content_pipeline_core.logging import get_pipeline_logger
    >>>
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Loading documents")

Note:
    Never import Python's logging module directly. Always use
    get_pipeline_logger() for consistent Prefect integration.
"""

from .logging_config import LoggingConfig, get_pipeline_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_pipeline_logger",
]
