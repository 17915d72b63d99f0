"""Logging setup for Content Pipeline Core.

@public

Library loggers come from Prefect's ``get_logger``, which places them under
``prefect.content_pipeline_core``. Configuration is read from a YAML
dictConfig file when one is given, otherwise a built-in configuration prints
the library's messages to stdout.

Usage:
    >>> from content_pipeline_core.logging import get_pipeline_logger
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Scanning content directory")

Environment variables:
    CONTENT_PIPELINE_LOGGING_CONFIG: Path to a YAML dictConfig file
    CONTENT_PIPELINE_LOG_LEVEL: Library log level in the built-in configuration
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any

import yaml
from prefect.logging import get_logger

PACKAGE_LOGGER = "content_pipeline_core"
CONFIG_PATH_ENV = "CONTENT_PIPELINE_LOGGING_CONFIG"
LOG_LEVEL_ENV = "CONTENT_PIPELINE_LOG_LEVEL"


class LoggingConfig:
    """Logging configuration loaded from YAML or built in.

    @public

    An explicit ``config_path`` wins over ``CONTENT_PIPELINE_LOGGING_CONFIG``.
    A path that does not exist, or an empty file, falls back to the built-in
    configuration. The loaded dictionary is cached per instance.

    Example:
        >>> LoggingConfig().apply()
        >>> LoggingConfig(Path("logging.yml")).apply()
    """

    def __init__(self, config_path: Path | None = None):
        if config_path is None and (env_path := os.environ.get(CONFIG_PATH_ENV)):
            config_path = Path(env_path)
        self.config_path = config_path
        self._config: dict[str, Any] | None = None

    def load_config(self) -> dict[str, Any]:
        """Return the dictConfig mapping, reading the file on first call."""
        if self._config is None:
            loaded = None
            if self.config_path is not None and self.config_path.exists():
                with open(self.config_path) as f:
                    loaded = yaml.safe_load(f)
            self._config = loaded or self.default_config()
        return self._config

    @staticmethod
    def default_config() -> dict[str, Any]:
        """Console output for the library logger; root stays at WARNING."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                get_logger(PACKAGE_LOGGER).name: {
                    "level": os.environ.get(LOG_LEVEL_ENV, "INFO"),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {"level": "WARNING", "handlers": ["console"]},
        }

    def apply(self) -> None:
        logging.config.dictConfig(self.load_config())


_logging_config: LoggingConfig | None = None


def setup_logging(config_path: Path | None = None, level: str | None = None) -> None:
    """Apply the logging configuration.

    @public

    Args:
        config_path: YAML dictConfig file. Defaults to the environment or
            the built-in configuration.
        level: Overrides the library logger's level after configuring.
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        get_logger(PACKAGE_LOGGER).setLevel(level)


def get_pipeline_logger(name: str) -> logging.Logger:
    """Get a library logger, configuring logging on first use.

    @public

    Example:
        >>> logger = get_pipeline_logger(__name__)
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
