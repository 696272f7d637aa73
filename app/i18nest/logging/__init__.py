"""Structured logging for i18nest using structlog.

Public API:
    - configure_logging(): Initialize logging from I18nSettings
    - get_module_logger(): Get a logger for the calling module

Example:
    from i18nest.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from i18nest.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
