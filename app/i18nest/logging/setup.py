"""Structlog configuration for i18nest.

The processor chain and level follow ``I18nSettings``: debug mode lowers the
level to DEBUG and adds call-site details, production mode renders JSON.
Every event carries ``library="i18nest"`` so host applications can filter
translation lookups out of their own logs.

Usage:
    from i18nest.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from i18nest.configuration import I18nSettings, get_settings

LIBRARY_NAME = "i18nest"


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def _resolve_log_level(settings: I18nSettings, log_level: Optional[str] = None) -> str:
    """Pick the log level: explicit override, then debug mode, then LOG_LEVEL."""
    if log_level:
        return log_level.upper()
    if settings.debug:
        return "DEBUG"
    return settings.LOG_LEVEL.upper()


def _build_processors(settings: I18nSettings, prod_mode: bool) -> List[Any]:
    """Build the structlog processor chain for ``settings``."""
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # Call-site details only matter when tracing key resolution
    if settings.debug:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
    )

    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[I18nSettings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the library.

    Args:
        settings: Settings to read defaults from (default: get_settings()).
        log_level: Optional override for the level (DEBUG, INFO, WARNING, etc).
        is_production: Optional override for JSON vs console output.

    Returns:
        Logger bound to the library name.
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger().bind(library=LIBRARY_NAME)

    settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(settings, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = _resolve_log_level(settings, log_level)
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level, logging.INFO),
    )

    return structlog.stdlib.get_logger().bind(library=LIBRARY_NAME)


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Binds ``component`` (last dotted part) and ``module_path``.

    Example:
        # In i18nest/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "i18nest.i18n.translator"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None or current_frame.f_back is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(component=module_name.split(".")[-1], module_path=module_name)
