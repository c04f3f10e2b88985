"""
Logging configuration and structured logging helpers.

All application code logs through ``log_info``, ``log_warning`` and
``log_error`` so that contextual fields are rendered consistently as
``key=value`` pairs after the message.
"""
import logging
import sys
from typing import Any, Optional

from app.core.config import settings

LOGGER_NAME = "journal_keeper"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger(LOGGER_NAME)
_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the application logger once."""
    global _configured
    if _configured:
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handler: logging.Handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level or settings.log_level)
    _configured = True


def _format_context(context: dict[str, Any]) -> str:
    pairs = [f"{key}={value}" for key, value in context.items() if value is not None]
    return " ".join(pairs)


def _render(message: str, context: dict[str, Any]) -> str:
    rendered = _format_context(context)
    return f"{message} | {rendered}" if rendered else message


def log_info(message: str, **context: Any) -> None:
    logger.info(_render(message, context))


def log_debug(message: str, **context: Any) -> None:
    logger.debug(_render(message, context))


def log_warning(message: Any, **context: Any) -> None:
    """Log a warning. ``message`` may be an exception."""
    logger.warning(_render(str(message), context))


def log_error(error: Any, **context: Any) -> None:
    """
    Log an error with context.

    Exceptions are logged with their traceback; plain strings are logged as-is.
    """
    if isinstance(error, BaseException):
        message = f"{type(error).__name__}: {error}"
        logger.error(_render(message, context), exc_info=error)
    else:
        logger.error(_render(str(error), context))
