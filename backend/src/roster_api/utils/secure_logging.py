"""Logging helpers that keep secrets and personal data out of log lines."""

import logging
import re
from functools import lru_cache
from typing import Any

from roster_api.config import get_settings

MAX_LOGGED_MESSAGE_LENGTH = 200

# Applied in order: DSNs before paths, since a DSN contains slashes
_REDACTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(postgresql|postgres|sqlite|http|https)(\+\w+)?://[^\s]+"), "[URL]"),
    (re.compile(r"['\"]?(/[a-zA-Z0-9_./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?"), "[PATH]"),
    (re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+"), "[EMAIL]"),
    (re.compile(r"[a-zA-Z0-9_\-]{32,}"), "[TOKEN]"),
]


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Whether full exception detail may be logged."""
    return get_settings().debug


def sanitize_exception_message(error: Exception) -> str:
    """Redact connection strings, paths, emails and token-like strings.

    The result is capped at ``MAX_LOGGED_MESSAGE_LENGTH`` characters.
    """
    text = str(error)
    for pattern, replacement in _REDACTIONS:
        text = pattern.sub(replacement, text)

    if len(text) > MAX_LOGGED_MESSAGE_LENGTH:
        text = text[: MAX_LOGGED_MESSAGE_LENGTH - 3] + "..."
    return text


def _log(
    logger: logging.Logger,
    level: int,
    message: str,
    error: Exception | None,
    context: dict[str, Any],
) -> None:
    if is_debug_mode():
        line = f"{message}: {error}" if error else message
        logger.log(level, line, exc_info=error if level >= logging.ERROR else None, extra=context)
        return

    # Outside debug, only the redacted message and no extra context
    line = f"{message}: {sanitize_exception_message(error)}" if error else message
    logger.log(level, line)


def log_error(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log an error, with a traceback only in debug mode.

    Args:
        logger: Logger to write to
        message: Generic description without user data
        error: Exception being reported, if any
        **kwargs: Extra context, attached in debug mode only
    """
    _log(logger, logging.ERROR, message, error, kwargs)
