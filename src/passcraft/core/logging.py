"""Log setup and a sanitizing filter that redacts identity and digest payloads.

Prevents generated passwords, raw digests, hash inputs and email
addresses from leaking through log output.
"""

from __future__ import annotations

import logging
import re
from typing import Final

_SENSITIVE_KEYS: Final[tuple[str, ...]] = (
    "base_text",
    "digest",
    "password",
    "email",
)

_REDACTED: Final[str] = "[REDACTED]"

_SENSITIVE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<key>"
    + "|".join(re.escape(k) for k in _SENSITIVE_KEYS)
    + r")\s*[=:]\s*(?P<value>\"[^\"]*\"|'[^']*'|\S+)",
    re.IGNORECASE,
)

_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def redact_message(message: str) -> str:
    """Replace sensitive ``key=value`` or ``key: value`` pairs with redaction markers.

    Args:
        message: Raw log message string.

    Returns:
        Message with sensitive values replaced by ``[REDACTED]``.
    """
    return _SENSITIVE_PATTERN.sub(
        lambda m: f"{m.group('key')}={_REDACTED}", message,
    )


class SanitizingFilter(logging.Filter):
    """A :class:`logging.Filter` that rewrites log records to strip sensitive data."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = redact_message(record.getMessage())
            record.args = None
        else:
            record.msg = redact_message(str(record.msg))
        return True


_SANITIZER: Final[SanitizingFilter] = SanitizingFilter()


def install_sanitizing_filter(logger: logging.Logger | None = None) -> SanitizingFilter:
    """Attach the shared :class:`SanitizingFilter` to each handler of *logger*.

    Handler-level filters also see records propagated from child loggers.
    Handlers that already carry a :class:`SanitizingFilter` are skipped, so
    repeated calls never stack filters.

    Args:
        logger: Target logger.  Defaults to the root logger if ``None``.

    Returns:
        The shared filter instance.
    """
    target = logger or logging.getLogger()
    for handler in target.handlers:
        if not any(isinstance(f, SanitizingFilter) for f in handler.filters):
            handler.addFilter(_SANITIZER)
    return _SANITIZER


def configure_logging(level: str | int) -> SanitizingFilter:
    """Configure stderr logging at *level* and sanitize the root handlers.

    ``basicConfig`` is a no-op when the root logger already has handlers,
    so the ``passcraft`` logger level is set explicitly as well.

    Args:
        level: Level name (``"DEBUG"``, ``"warning"``) or numeric level.

    Returns:
        The shared filter installed on the root handlers.

    Raises:
        ValueError: If *level* is not a known level name.
    """
    if isinstance(level, str):
        name = level.strip().upper()
        numeric = logging.getLevelName(name)
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("passcraft").setLevel(level)
    return install_sanitizing_filter()
