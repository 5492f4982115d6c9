"""Structured security events.

Authentication outcomes and account changes are written to the ``security``
logger with the event attached as ``extra["security_event"]``, so a log
pipeline can route them apart from request logs. Passwords and tokens are
never part of an event.
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import UUID

security_logger = logging.getLogger("security")


class SecurityEventType(str, Enum):
    """Kinds of security event."""

    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    TOKEN_REJECTED = "token_rejected"

    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    USER_DELETED = "user_deleted"


@dataclass(frozen=True)
class SecurityEvent:
    """A single security event as it appears in the log record."""

    event_type: str
    success: bool
    account_id: str | None = None
    email: str | None = None
    ip_address: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def log_security_event(
    event_type: SecurityEventType,
    user_id: UUID | str | None = None,
    user_email: str | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> SecurityEvent:
    """Record a security event.

    Failed events are logged at WARNING, the rest at INFO.

    Returns:
        The event that was logged
    """
    event = SecurityEvent(
        event_type=event_type.value,
        success=success,
        account_id=str(user_id) if user_id else None,
        email=user_email,
        ip_address=ip_address,
        details=details or {},
    )
    level = logging.INFO if success else logging.WARNING
    security_logger.log(
        level,
        "security event %s (%s)",
        event.event_type,
        "ok" if success else "failed",
        extra={"security_event": asdict(event)},
    )
    return event
