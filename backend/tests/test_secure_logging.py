"""Log sanitization tests."""

import logging

import pytest

from roster_api.utils.secure_logging import log_error, sanitize_exception_message


class TestSanitizeExceptionMessage:
    """Tests for stripping sensitive details from exception messages."""

    def test_connection_string_removed(self) -> None:
        error = RuntimeError("could not connect to postgresql+asyncpg://roster:pw@db:5432/roster")
        sanitized = sanitize_exception_message(error)
        assert "pw@db" not in sanitized
        assert "[URL]" in sanitized

    def test_file_path_removed(self) -> None:
        sanitized = sanitize_exception_message(OSError("cannot open /etc/roster/secret.key"))
        assert "/etc/roster" not in sanitized
        assert "[PATH]" in sanitized

    def test_email_removed(self) -> None:
        sanitized = sanitize_exception_message(ValueError("duplicate key a@x.com"))
        assert "a@x.com" not in sanitized
        assert "[EMAIL]" in sanitized

    def test_token_removed(self) -> None:
        token = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9abcdef"
        sanitized = sanitize_exception_message(ValueError(f"bad token {token}"))
        assert token not in sanitized
        assert "[TOKEN]" in sanitized

    def test_long_message_truncated(self) -> None:
        sanitized = sanitize_exception_message(ValueError("x " * 300))
        assert len(sanitized) == 200
        assert sanitized.endswith("...")

    def test_plain_message_unchanged(self) -> None:
        assert sanitize_exception_message(ValueError("boom")) == "boom"


def test_log_error_is_sanitized_outside_debug(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("roster_api.tests")
    with caplog.at_level(logging.ERROR, logger="roster_api.tests"):
        log_error(logger, "Lookup failed", ValueError("no row for a@x.com"))

    assert "Lookup failed: no row for [EMAIL]" in caplog.text
    assert "a@x.com" not in caplog.text


class TestSecurityEvents:
    """Tests for structured security events."""

    def test_failed_event_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        from roster_api.utils.security_events import SecurityEventType, log_security_event

        with caplog.at_level(logging.INFO, logger="security"):
            event = log_security_event(
                SecurityEventType.LOGIN_FAILED,
                ip_address="203.0.113.9",
                details={"reason": "unknown_email"},
                success=False,
            )

        record = caplog.records[-1]
        assert record.name == "security"
        assert record.levelno == logging.WARNING
        assert record.security_event["event_type"] == "login_failed"
        assert record.security_event["details"] == {"reason": "unknown_email"}
        assert event.account_id is None

    def test_successful_event_logged_as_info(self, caplog: pytest.LogCaptureFixture) -> None:
        from uuid import uuid4

        from roster_api.utils.security_events import SecurityEventType, log_security_event

        account_id = uuid4()
        with caplog.at_level(logging.INFO, logger="security"):
            log_security_event(SecurityEventType.USER_CREATED, user_id=account_id)

        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.security_event["account_id"] == str(account_id)
