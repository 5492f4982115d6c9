"""Centralized validation constants for the roster API.

This module provides a single source of truth for field limits and
patterns used by the request DTOs.
"""

from typing import Final

# =============================================================================
# Shared Field Limits
# =============================================================================

NAME_MAX_LENGTH: Final[int] = 255
EMAIL_MAX_LENGTH: Final[int] = 255
PHONE_MAX_LENGTH: Final[int] = 50

# Local part, "@", domain with at least one dot and an alphabetic TLD.
# Case is preserved: emails are stored and matched exactly as submitted.
EMAIL_PATTERN: Final[str] = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

# =============================================================================
# Account Constants
# =============================================================================

# bcrypt only considers the first 72 bytes of a password
PASSWORD_MAX_BYTES: Final[int] = 72

# =============================================================================
# Employee Constants
# =============================================================================

EMPLOYEE_AGE_MIN: Final[int] = 0
EMPLOYEE_AGE_MAX: Final[int] = 150
JOINING_DATE_MAX_LENGTH: Final[int] = 50
