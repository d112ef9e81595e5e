"""Field validation for user payloads.

Checks run in a fixed order and stop at the first failure, so the
reported message always names the earliest violated rule.
"""

from typing import Any, NamedTuple, Optional

import email_validator
from email_validator import EmailNotValidError, validate_email

# Reserved names such as "localhost" and ".local" are still syntactically
# valid domains; only syntax decides here.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()

MAX_USERNAME_LENGTH = 100
MIN_AGE = 0
MAX_AGE = 150
MIN_PASSWORD_LENGTH = 6


class ValidationResult(NamedTuple):
    """Outcome of validating a candidate user."""
    is_valid: bool
    error_message: Optional[str] = None


VALID = ValidationResult(True)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_valid_email(email: str) -> bool:
    """Check address syntax only.

    Dotless and reserved domains are accepted and no DNS lookups are made.
    """
    try:
        validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def validate_user(candidate: Optional[Any]) -> ValidationResult:
    """Validate a candidate user.

    Args:
        candidate: Any object exposing ``username``, ``email``, ``age`` and
            ``password`` attributes, or None.

    Returns:
        ``ValidationResult`` whose ``error_message`` is set only on failure.
    """
    if candidate is None:
        return ValidationResult(False, "User data is required")

    if _is_blank(candidate.username):
        return ValidationResult(False, "Username is required and cannot be empty")

    if len(candidate.username) > MAX_USERNAME_LENGTH:
        return ValidationResult(False, f"Username cannot exceed {MAX_USERNAME_LENGTH} characters")

    if _is_blank(candidate.email):
        return ValidationResult(False, "Email is required and cannot be empty")

    if not is_valid_email(candidate.email):
        return ValidationResult(False, "Email format is invalid")

    if candidate.age is None or not MIN_AGE <= candidate.age <= MAX_AGE:
        return ValidationResult(False, f"Age must be between {MIN_AGE} and {MAX_AGE}")

    if _is_blank(candidate.password):
        return ValidationResult(False, "Password is required and cannot be empty")

    if len(candidate.password) < MIN_PASSWORD_LENGTH:
        return ValidationResult(
            False,
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    return VALID
