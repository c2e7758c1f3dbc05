"""
Field validation for user payloads.

Every rule runs on every call so a single response reports all problems
with a submission, in field order: name, surname, email.
"""

import re
from typing import List, Optional

from src.models.errors import InvalidInput
from src.models.user import User

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
MIN_NAME_LENGTH = 2


def _validate_required_name(value: str, label: str) -> Optional[str]:
    stripped = value.strip()
    if not stripped:
        return f"{label} is required"
    if len(stripped) < MIN_NAME_LENGTH:
        return f"{label} must be at least {MIN_NAME_LENGTH} characters"
    return None


def validate_name(name: str) -> Optional[str]:
    return _validate_required_name(name, "Name")


def validate_surname(surname: str) -> Optional[str]:
    return _validate_required_name(surname, "Surname")


def validate_email(email: str) -> Optional[str]:
    if not email.strip():
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(email):
        return f"Invalid email format: '{email}'"
    return None


def collect_errors(user: User) -> List[str]:
    """Return every violation for ``user``; empty when it is valid."""
    results = (
        validate_name(user.name),
        validate_surname(user.sur_name),
        validate_email(user.email),
    )
    return [error for error in results if error is not None]


def validate_user(user: User) -> User:
    """
    Validate a user submission.

    Returns the same user unchanged when valid, otherwise raises
    InvalidInput carrying all collected messages.
    """
    errors = collect_errors(user)
    if errors:
        raise InvalidInput(errors)
    return user
