"""Error types raised by the user store and the user service."""

from typing import List


class StorageError(Exception):
    """A backend failure raised by a user store implementation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserError(Exception):
    """Base class for every failure that crosses the service boundary."""

    message: str

    def __str__(self) -> str:
        return self.message


class NotFound(UserError):
    def __init__(self, email: str):
        self.email = email
        self.message = f"User with email '{email}' not found"
        super().__init__(self.message)


class AlreadyExists(UserError):
    def __init__(self, email: str):
        self.email = email
        self.message = f"User with email '{email}' already exists"
        super().__init__(self.message)


class InvalidInput(UserError):
    """Validation failures, also used to wrap storage failures."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        self.message = f"Invalid input: {', '.join(self.errors)}"
        super().__init__(self.message)
