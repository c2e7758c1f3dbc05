import logging
from typing import List

from src.db.base import UserStore
from src.models.errors import AlreadyExists, InvalidInput, NotFound, StorageError
from src.models.user import User
from src.models.validation import validate_user

logger = logging.getLogger(__name__)


class UserService:
    """
    Business operations on users.

    Enforces validation, email uniqueness on create and existence on
    update/delete. Every failure leaving this class is a UserError.

    Storage failures are reported as InvalidInput, so callers cannot tell an
    outage from bad input. Kept for compatibility with existing clients; a
    dedicated error kind would be the better contract.
    """

    def __init__(self, store: UserStore):
        self.store = store

    def create(self, user: User) -> None:
        validate_user(user)
        try:
            # Check and write are separate calls; concurrent creates for one
            # email can both succeed and the last write wins.
            if self.store.get_by_email(user.email) is not None:
                logger.warning(f"Rejected create for existing user {user.email}")
                raise AlreadyExists(user.email)
            self.store.create(user)
        except StorageError as e:
            raise InvalidInput([e.message]) from e

    def get_by_email(self, email: str) -> User:
        try:
            user = self.store.get_by_email(email)
        except StorageError as e:
            raise InvalidInput([e.message]) from e
        if user is None:
            raise NotFound(email)
        return user

    def update(self, user: User) -> None:
        validate_user(user)
        try:
            if self.store.get_by_email(user.email) is None:
                logger.warning(f"Rejected update for missing user {user.email}")
                raise NotFound(user.email)
            # Existence was confirmed above; a record removed in between is
            # still reported as a successful update.
            self.store.update(user)
        except StorageError as e:
            raise InvalidInput([e.message]) from e

    def delete(self, email: str) -> None:
        try:
            if self.store.get_by_email(email) is None:
                logger.warning(f"Rejected delete for missing user {email}")
                raise NotFound(email)
            self.store.delete(email)
        except StorageError as e:
            raise InvalidInput([e.message]) from e

    def list(self) -> List[User]:
        try:
            return self.store.list()
        except StorageError as e:
            raise InvalidInput([e.message]) from e
