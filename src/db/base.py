from typing import List, Optional, Protocol

from src.models.user import User

# User store interface
class UserStore(Protocol):
    """
    Record store for users keyed by email.

    Implementations raise StorageError for backend failures. A missing record
    is not a failure: lookups return None and update/delete return False.
    """

    def create(self, user: User) -> None:
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def update(self, user: User) -> bool:
        ...

    def delete(self, email: str) -> bool:
        ...

    def list(self) -> List[User]:
        ...

    def ping(self) -> None:
        """Raise StorageError when the backend is unreachable"""
        ...
