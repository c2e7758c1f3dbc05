import logging
import threading
from typing import Dict, Iterable, List, Optional

from src.models.user import User

logger = logging.getLogger(__name__)

class InMemoryUserStore:
    """Dictionary-backed user store used for tests and local runs"""

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: Dict[str, User] = {user.email: user for user in users or ()}
        self._lock = threading.Lock()

    def create(self, user: User) -> None:
        with self._lock:
            self._users[user.email] = user

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._users.get(email)

    def update(self, user: User) -> bool:
        with self._lock:
            if user.email not in self._users:
                return False
            self._users[user.email] = user
            return True

    def delete(self, email: str) -> bool:
        with self._lock:
            return self._users.pop(email, None) is not None

    def list(self) -> List[User]:
        with self._lock:
            users = list(self._users.values())
        logger.debug(f"Listed {len(users)} users from memory")
        return users

    def ping(self) -> None:
        """Always reachable"""
