import logging
import threading
from typing import Optional
from fastapi import Depends

from src.config.settings import settings
from src.db.base import UserStore
from src.db.memory import InMemoryUserStore
from src.services.user_service import UserService

logger = logging.getLogger(__name__)

# Process-wide store, created once at startup
user_store: Optional[UserStore] = None
_user_store_lock = threading.RLock()

def init_user_store() -> UserStore:
    """Build the user store selected by STORAGE_BACKEND"""
    global user_store

    with _user_store_lock:
        if settings.STORAGE_BACKEND == "memory":
            user_store = InMemoryUserStore()
        else:
            from src.db.azure_tables import AzureTableUserStore, init_user_table
            user_store = AzureTableUserStore(init_user_table())

    logger.info(f"User store initialized with {settings.STORAGE_BACKEND} backend")
    return user_store

# Dependency injection
def get_user_store() -> UserStore:
    """Dependency to get the configured user store"""
    if user_store is None:
        # Requests served before lifespan startup must not build a second store
        with _user_store_lock:
            if user_store is None:
                return init_user_store()
    return user_store

def get_user_service(store: UserStore = Depends(get_user_store)) -> UserService:
    """Dependency to get a UserService bound to the user store"""
    return UserService(store)
