"""
API routes for the User CRUD API.
"""

from src.api.users import router as users_router
from src.api.health import router as health_router

__all__ = [
    "users_router",
    "health_router",
]
