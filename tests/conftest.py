import os

# Must be set before any src module builds its settings
os.environ["ENVIRONMENT"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"

import pytest

from src.db.memory import InMemoryUserStore
from src.models.user import User

@pytest.fixture
def john():
    return User(name="John", sur_name="Doe", email="john.doe@example.com")

@pytest.fixture
def jane():
    return User(name="Jane", sur_name="Doe", email="jane@example.com")

@pytest.fixture
def user_store():
    """Fresh in-memory store for each test"""
    return InMemoryUserStore()
