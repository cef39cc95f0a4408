"""
Shared fixtures: every storage backend behind the same contract.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from docdatacare.core.config import settings
from docdatacare.storage.database import DatabaseStorage
from docdatacare.storage.memory import MemoryStorage


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Use the minimum bcrypt work factor so user tests stay quick."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture()
def sqlite_engine():
    """An isolated in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture()
def database_storage(sqlite_engine):
    storage = DatabaseStorage(sqlite_engine)
    storage.create_tables()
    return storage


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Each test using this fixture runs once per backend."""
    if request.param == "memory":
        return MemoryStorage()
    return request.getfixturevalue("database_storage")
