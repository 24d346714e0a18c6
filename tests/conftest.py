"""
PyTest configuration and fixtures.
"""

import pytest
import pytest_asyncio

from advent_results.database import Database
from advent_results.database.models import User
from advent_results.services.result_store import ResultStore
from factories import OTHER_USER_ID, USER_ID


@pytest_asyncio.fixture
async def db(tmp_path):
    """Fresh SQLite file database with all tables created."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'results.db'}")
    await database.init_models()

    yield database

    await database.close()


@pytest.fixture
def store(db):
    return ResultStore(db)


@pytest.fixture
def add(db):
    """Commit the given rows in one session."""

    async def _add(*rows):
        async with db.unit_of_work() as session:
            session.add_all(rows)

    return _add


@pytest_asyncio.fixture
async def users(add):
    await add(User(id=USER_ID, user_name="alice"), User(id=OTHER_USER_ID, user_name="bob"))
    return USER_ID, OTHER_USER_ID
