import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from src.api.db import Database, init_schema
from src.api.main import create_app
from src.api.services import TodoService
from src.api.settings import Settings


@pytest_asyncio.fixture
async def db():
    """A fresh in-memory database with the todos schema."""
    database = Database(":memory:")
    await database.connect()
    await init_schema(database)
    yield database
    await database.close()


@pytest.fixture
def service(db) -> TodoService:
    return TodoService(db)


@pytest.fixture
def client():
    """Test client for an unseeded app with its own in-memory database."""
    app = create_app(Settings(seed_sample_data=False))
    with TestClient(app) as test_client:
        yield test_client
