"""Shared fixtures — an application wired to a private in-memory SQLite database."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.database import Database
from app.main import create_app

IN_MEMORY_URL = "sqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, database_url=IN_MEMORY_URL, app_env="test")


@pytest_asyncio.fixture
async def app(settings: Settings):
    # ASGITransport does not run the lifespan, so do its startup/shutdown here.
    application = create_app(settings)
    database: Database = application.state.database
    await database.create_all()
    yield application
    await database.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def database():
    db = Database(IN_MEMORY_URL)
    await db.create_all()
    yield db
    await db.dispose()
