from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from asgi_lifespan import LifespanManager

from ratguide.core.config import DevSettings
from ratguide.core.database import create_engine, create_session_factory
from ratguide.main import create_app
from ratguide.models import Base


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings(tmp_path):
    """Dev settings pointing at a throwaway SQLite file."""
    return DevSettings(SQLITE_PATH=str(tmp_path / "test.db"), LOG_LEVEL="WARNING")


@pytest.fixture
def empty_settings(tmp_path):
    return DevSettings(
        SQLITE_PATH=str(tmp_path / "empty.db"),
        LOG_LEVEL="WARNING",
        SEED_ON_STARTUP=False,
    )


@asynccontextmanager
async def _client_for(settings):
    app = create_app(settings)
    async with LifespanManager(app) as manager:
        async with AsyncClient(
            transport=ASGITransport(app=manager.app),
            base_url="http://test",
        ) as ac:
            yield ac


@pytest.fixture
async def client(settings):
    """Async test client with lifespan support and default data seeded."""
    async with _client_for(settings) as ac:
        yield ac


@pytest.fixture
async def empty_client(empty_settings):
    """Async test client over an unseeded database."""
    async with _client_for(empty_settings) as ac:
        yield ac


@pytest.fixture
async def session_factory(empty_settings):
    """Session factory over freshly created, empty tables."""
    engine = create_engine(empty_settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
