import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from econova.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from econova.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader

import econova.domain.entities  # noqa: F401


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Independent sessions on the test database, for concurrent scenarios."""
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from econova.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def provision(client, admin_headers, test_data):
    """Provision a tenant from test_data.json and return the response body."""

    async def _provision(slug: str, **overrides):
        payload = test_data.tenant(slug)
        payload.update(overrides)
        response = await client.post("/admin/tenants", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _provision
