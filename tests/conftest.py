"""
Shared test fixtures for the telemedicine backend test suite.

Sets up an async SQLite in-memory database, overrides the ``get_db``
dependency and provides an httpx client wired to the FastAPI app, plus
fixtures for records the endpoint tests depend on.
"""

import os

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# ---- Environment overrides MUST come before any app imports ----
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["DEFAULT_PAGE_LIMIT"] = "20"

from telemedicine.database import Base, get_db  # noqa: E402
from telemedicine.main import app  # noqa: E402
from tests.factories import CertificationFactory, DoctorFactory, HospitalFactory, MajorFactory  # noqa: E402

# ---------------------------------------------------------------------------
# Async engine & session factory for the test database
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite://"

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
TestSession = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


# SQLite does not enforce FK constraints by default; enable them.
@event.listens_for(test_engine.sync_engine, "connect")
def _enable_sqlite_fk(dbapi_conn, _connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ---------------------------------------------------------------------------
# Database lifecycle
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture(autouse=True)
async def setup_database():
    """Create all tables before each test, drop them afterward."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def db_session() -> AsyncSession:
    """Provide a DB session for direct service-layer tests."""
    async with TestSession() as session:
        yield session


# ---------------------------------------------------------------------------
# Dependency override
# ---------------------------------------------------------------------------
async def _override_get_db():
    async with TestSession() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = _override_get_db


@pytest_asyncio.fixture
async def client() -> AsyncClient:
    """httpx async client wired to the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Convenience fixtures: records already in the DB
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def sample_hospital(client: AsyncClient) -> dict:
    resp = await client.post("/api/v1/hospitals", json=HospitalFactory())
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def sample_major(client: AsyncClient) -> dict:
    resp = await client.post("/api/v1/majors", json=MajorFactory())
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def sample_certification(client: AsyncClient) -> dict:
    resp = await client.post("/api/v1/certifications", json=CertificationFactory())
    assert resp.status_code == 201
    return resp.json()


@pytest_asyncio.fixture
async def sample_doctor(client: AsyncClient) -> dict:
    resp = await client.post("/api/v1/doctors", json=DoctorFactory())
    assert resp.status_code == 201
    return resp.json()
