"""Service test fixtures - async DB + FastAPI test client + seed helpers.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to go through DatabaseSessionManager.session()
      so error mapping and rollback behave as in production
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory over StaticPool: one shared connection, no external dependency
    - Seed helpers go through the HTTP API, not the ORM, so fixtures exercise the routes too
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import approval.infrastructure.database as db_module
import approval.models  # noqa: F401
from approval.db.base import Base
from approval.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from approval.main import app

API = "/api/v1/approval"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# --- Seed helpers ----------------------------------------------------------------

@pytest.fixture
def make_company(client):
    async def _make(title="Рога и копыта", inn=1234567890, company_type="LLC",
                    has_board_of_directors=True):
        res = await client.post(f"{API}/company", json={
            "title": title, "inn": inn, "company_type": company_type,
            "has_board_of_directors": has_board_of_directors,
        })
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def make_participant(client):
    async def _make(company_id, name="Иванов", share=50.0, type="OWNER", is_active=True):
        res = await client.post(f"{API}/{company_id}/participant", json={
            "name": name, "share": share, "type": type, "is_active": is_active,
        })
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def make_meeting(client):
    async def _make(company_id, type="FMP", date="2026-05-20",
                    address="Москва, ул. Ленина, 1", **extra):
        res = await client.post(f"{API}/{company_id}/meeting", json={
            "type": type, "date": date, "address": address, **extra,
        })
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def register(client):
    async def _register(company_id, meeting_id, *participant_ids, is_present=True):
        res = await client.post(
            f"{API}/{company_id}/meeting/{meeting_id}/participants",
            json={"potential_participants": [
                {"participant_id": pid, "is_present": is_present}
                for pid in participant_ids
            ]},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _register


@pytest.fixture
def make_topic(client):
    async def _make(company_id, meeting_id, title="Утверждение годового отчета"):
        res = await client.post(
            f"{API}/{company_id}/meeting/{meeting_id}/topic", json={"title": title},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _make
