"""Database Session Manager - error mapping, rollback and FK enforcement.

Invariants:
    - SQLAlchemy errors leave the session as DatabaseError
    - Non-database exceptions propagate unchanged
    - SQLite connections enforce foreign keys
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from approval.core.domain_types import ParticipantType
from approval.core.errors import DatabaseError
from approval.infrastructure.database import DatabaseSessionManager
from approval.models.participant import Participant


@pytest.fixture
def manager(test_engine, test_session_factory):
    mgr = DatabaseSessionManager.__new__(DatabaseSessionManager)
    mgr.engine = test_engine
    mgr._session_factory = test_session_factory
    return mgr


async def test_integrity_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session():
            raise IntegrityError("INSERT", {}, Exception("duplicate"))
    assert exc_info.value.http_status == 503


async def test_other_exceptions_propagate(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a database problem")


async def test_foreign_keys_enforced(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(Participant(
                name="Orphan", share=1.0, company_id=999, type=ParticipantType.OWNER,
            ))
            await db.commit()


async def test_health_check(manager):
    assert await manager.health_check() is True
    async with manager.session() as db:
        assert (await db.execute(text("SELECT 1"))).scalar_one() == 1
