"""Test config and shared fixtures."""
import pytest
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from framework.database.manager import get_db
from tests.models import Member, Team


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Async engine over one shared in-memory connection, tables created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    # The sqlite driver defers BEGIN on its own; take that over so SAVEPOINTs nest
    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@asynccontextmanager
async def _rollback_session(engine: AsyncEngine):
    async with engine.connect() as conn:
        outer = await conn.begin()
        # commit() inside the test only releases a SAVEPOINT
        session = AsyncSession(
            bind=conn,
            expire_on_commit=False,
            join_transaction_mode="create_savepoint",
        )
        try:
            yield session
        finally:
            await session.close()
            await outer.rollback()


@pytest.fixture
def rollback_session(engine: AsyncEngine):
    """Factory for sessions whose work is always rolled back on exit."""
    return lambda: _rollback_session(engine)


@pytest.fixture
async def db_session(rollback_session) -> AsyncGenerator[AsyncSession, None]:
    """Persistence context for one test, wrapped in a transaction that is rolled back."""
    async with rollback_session() as session:
        yield session


@pytest.fixture
async def em(db_session: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """Injected persistence context; the same rolled-back session as db_session."""
    yield db_session


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Client for the real app with get_db pointed at the test session."""
    async def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
async def teams_and_members(db_session: AsyncSession):
    """teamA: member1 (10), member2 (20); teamB: member3 (30), member4 (40)."""
    team_a = Team(name="teamA")
    team_b = Team(name="teamB")
    db_session.add_all([team_a, team_b])
    await db_session.flush()

    db_session.add_all([
        Member(username="member1", age=10, team_id=team_a.id),
        Member(username="member2", age=20, team_id=team_a.id),
        Member(username="member3", age=30, team_id=team_b.id),
        Member(username="member4", age=40, team_id=team_b.id),
    ])
    await db_session.flush()
    return team_a, team_b
