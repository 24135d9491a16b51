import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from doproject.main import app
from doproject.database import Base, enable_sqlite_foreign_keys, get_db
from doproject.models import Project, Task, User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
async def engine():
    # fresh schema per test; StaticPool keeps the single in-memory database alive
    engine_test = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine_test)
    async with engine_test.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine_test
    await engine_test.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session

@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session
    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest.fixture
def statements(engine):
    """SQL text of every statement sent to the database, in order."""
    captured = []

    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", before_cursor_execute)
    yield captured
    event.remove(engine.sync_engine, "before_cursor_execute", before_cursor_execute)

@pytest.fixture
async def seeded(db):
    """
    user 1 -> project 10 -> tasks 100, 101
           -> project 11 -> task 102
    user 2 -> project 20 -> task 200
    """
    db.add_all([
        User(id=1, name="Ada", email="ada@example.com"),
        User(id=2, name="Grace", email="grace@example.com"),
    ])
    await db.flush()
    db.add_all([
        Project(id=10, title="Engine", user_id=1),
        Project(id=11, title="Notes", user_id=1),
        Project(id=20, title="Compiler", user_id=2),
    ])
    await db.flush()
    db.add_all([
        Task(id=100, title="Gears", project_id=10),
        Task(id=101, title="Cards", project_id=10),
        Task(id=102, title="Bernoulli", project_id=11),
        Task(id=200, title="Linker", project_id=20),
    ])
    await db.commit()
    return db
