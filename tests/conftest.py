import os

# Settings are read at import time by quizlet.main
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.pool import StaticPool
from quizlet.core.database import Base, get_db
from quizlet.main import app
from quizlet.api.v1.auth import limiter as auth_limiter

# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

DEFAULT_PASSWORD = "StrongPass1"

# Fresh database per test; StaticPool keeps the single in-memory connection alive
@pytest.fixture(scope="function")
async def db_engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()

# Fixture to provide a database session for each test, with transaction rollback for isolation
@pytest.fixture(scope="function")
async def db_session(db_engine):
    connection = await db_engine.connect()
    # Start a transaction for test isolation
    transaction = await connection.begin()

    # Create a new session bound to the connection
    session = AsyncSession(bind=connection, expire_on_commit=False)

    yield session

    # Rollback transaction and close session after test
    await session.close()
    await transaction.rollback()
    await connection.close()


@pytest.fixture(scope="function")
def setup_app_dependencies(db_session):

    # Override the get_db dependency to use the test database session
    async def override_get_db():
        yield db_session
    app.dependency_overrides[get_db] = override_get_db

    # Disable rate limiting for tests to avoid interference
    original_limiter_state = auth_limiter.enabled
    auth_limiter.enabled = False

    yield

    # Cleanup after test
    app.dependency_overrides.clear()
    auth_limiter.enabled = original_limiter_state


@pytest.fixture(scope="function")
async def client(setup_app_dependencies):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def register(client, email: str, username: str, password: str = DEFAULT_PASSWORD) -> dict:
    response = await client.post("/api/v1/users/", json={
        "email": email,
        "username": username,
        "password": password,
    })
    assert response.status_code == 201, response.text
    return response.json()


async def login(client, email: str, password: str = DEFAULT_PASSWORD):
    return await client.post("/api/v1/auth/login", json={"email": email, "password": password})


@pytest.fixture(scope="function")
async def auth_headers(client):
    await register(client, "owner@test.com", "owner")
    response = await login(client, "owner@test.com")
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
