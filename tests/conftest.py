import asyncio
from pathlib import Path
from typing import Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from todo_api.db import get_db
from todo_api.main import app
from todo_api.models import Base


@pytest.fixture()
def engine(tmp_path: Path) -> AsyncEngine:
    """
    Engine bound to a throwaway SQLite file.

    NullPool keeps connections from outliving the event loop of the request
    that opened them; TestClient runs each request on its own loop.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasks.sqlite3'}", poolclass=NullPool)

    async def create_schema() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_schema())
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture()
def client(engine: AsyncEngine) -> TestClient:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the lifespan would create tables on the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client: TestClient, username: str, password: str = "secret123") -> Dict[str, str]:
    response = client.post(
        "/api/auth/register",
        json={"username": username, "email": f"{username}@example.com", "password": password},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture()
def alice(client: TestClient) -> Dict[str, str]:
    return register(client, "alice")


@pytest.fixture()
def bob(client: TestClient) -> Dict[str, str]:
    return register(client, "bob")
