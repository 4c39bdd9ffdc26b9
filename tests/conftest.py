"""Pytest configuration and fixtures."""
import asyncio
import os
import tempfile

import pytest

# Must run before app.config is imported: settings and the engine are built at import time.
_tmpdir = tempfile.mkdtemp(prefix="bank-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmpdir, 'test.db')}"

from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, engine  # noqa: E402
from app.main import app  # noqa: E402


async def _reset_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def client() -> TestClient:
    asyncio.run(_reset_schema())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    response = client.post("/seed")
    assert response.status_code == 200
    return client
