"""Shared pytest fixtures: fresh storages, use-cases and an HTTP test client."""

import io
import logging

import pytest
from fastapi.testclient import TestClient

from notelayer.apps.repl import ReplApplication
from notelayer.config import Settings
from notelayer.core.storage import InMemoryStorage, SqlStorage
from notelayer.core.usecases import new_usecases
from notelayer.database import create_engine
from notelayer.main import create_app
from notelayer.presenters import ReplPresenter

# Silence verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def test_settings():
    """Settings for tests: in-memory storage, no log files."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        database_url="sqlite+aiosqlite:///:memory:",
        debug=True,
        log_dir=None,
    )


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
async def sql_storage(test_settings):
    """SqlStorage on a private in-memory sqlite database."""
    storage = SqlStorage(create_engine(test_settings))
    await storage.init()
    try:
        yield storage
    finally:
        await storage.close()


@pytest.fixture(params=["memory", "sql"])
async def storage(request, memory_storage, test_settings):
    """Run a test against every storage backend."""
    if request.param == "memory":
        yield memory_storage
        return

    sql = SqlStorage(create_engine(test_settings))
    await sql.init()
    try:
        yield sql
    finally:
        await sql.close()


@pytest.fixture
def usecases(memory_storage):
    return new_usecases(memory_storage)


@pytest.fixture
def test_app(memory_storage, test_settings):
    """FastAPI app bound to a fresh in-memory storage."""
    return create_app(memory_storage, test_settings)


@pytest.fixture
def client(test_app):
    """Test client with lifespan events running."""
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def run_repl(memory_storage):
    """Feed lines to a REPL session and return everything it printed."""

    async def _run(*lines: str, prompt: str = "") -> str:
        stdout = io.StringIO()
        app = ReplApplication(
            usecases=new_usecases(memory_storage),
            presenter=ReplPresenter(stdout),
            stdin=io.StringIO("".join(f"{line}\n" for line in lines)),
            prompt=prompt,
        )
        await app.run_async()
        return stdout.getvalue()

    return _run
