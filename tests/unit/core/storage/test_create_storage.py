"""Backend selection from settings."""

import pytest

from notelayer.config import Settings
from notelayer.core.exceptions import ConfigurationError
from notelayer.core.storage import InMemoryStorage, SqlStorage, create_storage


def test_memory_backend_is_default(test_settings):
    assert isinstance(create_storage(test_settings), InMemoryStorage)


@pytest.mark.asyncio
async def test_sql_backend():
    storage = create_storage(Settings(_env_file=None, storage_backend="SQL"))
    try:
        assert isinstance(storage, SqlStorage)
        assert storage.name == "sql"
    finally:
        await storage.close()


def test_unknown_backend_raises():
    with pytest.raises(ConfigurationError, match="Unknown storage backend"):
        create_storage(Settings(_env_file=None, storage_backend="redis"))
