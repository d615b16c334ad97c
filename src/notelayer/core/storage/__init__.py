"""Storage backends for notes."""

from typing import Optional

from ...config import Settings, get_settings
from ...database import create_engine
from ..exceptions import ConfigurationError
from .interfaces import IStorage
from .memory import InMemoryStorage
from .sql import SqlStorage

__all__ = [
    "IStorage",
    "InMemoryStorage",
    "SqlStorage",
    "create_storage",
]


def create_storage(settings: Optional[Settings] = None) -> IStorage:
    """Build the storage backend named by ``settings.storage_backend``."""
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()

    if backend == "memory":
        return InMemoryStorage()
    if backend == "sql":
        return SqlStorage(create_engine(settings))

    raise ConfigurationError(
        f"Unknown storage backend: {settings.storage_backend!r}",
        {"storage_backend": settings.storage_backend},
    )
