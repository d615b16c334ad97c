"""HTTP front-end served by uvicorn."""

from typing import Optional

import uvicorn

from ..config import Settings, get_settings
from ..core.logging import get_logger
from ..core.storage.interfaces import IStorage
from ..main import create_app
from .base import Application

logger = get_logger("http")


class HttpApplication(Application):
    """Serves the notes API on ``settings.host:settings.port``."""

    def __init__(self, storage: IStorage, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.storage = storage
        self.app = create_app(storage, self.settings)

    def run(self) -> None:
        logger.info(f"Listening on http://{self.settings.host}:{self.settings.port}")
        if self.settings.reload:
            # reload needs an import string, so the worker builds its own storage from settings
            uvicorn.run(
                "notelayer.main:create_app",
                factory=True,
                host=self.settings.host,
                port=self.settings.port,
                reload=True,
                log_config=None,
            )
            return
        uvicorn.run(self.app, host=self.settings.host, port=self.settings.port, log_config=None)
