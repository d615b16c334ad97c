"""Health service implementation."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict

from ...config import Settings
from ..schemas.common import HealthCheckResponse
from ..storage.interfaces import IStorage


class HealthService:
    """Reports whether the storage backend answers."""

    def __init__(self, storage: IStorage, settings: Settings):
        self.storage = storage
        self.settings = settings

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        storage_health = await self.check_storage_health()

        return HealthCheckResponse(
            status="healthy" if storage_health["connected"] else "unhealthy",
            timestamp=datetime.now(timezone.utc),
            version=self.settings.app_version,
            checks={"storage": storage_health},
        )

    async def check_storage_health(self) -> Dict[str, Any]:
        """Count notes as a round-trip through the backend."""
        loop = asyncio.get_running_loop()
        try:
            start_time = loop.time()
            notes = await self.storage.count()
            response_time = (loop.time() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "backend": self.storage.name,
                "notes": notes,
                "response_time_ms": round(response_time, 2),
            }
        except Exception as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "backend": self.storage.name,
                "error": str(e),
                "response_time_ms": 0.0,
            }
