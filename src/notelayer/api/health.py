"""Health check API endpoints."""

from fastapi import APIRouter, Depends

from ..config import Settings
from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..core.storage.interfaces import IStorage
from .dependencies import get_app_settings, get_storage

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    storage: IStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
):
    """Get overall system health status."""
    health_service = HealthService(storage, settings)
    return await health_service.get_health_status()
