"""Service layer for concerns outside the note use-cases."""

from .health_service import HealthService

__all__ = ["HealthService"]
