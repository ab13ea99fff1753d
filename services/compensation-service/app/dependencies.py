"""
Shared dependencies for the application.

Provides dependency injection functions used across routers.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .services.compensation_service import CompensationService

# Service instance (set by main app during startup)
_compensation_service: Optional["CompensationService"] = None


def set_compensation_service(service: Optional["CompensationService"]) -> None:
    """
    Set the compensation service instance.

    Called by the app lifespan on startup, and with None on shutdown.
    """
    global _compensation_service
    _compensation_service = service


async def get_compensation_service() -> "CompensationService":
    """
    Get compensation service instance for dependency injection.

    Used by all routers that need the compensation service.
    """
    if _compensation_service is None:
        raise RuntimeError("Compensation service not initialized")
    return _compensation_service
