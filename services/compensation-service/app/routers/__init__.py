"""
API routers for compensation service endpoints.
"""

from . import employee_router, health_router

__all__ = ["employee_router", "health_router"]
