"""API router package for endpoint composition."""

from .health import api_create_health_router
from .info import api_create_info_router, api_create_service_router

__all__ = ["api_create_health_router", "api_create_info_router", "api_create_service_router"]
