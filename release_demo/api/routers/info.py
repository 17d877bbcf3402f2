"""Info router composition for runtime and release pipeline descriptions."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from release_demo.config import ServiceSettings
from release_demo.domain import domain_build_runtime_info, domain_build_service_info, domain_record_to_payload


def api_create_info_router(settings: ServiceSettings) -> APIRouter:
    """Create router exposing `/info`.

    Args:
        settings: Service settings supplying version and environment labels.

    Returns:
        APIRouter: Router exposing the runtime info endpoint.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_runtime_info() -> JSONResponse:
        """Return service, runtime and compliance description."""

        runtime_info = domain_build_runtime_info(version=settings.version, environment=settings.environment)
        return JSONResponse(content=domain_record_to_payload(runtime_info), status_code=status.HTTP_200_OK)

    return router


def api_create_service_router(settings: ServiceSettings) -> APIRouter:
    """Create versioned API router exposing `/api/v1/service`.

    Args:
        settings: Service settings supplying version and environment labels.

    Returns:
        APIRouter: Router mounted under `/api/v1`.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(prefix="/api/v1", tags=["service"])

    @router.get("/service")
    def api_service_info() -> JSONResponse:
        """Return the release pipeline security description.

        Returns:
            JSONResponse: Service info payload.
        """

        service_info = domain_build_service_info(version=settings.version, environment=settings.environment)
        return JSONResponse(content=domain_record_to_payload(service_info), status_code=status.HTTP_200_OK)

    return router
