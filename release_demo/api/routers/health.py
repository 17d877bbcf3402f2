"""Health endpoint router composition for liveness and readiness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from release_demo.config import ServiceSettings
from release_demo.domain import domain_build_health_check, domain_build_readiness_info, domain_record_to_payload


def api_create_health_router(settings: ServiceSettings) -> APIRouter:
    """Create health-check router with static liveness and readiness payloads.

    Args:
        settings: Service settings supplying the reported version.

    Returns:
        APIRouter: Router exposing `/health` and `/ready` endpoints.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return service liveness state.

        Returns:
            JSONResponse: Health payload with service name and version.
        """

        health_check = domain_build_health_check(version=settings.version)
        return JSONResponse(content=domain_record_to_payload(health_check), status_code=status.HTTP_200_OK)

    @router.get("/ready")
    def api_readiness_status() -> JSONResponse:
        """Return service readiness state.

        The dependency checks are fixed labels; no probes are executed.

        Returns:
            JSONResponse: Readiness payload.
        """

        readiness_info = domain_build_readiness_info()
        return JSONResponse(content=domain_record_to_payload(readiness_info), status_code=status.HTTP_200_OK)

    return router
