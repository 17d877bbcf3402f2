"""FastAPI application factory for the static microservice.

Every handler builds a fresh payload per request; the application holds no
mutable state beyond the settings it was created with.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from release_demo.config import ServiceSettings

from .routers import api_create_health_router, api_create_info_router, api_create_service_router

_ERROR_LABELS = {
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def create_api_application(settings: ServiceSettings) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated service settings used for payload metadata.

    Returns:
        FastAPI: Application with health, readiness and info routes.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Secure Microservice", version=settings.version)

    @application.exception_handler(StarletteHTTPException)
    async def api_http_error(request: Request, error: StarletteHTTPException) -> JSONResponse:
        """Render routing errors as JSON bodies naming the requested path.

        Args:
            request: Incoming request that failed routing.
            error: HTTP error raised by the router.

        Returns:
            JSONResponse: Error payload with the original status code.
        """

        payload = {
            "error": _ERROR_LABELS.get(error.status_code, str(error.detail)),
            "path": request.url.path,
        }
        return JSONResponse(content=payload, status_code=error.status_code, headers=error.headers)

    application.include_router(api_create_health_router(settings=settings))
    application.include_router(api_create_info_router(settings=settings))
    application.include_router(api_create_service_router(settings=settings))

    return application
