"""Application bootstrap wiring for startup validation and logging setup."""

import logging

from fastapi import FastAPI
from uvicorn.config import LOG_LEVELS

from release_demo.api import create_api_application
from release_demo.config import ServiceSettings, config_load_service_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def bootstrap_configure_logging(log_level: str) -> None:
    """Configure root logging for the service process.

    Args:
        log_level: Uvicorn logging level name such as `INFO`, `DEBUG` or `TRACE`.

    Raises:
        ValueError: Raised when log_level is not a known level name.
    """

    resolved_level = LOG_LEVELS.get(log_level.strip().lower())
    if resolved_level is None:
        raise ValueError(f"unknown log level: {log_level}")
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def bootstrap_create_application(settings: ServiceSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_service_settings()
    return create_api_application(settings=resolved_settings)
