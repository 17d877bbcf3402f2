"""Configuration package for runtime settings and startup validation."""

from .settings import (
    DEFAULT_ENVIRONMENT_NAME,
    DEFAULT_SERVICE_VERSION,
    BuildSettings,
    ServiceSettings,
    SettingsLoadError,
    config_load_build_settings,
    config_load_service_settings,
)

__all__ = [
    "BuildSettings",
    "DEFAULT_ENVIRONMENT_NAME",
    "DEFAULT_SERVICE_VERSION",
    "ServiceSettings",
    "SettingsLoadError",
    "config_load_build_settings",
    "config_load_service_settings",
]
