"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from uvicorn.config import LOG_LEVELS

DEFAULT_SERVICE_VERSION = "1.0.0"
DEFAULT_ENVIRONMENT_NAME = "development"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class ServiceSettings(BaseSettings):
    """Microservice settings read from environment and dotenv.

    Environment variable names map directly to field names in uppercase.
    Example: `port` reads from `PORT`.

    Attributes:
        version: Service version label reported by info endpoints.
        environment: Runtime environment label.
        host: Host interface for web server binding.
        port: Web server port.
        log_level: Logging level name shared by root logging and uvicorn.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
        case_sensitive=False,
    )

    version: str = Field(default=DEFAULT_SERVICE_VERSION)
    environment: str = Field(default=DEFAULT_ENVIRONMENT_NAME)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    @field_validator("version")
    @classmethod
    def _default_blank_version(cls, value: str) -> str:
        stripped_value = value.strip()
        return stripped_value or DEFAULT_SERVICE_VERSION

    @field_validator("environment")
    @classmethod
    def _default_blank_environment(cls, value: str) -> str:
        stripped_value = value.strip()
        return stripped_value or DEFAULT_ENVIRONMENT_NAME

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper() or "INFO"
        if normalized_value.lower() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(name.upper() for name in LOG_LEVELS)}")
        return normalized_value


class BuildSettings(BaseSettings):
    """Build metadata injected when the artifact is produced.

    Release pipelines export `BUILD_VERSION`, `BUILD_COMMIT` and `BUILD_DATE`
    (or write them to `.env`) so that the packaged tools can identify the
    exact build they came from.

    Attributes:
        version: Release version of the built artifact.
        commit: Source control revision the artifact was built from.
        date: Build timestamp text.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUILD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
        case_sensitive=False,
    )

    version: str = Field(default="dev")
    commit: str = Field(default="unknown")
    date: str = Field(default="unknown")


def config_load_service_settings() -> ServiceSettings:
    """Load and validate microservice settings from environment and dotenv.

    Returns:
        ServiceSettings: Validated service settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return ServiceSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_build_settings() -> BuildSettings:
    """Load build metadata settings.

    Returns:
        BuildSettings: Build metadata with defaults for local builds.

    Raises:
        SettingsLoadError: Raised when build metadata cannot be loaded.
    """

    try:
        return BuildSettings()
    except ValidationError as error:
        raise SettingsLoadError(f"Build metadata validation failed. Details: {error}") from error
