"""Build and runtime metadata resolution.

Build constants arrive through `BuildSettings`; runtime identifiers come from
the running interpreter. Absent or blank values always resolve to defaults.
"""

import platform
from datetime import datetime, timezone

from release_demo.config import DEFAULT_ENVIRONMENT_NAME, DEFAULT_SERVICE_VERSION, BuildSettings

from .models import BuildInfo, SnapshotStatus, StatusSnapshot


def domain_runtime_version() -> str:
    """Return the interpreter identifier, e.g. `python3.12.4`."""

    return f"python{platform.python_version()}"


def domain_runtime_platform() -> str:
    """Return the `<system>/<machine>` pair of the running host.

    Returns:
        str: Lower-case platform pair, e.g. `linux/x86_64`.
    """

    system_name = platform.system().lower() or "unknown"
    machine_name = platform.machine().lower() or "unknown"
    return f"{system_name}/{machine_name}"


def domain_resolve_build_info(build_settings: BuildSettings) -> BuildInfo:
    """Resolve the build metadata snapshot for the current process.

    Args:
        build_settings: Build constants injected when the artifact was produced.

    Returns:
        BuildInfo: Immutable build metadata record.

    Raises:
        ValueError: Raised when build_settings is None.
    """

    if build_settings is None:
        raise ValueError("build_settings must not be None")

    return BuildInfo(
        version=build_settings.version,
        commit=build_settings.commit,
        build_date=build_settings.date,
        runtime_version=domain_runtime_version(),
        platform=domain_runtime_platform(),
    )


def domain_resolve_status_snapshot(build_settings: BuildSettings, now: datetime | None = None) -> StatusSnapshot:
    """Resolve a running-status snapshot.

    Args:
        build_settings: Build constants injected when the artifact was produced.
        now: Optional snapshot time; defaults to current UTC time.

    Returns:
        StatusSnapshot: Snapshot with `running` status.
    """

    return StatusSnapshot(
        status=SnapshotStatus.RUNNING,
        timestamp=now or datetime.now(timezone.utc),
        build=domain_resolve_build_info(build_settings),
    )


def domain_resolve_service_version(value: str | None) -> str:
    """Return the service version, defaulting missing or blank values."""

    return (value or "").strip() or DEFAULT_SERVICE_VERSION


def domain_resolve_environment(value: str | None) -> str:
    """Return the environment label, defaulting missing or blank values."""

    return (value or "").strip() or DEFAULT_ENVIRONMENT_NAME
