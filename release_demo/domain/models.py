"""Typed domain models shared across runtime layers.

Every record here is rebuilt for each CLI invocation or HTTP request and is
discarded after it has been rendered.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType


class SnapshotStatus(str, Enum):
    """Lifecycle status reported by status snapshots."""

    RUNNING = "running"


def _readonly_mapping(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


@dataclass(frozen=True)
class BuildInfo:
    """Identity of the built artifact and the runtime executing it.

    Attributes:
        version: Release version of the artifact.
        commit: Source revision the artifact was built from.
        build_date: Build timestamp text.
        runtime_version: Interpreter version executing the artifact.
        platform: Operating system and machine pair, e.g. `linux/x86_64`.
    """

    version: str
    commit: str
    build_date: str
    runtime_version: str
    platform: str


@dataclass(frozen=True)
class StatusSnapshot:
    """Point-in-time status report for the CLI `--status` command.

    Attributes:
        status: Lifecycle status value.
        timestamp: UTC time the snapshot was taken.
        build: Build metadata at snapshot time.
    """

    status: SnapshotStatus
    timestamp: datetime
    build: BuildInfo


@dataclass(frozen=True)
class DemoSummary:
    """Payload for the CLI `--demo` command.

    Attributes:
        message: Welcome banner text.
        description: One-line tool description.
        features: Release automation features being demonstrated.
        platforms: Target platforms of the release matrix.
        workflow: Workflow file name driving the release.
        build_info: Read-only subset of build metadata shown in the demo.
        timestamp: RFC 3339 time the summary was produced, second precision.
    """

    message: str
    description: str
    features: tuple[str, ...]
    platforms: tuple[str, ...]
    workflow: str
    build_info: Mapping[str, str] = field(hash=False)
    timestamp: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "build_info", _readonly_mapping(self.build_info))


@dataclass(frozen=True)
class HealthCheck:
    """Liveness payload served by `/health`."""

    status: str
    timestamp: datetime
    version: str
    service: str


@dataclass(frozen=True)
class ReadinessInfo:
    """Readiness payload served by `/ready`.

    Attributes:
        status: Overall readiness label.
        timestamp: UTC time the payload was produced.
        checks: Read-only dependency name to fixed state label.
    """

    status: str
    timestamp: datetime
    checks: Mapping[str, str] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "checks", _readonly_mapping(self.checks))


@dataclass(frozen=True)
class RuntimeInfo:
    """Service and runtime description served by `/info`."""

    service: str
    version: str
    environment: str
    runtime: str
    security_features: tuple[str, ...]
    compliance: tuple[str, ...]


@dataclass(frozen=True)
class ServiceInfo:
    """Release pipeline description served by `/api/v1/service`.

    Attributes:
        name: Human-readable service name.
        version: Service version label.
        environment: Runtime environment label.
        security: Read-only pipeline control name to the tool enforcing it.
        features: Deployment features of the service.
    """

    name: str
    version: str
    environment: str
    security: Mapping[str, str] = field(hash=False)
    features: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "security", _readonly_mapping(self.security))
