"""Domain models, metadata resolution and presentation."""

from .metadata import (
    domain_resolve_build_info,
    domain_resolve_environment,
    domain_resolve_service_version,
    domain_resolve_status_snapshot,
    domain_runtime_platform,
    domain_runtime_version,
)
from .models import (
    BuildInfo,
    DemoSummary,
    HealthCheck,
    ReadinessInfo,
    RuntimeInfo,
    ServiceInfo,
    SnapshotStatus,
    StatusSnapshot,
)
from .payloads import (
    domain_build_demo_summary,
    domain_build_health_check,
    domain_build_readiness_info,
    domain_build_runtime_info,
    domain_build_service_info,
)
from .presenter import (
    domain_format_timestamp,
    domain_present,
    domain_record_to_payload,
    domain_render_json,
    domain_repeat,
)

__all__ = [
    "BuildInfo",
    "DemoSummary",
    "HealthCheck",
    "ReadinessInfo",
    "RuntimeInfo",
    "ServiceInfo",
    "SnapshotStatus",
    "StatusSnapshot",
    "domain_build_demo_summary",
    "domain_build_health_check",
    "domain_build_readiness_info",
    "domain_build_runtime_info",
    "domain_build_service_info",
    "domain_format_timestamp",
    "domain_present",
    "domain_record_to_payload",
    "domain_render_json",
    "domain_repeat",
    "domain_resolve_build_info",
    "domain_resolve_environment",
    "domain_resolve_service_version",
    "domain_resolve_status_snapshot",
    "domain_runtime_platform",
    "domain_runtime_version",
]
