"""Static payload builders for the CLI demo and the microservice endpoints.

Readiness checks are fixed labels, not dependency probes.
"""

from datetime import datetime, timezone

from .metadata import domain_resolve_environment, domain_resolve_service_version, domain_runtime_version
from .models import BuildInfo, DemoSummary, HealthCheck, ReadinessInfo, RuntimeInfo, ServiceInfo
from .presenter import domain_format_timestamp

SERVICE_NAME = "secure-microservice"
SERVICE_DISPLAY_NAME = "GitHub Actions Security Demo"
RELEASE_WORKFLOW_NAME = "02-multi-platform-release.yml"

DEMO_FEATURES = (
    "Cross-platform compilation",
    "Automated releases",
    "GitHub CLI integration",
    "Docker multi-arch images",
    "Package signing",
    "SBOM generation",
)

DEMO_PLATFORMS = (
    "linux/amd64",
    "linux/arm64",
    "darwin/amd64",
    "darwin/arm64",
    "windows/amd64",
)

READINESS_CHECKS = {
    "database": "connected",
    "external_apis": "available",
    "cache": "healthy",
}

SECURITY_FEATURES = (
    "HTTPS only",
    "CORS protection",
    "Input validation",
    "Rate limiting",
    "Security headers",
)

COMPLIANCE_PROGRAMS = (
    "SOC 2",
    "GDPR",
    "HIPAA ready",
)

SECURITY_CONTROLS = {
    "code_scanning": "CodeQL enabled",
    "dependency_scanning": "Trivy + pip-audit",
    "container_scanning": "Trivy container scan",
    "secret_scanning": "TruffleHog",
    "policy_validation": "OPA policies",
    "image_signing": "Cosign",
    "sbom_generation": "Syft",
}

SERVICE_FEATURES = (
    "OIDC authentication",
    "Multi-stage Docker builds",
    "Non-root containers",
    "Resource limits",
    "Health checks",
    "Readiness probes",
    "Security policies",
)


def _utc_now(now: datetime | None) -> datetime:
    return now or datetime.now(timezone.utc)


def domain_build_demo_summary(build_info: BuildInfo, now: datetime | None = None) -> DemoSummary:
    """Build the CLI demo summary around resolved build metadata.

    Args:
        build_info: Resolved build metadata.
        now: Optional summary time; defaults to current UTC time.

    Returns:
        DemoSummary: Demo payload.
    """

    return DemoSummary(
        message="Welcome to the GitHub Actions Multi-Platform Release Demo! 🚀",
        description="This CLI tool showcases automated cross-platform builds and releases",
        features=DEMO_FEATURES,
        platforms=DEMO_PLATFORMS,
        workflow=RELEASE_WORKFLOW_NAME,
        build_info={
            "version": build_info.version,
            "commit": build_info.commit,
            "platform": build_info.platform,
            "runtime_version": build_info.runtime_version,
        },
        timestamp=domain_format_timestamp(_utc_now(now)),
    )


def domain_build_health_check(version: str | None, now: datetime | None = None) -> HealthCheck:
    """Build the liveness payload."""

    return HealthCheck(
        status="healthy",
        timestamp=_utc_now(now),
        version=domain_resolve_service_version(version),
        service=SERVICE_NAME,
    )


def domain_build_readiness_info(now: datetime | None = None) -> ReadinessInfo:
    """Build the readiness payload with fixed check labels."""

    return ReadinessInfo(status="ready", timestamp=_utc_now(now), checks=READINESS_CHECKS)


def domain_build_runtime_info(version: str | None, environment: str | None) -> RuntimeInfo:
    """Build the service and runtime description payload.

    Args:
        version: Service version label, possibly missing.
        environment: Environment label, possibly missing.

    Returns:
        RuntimeInfo: Info payload with defaults applied.
    """

    return RuntimeInfo(
        service=SERVICE_NAME,
        version=domain_resolve_service_version(version),
        environment=domain_resolve_environment(environment),
        runtime=domain_runtime_version(),
        security_features=SECURITY_FEATURES,
        compliance=COMPLIANCE_PROGRAMS,
    )


def domain_build_service_info(version: str | None, environment: str | None) -> ServiceInfo:
    """Build the release pipeline description payload."""

    return ServiceInfo(
        name=SERVICE_DISPLAY_NAME,
        version=domain_resolve_service_version(version),
        environment=domain_resolve_environment(environment),
        security=SECURITY_CONTROLS,
        features=SERVICE_FEATURES,
    )
