"""Text and JSON presentation of domain records.

Every record can be rendered as indented JSON. Records shown by the CLI also
have a fixed human-readable template.
"""

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from .models import BuildInfo, DemoSummary, StatusSnapshot

JSON_INDENT = 2
DEMO_RULE_WIDTH = 46


def domain_repeat(text: str, count: int) -> str:
    """Return `text` concatenated `count` times; non-positive counts yield `""`."""

    if count <= 0:
        return ""
    return text * count


def domain_format_timestamp(value: datetime) -> str:
    """Format a timestamp as RFC 3339 with second precision.

    Args:
        value: Timestamp to format; naive values are rendered without offset.

    Returns:
        str: Timestamp text, using `Z` for UTC.
    """

    rendered_value = value.isoformat(timespec="seconds")
    if rendered_value.endswith("+00:00"):
        return rendered_value[: -len("+00:00")] + "Z"
    return rendered_value


def _payload_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {field.name: _payload_value(getattr(value, field.name)) for field in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(key): _payload_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_payload_value(item) for item in value]
    return value


def domain_record_to_payload(record: Any) -> dict[str, Any]:
    """Convert a domain record into a JSON-compatible mapping.

    Args:
        record: Dataclass instance or plain mapping.

    Returns:
        dict[str, Any]: Mapping with datetimes as ISO 8601 text and enums as values.

    Raises:
        TypeError: Raised when record is neither a dataclass instance nor a mapping.
    """

    if isinstance(record, Mapping) or (is_dataclass(record) and not isinstance(record, type)):
        return _payload_value(record)
    raise TypeError(f"unsupported record type: {type(record).__name__}")


def domain_render_json(record: Any) -> str:
    """Render a record as indented JSON text."""

    return json.dumps(domain_record_to_payload(record), indent=JSON_INDENT, ensure_ascii=False)


def domain_render_build_info_text(build_info: BuildInfo) -> str:
    """Render the `--version` text block."""

    return "\n".join(
        [
            "GitHub Actions Demo CLI Tool",
            f"Version:    {build_info.version}",
            f"Commit:     {build_info.commit}",
            f"Build Date: {build_info.build_date}",
            f"Runtime:    {build_info.runtime_version}",
            f"Platform:   {build_info.platform}",
        ]
    )


def domain_render_status_text(snapshot: StatusSnapshot) -> str:
    """Render the `--status` text block."""

    return "\n".join(
        [
            f"Status: {snapshot.status.value}",
            f"Timestamp: {domain_format_timestamp(snapshot.timestamp)}",
            f"Version: {snapshot.build.version}",
            f"Platform: {snapshot.build.platform}",
        ]
    )


def domain_render_demo_text(summary: DemoSummary) -> str:
    """Render the `--demo` text block.

    Args:
        summary: Demo payload to render.

    Returns:
        str: Multi-line banner with features, platforms and workflow.
    """

    lines = [
        "🚀 GitHub Actions Multi-Platform Release Demo",
        domain_repeat("=", DEMO_RULE_WIDTH),
        "",
        f"Version: {summary.build_info['version']}",
        f"Platform: {summary.build_info['platform']}",
        f"Built with: {summary.build_info['runtime_version']}",
        "",
        "✨ Features:",
    ]
    lines.extend(f"  • {feature}" for feature in summary.features)
    lines.extend(["", "🖥️  Supported Platforms:"])
    lines.extend(f"  • {platform_name}" for platform_name in summary.platforms)
    lines.extend(
        [
            "",
            f"📋 Workflow: {summary.workflow}",
            "",
            "This tool demonstrates how GitHub Actions can:",
            "• Build artifacts for multiple operating systems and architectures",
            "• Create automated releases with semantic versioning",
            "• Generate checksums and sign artifacts",
            "• Build and push multi-architecture Docker images",
            "• Create Homebrew formulas and package distributions",
        ]
    )
    return "\n".join(lines)


_TEXT_RENDERERS: dict[type, Callable[[Any], str]] = {
    BuildInfo: domain_render_build_info_text,
    StatusSnapshot: domain_render_status_text,
    DemoSummary: domain_render_demo_text,
}


def domain_present(record: Any, json_output: bool) -> str:
    """Render a record as JSON or with its text template.

    Args:
        record: Domain record to render.
        json_output: Render indented JSON when true.

    Returns:
        str: Rendered output block without trailing newline.

    Raises:
        TypeError: Raised when text output is requested for a record without a template.
    """

    if json_output:
        return domain_render_json(record)

    renderer = _TEXT_RENDERERS.get(type(record))
    if renderer is None:
        raise TypeError(f"no text template for record type: {type(record).__name__}")
    return renderer(record)
