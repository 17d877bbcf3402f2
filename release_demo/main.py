"""Microservice entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import logging
from collections.abc import Sequence

import uvicorn

from release_demo.bootstrap import bootstrap_configure_logging, bootstrap_create_application
from release_demo.config import config_load_service_settings

logger = logging.getLogger(__name__)


def main_parse_port(value: str) -> int:
    """Parse a `--port` argument within the TCP port range.

    Args:
        value: Raw command-line value.

    Returns:
        int: Port number between 1 and 65535.

    Raises:
        argparse.ArgumentTypeError: Raised when value is not a valid port.
    """

    try:
        port = int(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"invalid port: {value}") from error
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be between 1 and 65535: {value}")
    return port


def main(argv: Sequence[str] | None = None) -> None:
    """Start the microservice with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised by argparse on invalid overrides.
    """

    argument_parser = argparse.ArgumentParser(description="Secure microservice runtime entrypoint")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional bind host override for the `HOST` setting",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=main_parse_port,
        help="Optional bind port override for the `PORT` setting",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_service_settings()
    bootstrap_configure_logging(settings.log_level)
    host = parsed_arguments.host if parsed_arguments.host is not None else settings.host
    port = parsed_arguments.port if parsed_arguments.port is not None else settings.port

    application = bootstrap_create_application(settings=settings)
    logger.info(
        "Secure microservice starting on %s:%s (version=%s, environment=%s)",
        host,
        port,
        settings.version,
        settings.environment,
    )
    uvicorn.run(application, host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
