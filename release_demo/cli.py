"""Command-line tool printing build, status and demo information.

Exactly one output block is written per invocation. `--version`, `--status`
and `--demo` are checked in that order and the first one set wins; `--json`
switches the chosen block to indented JSON. Without a command flag the help
banner is printed.
"""

import argparse
from collections.abc import Sequence

from release_demo.config import BuildSettings, config_load_build_settings
from release_demo.domain import (
    domain_build_demo_summary,
    domain_present,
    domain_resolve_build_info,
    domain_resolve_status_snapshot,
)

PROGRAM_NAME = "release-demo-cli"

_EXAMPLES = (
    f"  {PROGRAM_NAME} --version",
    f"  {PROGRAM_NAME} --status --json",
    f"  {PROGRAM_NAME} --demo",
)


def cli_create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Parser for the command flags.
    """

    argument_parser = argparse.ArgumentParser(prog=PROGRAM_NAME, usage=f"{PROGRAM_NAME} [flags]")
    argument_parser.add_argument(
        "--version",
        dest="show_version",
        action="store_true",
        help="Show version information",
    )
    argument_parser.add_argument(
        "--status",
        dest="show_status",
        action="store_true",
        help="Show application status",
    )
    argument_parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Output in JSON format",
    )
    argument_parser.add_argument(
        "--demo",
        dest="run_demo",
        action="store_true",
        help="Run demo command",
    )
    return argument_parser


def cli_render_help(argument_parser: argparse.ArgumentParser, version: str) -> str:
    """Render the default help banner.

    Args:
        argument_parser: Parser whose flag help is included.
        version: Build version shown in the banner.

    Returns:
        str: Help block without trailing newline.
    """

    lines = [
        f"GitHub Actions Demo CLI Tool v{version}",
        "",
        "This tool demonstrates multi-platform release automation with GitHub Actions.",
        "",
        argument_parser.format_help().rstrip(),
        "",
        "Examples:",
        *_EXAMPLES,
    ]
    return "\n".join(lines)


def cli_render_output(arguments: argparse.Namespace, build_settings: BuildSettings) -> str:
    """Render the single output block selected by parsed flags.

    Args:
        arguments: Parsed CLI flags.
        build_settings: Build constants for metadata resolution.

    Returns:
        str: Output block without trailing newline.
    """

    if arguments.show_version:
        return domain_present(domain_resolve_build_info(build_settings), json_output=arguments.json_output)

    if arguments.show_status:
        return domain_present(domain_resolve_status_snapshot(build_settings), json_output=arguments.json_output)

    if arguments.run_demo:
        summary = domain_build_demo_summary(domain_resolve_build_info(build_settings))
        return domain_present(summary, json_output=arguments.json_output)

    return cli_render_help(cli_create_argument_parser(), build_settings.version)


def main(argv: Sequence[str] | None = None, build_settings: BuildSettings | None = None) -> None:
    """Parse flags and print one output block.

    Args:
        argv: Optional argument list; defaults to process arguments.
        build_settings: Optional build constants; loaded from environment when omitted.

    Raises:
        SystemExit: Raised by argparse on invalid flags.
        SettingsLoadError: Raised when build metadata cannot be loaded.
    """

    arguments = cli_create_argument_parser().parse_args(argv)
    resolved_build_settings = build_settings or config_load_build_settings()
    print(cli_render_output(arguments, resolved_build_settings))


if __name__ == "__main__":
    main()
