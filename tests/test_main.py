"""Tests for the microservice entrypoint wiring.

These tests validate the arguments handed to uvicorn, command-line overrides
and startup configuration failures without starting a server.
"""

import logging

import pytest
import uvicorn
from fastapi import FastAPI

from release_demo.config import SettingsLoadError
from release_demo.main import main

_SERVICE_ENV_NAMES = ("VERSION", "ENVIRONMENT", "PORT", "HOST", "LOG_LEVEL")


@pytest.fixture
def captured_run(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    """Replace server startup and logging setup with recording stubs.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        dict[str, object]: Arguments passed to `uvicorn.run` and `logging.basicConfig`.
    """

    for name in _SERVICE_ENV_NAMES:
        monkeypatch.delenv(name, raising=False)

    captured: dict[str, object] = {}

    def _record_run(application: object, **kwargs: object) -> None:
        captured["application"] = application
        captured.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", _record_run)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(root_level=kwargs["level"]))
    return captured


def test_main_runs_application_with_default_settings(captured_run: dict[str, object]) -> None:
    """Serve on the default host and port at INFO level.

    Returns:
        None: Assertions validate uvicorn arguments.

    Raises:
        AssertionError: Raised when startup arguments differ.
    """

    main([])

    assert isinstance(captured_run["application"], FastAPI)
    assert captured_run["host"] == "0.0.0.0"
    assert captured_run["port"] == 8080
    assert captured_run["log_level"] == "info"
    assert captured_run["root_level"] == logging.INFO


def test_main_reads_environment_settings(monkeypatch: pytest.MonkeyPatch, captured_run: dict[str, object]) -> None:
    """Use `HOST`, `PORT` and `LOG_LEVEL` from the environment.

    Returns:
        None: Assertions validate environment-driven startup.

    Raises:
        AssertionError: Raised when environment values are ignored.
    """

    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    main([])

    assert captured_run["host"] == "127.0.0.1"
    assert captured_run["port"] == 9000
    assert captured_run["log_level"] == "warning"
    assert captured_run["root_level"] == logging.WARNING


def test_main_command_line_overrides_environment(
    monkeypatch: pytest.MonkeyPatch,
    captured_run: dict[str, object],
) -> None:
    """Prefer `--host` and `--port` over environment settings.

    Returns:
        None: Assertions validate override precedence.

    Raises:
        AssertionError: Raised when overrides are ignored.
    """

    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")

    main(["--host", "localhost", "--port", "9100"])

    assert captured_run["host"] == "localhost"
    assert captured_run["port"] == 9100


@pytest.mark.parametrize("port_value", ["0", "70000", "http"])
def test_main_rejects_out_of_range_port_override(captured_run: dict[str, object], port_value: str) -> None:
    """Exit with argparse usage error for invalid `--port` values.

    Returns:
        None: Assertions validate port override checking.

    Raises:
        AssertionError: Raised when invalid ports reach uvicorn.
    """

    with pytest.raises(SystemExit) as exit_info:
        main(["--port", port_value])

    assert exit_info.value.code == 2
    assert "application" not in captured_run


@pytest.mark.parametrize(
    ("env_name", "env_value"),
    [("LOG_LEVEL", "WARN"), ("LOG_LEVEL", "chatty"), ("PORT", "70000"), ("PORT", "not-a-port")],
)
def test_main_raises_settings_error_for_invalid_environment(
    monkeypatch: pytest.MonkeyPatch,
    captured_run: dict[str, object],
    env_name: str,
    env_value: str,
) -> None:
    """Raise SettingsLoadError before startup for invalid settings.

    Returns:
        None: Assertions validate startup configuration errors.

    Raises:
        AssertionError: Raised when invalid settings reach uvicorn.
    """

    monkeypatch.setenv(env_name, env_value)

    with pytest.raises(SettingsLoadError):
        main([])

    assert "application" not in captured_run
