"""Tests for bootstrap logging configuration and application assembly."""

import logging

import pytest
from uvicorn.logging import TRACE_LOG_LEVEL

from release_demo.bootstrap import bootstrap_configure_logging, bootstrap_create_application
from release_demo.config import SettingsLoadError


def test_bootstrap_configure_logging_rejects_unknown_level() -> None:
    """Reject log level names the server does not understand.

    Returns:
        None: Assertions validate level checking.

    Raises:
        AssertionError: Raised when unknown levels are accepted.
    """

    with pytest.raises(ValueError, match="unknown log level"):
        bootstrap_configure_logging("chatty")


def test_bootstrap_configure_logging_accepts_lowercase_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pass the resolved numeric level to logging configuration.

    Returns:
        None: Assertions validate resolved configuration arguments.

    Raises:
        AssertionError: Raised when level is not resolved.
    """

    captured_kwargs: dict[str, object] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured_kwargs.update(kwargs))

    bootstrap_configure_logging("debug")

    assert captured_kwargs["level"] == logging.DEBUG


def test_bootstrap_create_application_wraps_invalid_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError when environment settings are invalid.

    Returns:
        None: Assertions validate startup validation.

    Raises:
        AssertionError: Raised when invalid settings are accepted.
    """

    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(SettingsLoadError):
        bootstrap_create_application()


def test_bootstrap_configure_logging_maps_trace_to_server_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Resolve the server-only TRACE level below DEBUG.

    Returns:
        None: Assertions validate TRACE resolution.

    Raises:
        AssertionError: Raised when TRACE is rejected or misresolved.
    """

    captured_kwargs: dict[str, object] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured_kwargs.update(kwargs))

    bootstrap_configure_logging("TRACE")

    assert captured_kwargs["level"] == TRACE_LOG_LEVEL
    assert TRACE_LOG_LEVEL < logging.DEBUG
