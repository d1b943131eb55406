"""Shared fixtures for chrono-ai tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

_ENV_VARS = (
    "OPENAI_API_KEY",
    "CHRONO_MODEL",
    "CHRONO_API_URL",
    "CHRONO_TIMEOUT",
    "LOG_LEVEL",
    "TIMEZONE",
    "GOOGLE_CREDENTIALS_PATH",
    "GOOGLE_TOKEN_PATH",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all chrono-ai environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("chrono_ai.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def monkeypatch_env(
    monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> dict[str, str]:
    """Set the required environment variables to valid defaults.

    Returns the dict of variables so tests can inspect or override values.
    """
    env_vars = {"OPENAI_API_KEY": "sk-test-12345"}
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root logger after each test to prevent handler leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
