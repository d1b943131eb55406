"""Configuration loading for chrono-ai.

Reads settings from environment variables (with .env support via python-dotenv)
and validates that all required values are present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from chrono_ai.llm import DEFAULT_ENDPOINT
from chrono_ai.prompts import DEFAULT_MODEL


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        api_key: Bearer token for the chat-completion provider.
        model: Provider model identifier (default ``"gpt-3.5-turbo"``).
        api_url: Chat-completions endpoint URL.
        timeout: Provider request timeout in seconds (default ``30.0``).
        log_level: Logging level (default ``"INFO"``).
        timezone: IANA timezone recorded on created events
            (default ``"UTC"``).
        google_credentials_path: OAuth client secrets file.
        google_token_path: Cached OAuth token file.
    """

    api_key: str
    model: str = DEFAULT_MODEL
    api_url: str = DEFAULT_ENDPOINT
    timeout: float = 30.0
    log_level: str = "INFO"
    timezone: str = "UTC"
    google_credentials_path: str = "credentials.json"
    google_token_path: str = "token.json"

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', "
            f"model={self.model!r}, "
            f"api_url={self.api_url!r}, "
            f"timeout={self.timeout!r}, "
            f"log_level={self.log_level!r}, "
            f"timezone={self.timezone!r})"
        )


_OPTIONAL_VARS = {
    "CHRONO_MODEL": "model",
    "CHRONO_API_URL": "api_url",
    "LOG_LEVEL": "log_level",
    "TIMEZONE": "timezone",
    "GOOGLE_CREDENTIALS_PATH": "google_credentials_path",
    "GOOGLE_TOKEN_PATH": "google_token_path",
}


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the project root
    is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``OPENAI_API_KEY`` is missing, empty, or
            whitespace-only, or if ``CHRONO_TIMEOUT`` is not a positive
            number.
    """
    load_dotenv()

    api_key = os.environ.get("OPENAI_API_KEY", "")
    if not api_key.strip():
        raise ConfigError("Missing required environment variables: OPENAI_API_KEY")

    values: dict[str, object] = {"api_key": api_key}

    # Optional settings with defaults handled by the dataclass.
    for env_var, field_name in _OPTIONAL_VARS.items():
        raw = os.environ.get(env_var, "").strip()
        if raw:
            values[field_name] = raw

    raw_timeout = os.environ.get("CHRONO_TIMEOUT", "").strip()
    if raw_timeout:
        values["timeout"] = _parse_timeout(raw_timeout)

    return Settings(**values)


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"CHRONO_TIMEOUT must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigError(f"CHRONO_TIMEOUT must be positive, got {raw!r}")
    return timeout
