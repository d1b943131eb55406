"""Tests for chrono-ai logging setup."""

from __future__ import annotations

import logging
import re

import pytest

from chrono_ai.log import get_logger, setup_logging


def _own_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger().handlers if getattr(h, "_chrono_ai_log_handler", False)
    ]


class TestSetupLogging:
    """Root logger configuration."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", "Warning"])
    def test_sets_root_level(self, level: str) -> None:
        setup_logging(level)

        assert logging.getLogger().level == getattr(logging, level.upper())

    def test_default_level_is_info(self) -> None:
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logging("LOUD")

    def test_repeated_calls_reuse_handler(self) -> None:
        setup_logging("INFO")
        setup_logging("DEBUG")

        handlers = _own_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG


class TestLibraryLoggers:
    """HTTP client libraries are kept quiet unless debugging."""

    def test_http_loggers_held_at_warning(self) -> None:
        setup_logging("INFO")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_http_loggers_follow_debug(self) -> None:
        setup_logging("DEBUG")

        assert logging.getLogger("httpx").level == logging.DEBUG


class TestLogOutput:
    """Format of the emitted lines."""

    def test_line_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("INFO")
        get_logger("chrono_ai.test").info("hello world")

        err = capsys.readouterr().err
        assert re.search(
            r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2} \| INFO +\| chrono_ai\.test \| hello world",
            err,
        )

    def test_debug_filtered_at_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("INFO")
        get_logger("chrono_ai.test").debug("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_debug_shown_at_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("DEBUG")
        get_logger("chrono_ai.test").debug("visible")

        assert "visible" in capsys.readouterr().err

    def test_get_logger_name(self) -> None:
        assert get_logger("chrono_ai.parser").name == "chrono_ai.parser"
