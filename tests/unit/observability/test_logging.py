"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from optval.config.settings import DotenvSettingsLoader, LoggingSettings
from optval.observability.logging import JsonLoggerFactory, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_returns_logger_with_methods(self) -> None:
        logger = get_logger("optval.test")
        for method in ("debug", "info", "warning", "error", "critical"):
            assert callable(getattr(logger, method))

    def test_binds_initial_values(self) -> None:
        logger = get_logger("optval.test", component="kernel")
        with capture_logs() as logs:
            logger.info("hello")
        assert logs == [{"component": "kernel", "event": "hello", "log_level": "info"}]


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_sets_root_level_and_single_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG, cache_logger_on_first_use=False)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, cache_logger_on_first_use=False)
        get_logger("optval.json").info("option.checked", present=True)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "option.checked"
        assert payload["present"] is True
        assert payload["level"] == "info"
        assert payload["logger"] == "optval.json"
        assert "timestamp" in payload

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, json=False, cache_logger_on_first_use=False)
        get_logger("optval.console").warning("option.checked")
        out = capsys.readouterr().err
        assert "option.checked" in out
        with pytest.raises(json.JSONDecodeError):
            json.loads(out.strip().splitlines()[-1])

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING, cache_logger_on_first_use=False)
        get_logger("optval.quiet").debug("option.unwrap_absent")
        assert "option.unwrap_absent" not in capsys.readouterr().err


# ---------------------------------------------------------------------------
# configure_logging
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    def test_uses_given_settings(self) -> None:
        applied = configure_logging(LoggingSettings(level="ERROR"))
        assert applied.level == "ERROR"
        assert logging.getLogger().level == logging.ERROR

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTVAL_LOG_LEVEL", "info")
        monkeypatch.setenv("OPTVAL_LOG_JSON", "1")
        applied = configure_logging()
        assert applied == LoggingSettings(level="INFO", json=True)
        assert logging.getLogger().level == logging.INFO

    def test_loads_through_dotenv_loader(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        # setenv first so monkeypatch restores the variables dotenv rewrites
        monkeypatch.setenv("OPTVAL_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("OPTVAL_LOG_JSON", "0")
        env_file = tmp_path / ".env"
        env_file.write_text("OPTVAL_LOG_LEVEL=DEBUG\nOPTVAL_LOG_JSON=true\n")
        applied = configure_logging(loader=DotenvSettingsLoader(env_file, override=True))
        assert applied == LoggingSettings(level="DEBUG", json=True)
        assert logging.getLogger().level == logging.DEBUG
