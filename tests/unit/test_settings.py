"""Unit tests for settings and logging setup."""

import structlog

from pathtext.infrastructure.config.settings import Settings
from pathtext.infrastructure.observability.logging import configure_logging


def test_settings_defaults(monkeypatch):
    """Test default settings."""
    monkeypatch.delenv("PATHTEXT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PATHTEXT_LOG_JSON", raising=False)

    settings = Settings(_env_file=None)

    assert settings.log_level == "WARNING"
    assert settings.log_json is False


def test_settings_from_env(monkeypatch):
    """Test settings loaded from prefixed environment variables."""
    monkeypatch.setenv("PATHTEXT_LOG_LEVEL", "debug")
    monkeypatch.setenv("PATHTEXT_LOG_JSON", "true")

    settings = Settings(_env_file=None)

    assert settings.log_level == "debug"
    assert settings.log_json is True


def test_configure_logging_json(capsys):
    """Test JSON logs are written to stderr."""
    configure_logging(Settings(_env_file=None, log_level="INFO", log_json=True))

    structlog.get_logger().info("something_happened", path="/a")
    structlog.get_logger().debug("filtered_out")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert '"event": "something_happened"' in captured.err
    assert '"path": "/a"' in captured.err
    assert "filtered_out" not in captured.err


def test_configure_logging_unknown_level_falls_back(capsys):
    """Test an unknown level name falls back to warnings only."""
    configure_logging(Settings(_env_file=None, log_level="chatty"))

    structlog.get_logger().info("hidden_event")
    structlog.get_logger().warning("shown_event")

    captured = capsys.readouterr()
    assert "hidden_event" not in captured.err
    assert "shown_event" in captured.err
