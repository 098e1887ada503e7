"""Integration tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from pathtext.interfaces.cli.app import app


@pytest.fixture
def runner(monkeypatch):
    """CLI runner with default settings."""
    monkeypatch.delenv("PATHTEXT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PATHTEXT_LOG_JSON", raising=False)
    return CliRunner()


def test_describe(runner):
    """Test describing paths as JSON lines."""
    result = runner.invoke(app, ["describe", "/folder/archive.tar.gz", ".hidden"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2

    first = json.loads(lines[0])
    assert first["entryName"] == "archive.tar.gz"
    assert first["completeSuffix"] == "tar.gz"
    assert first["rootKind"] == "unix"

    second = json.loads(lines[1])
    assert second["completeSuffix"] is None
    assert second["isAbsolute"] is False


def test_join(runner):
    """Test joining fragments."""
    result = runner.invoke(app, ["join", "/home/", "/folder", "file.txt"])

    assert result.exit_code == 0
    assert result.output == "/home/folder/file.txt\n"


def test_relative(runner):
    """Test relative paths."""
    result = runner.invoke(app, ["relative", "/root", "/root/sub/file", "/root/a"])

    assert result.exit_code == 0
    assert result.output == "sub/file\na\n"


def test_relative_outside_root(runner):
    """Test paths outside the root fail without traceback."""
    result = runner.invoke(app, ["relative", "/root", "/root/a", "/root2/x"])

    assert result.exit_code == 1
    assert "a\n" in result.output
    assert "not inside /root: /root2/x" in result.output
    assert "Traceback" not in result.output


def test_shorten(runner):
    """Test shortening paths."""
    result = runner.invoke(app, ["shorten", "/home/fooFolder/file.txt", "C:/fooFolder/file.txt"])

    assert result.exit_code == 0
    assert result.output == "/../../file.txt\nC:/../file.txt\n"


def test_set_suffix(runner):
    """Test setting a suffix."""
    result = runner.invoke(app, ["set-suffix", "file.txt", "md"])

    assert result.exit_code == 0
    assert result.output == "file.md\n"


def test_rename(runner):
    """Test renaming a file."""
    result = runner.invoke(app, ["rename", "/folder/archive.tar.gz", "backup"])

    assert result.exit_code == 0
    assert result.output == "/folder/backup.tar.gz\n"


def test_compose(runner):
    """Test composing a file path."""
    result = runner.invoke(app, ["compose", "/home/folder", "filename", "cpp"])
    assert result.output == "/home/folder/filename.cpp\n"

    result = runner.invoke(app, ["compose", "", "archive"])
    assert result.output == "archive\n"


def test_has_ext(runner):
    """Test extension matching exit codes."""
    result = runner.invoke(app, ["has-ext", "file.cpp", "txt", "cpp"])
    assert result.exit_code == 0
    assert result.output == "true\n"

    result = runner.invoke(app, ["has-ext", "file.cpp", "jpg", "pdf"])
    assert result.exit_code == 1
    assert result.output == "false\n"


def test_root(runner):
    """Test printing the root."""
    result = runner.invoke(app, ["root", "d:\\data"])
    assert result.exit_code == 0
    assert result.output == "D:/\n"

    result = runner.invoke(app, ["root", "data/file"])
    assert result.exit_code == 1
    assert "relative path has no root: data/file" in result.output
