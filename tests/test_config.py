"""Tests for environment-driven settings."""

import os

import pytest

from missing_refs.config import configure_logging, load_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(os, "environ", os.environ.copy())
    for name in ("PROJECT", "LOG_LEVEL", "CLEAR_CONSOLE", "PLATFORM", "PROGRESS"):
        monkeypatch.delenv(f"MISSING_REFS_{name}", raising=False)


def test_defaults() -> None:
    settings = load_settings()

    assert settings.project_path == ""
    assert settings.log_level == "INFO"
    assert settings.clear_console is True
    assert settings.show_progress is True


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MISSING_REFS_PROJECT", "dump/project.json")
    monkeypatch.setenv("MISSING_REFS_LOG_LEVEL", "debug")
    monkeypatch.setenv("MISSING_REFS_CLEAR_CONSOLE", "no")
    monkeypatch.setenv("MISSING_REFS_PLATFORM", "win32")
    monkeypatch.setenv("MISSING_REFS_PROGRESS", "0")

    settings = load_settings()

    assert settings.project_path == "dump/project.json"
    assert settings.log_level == "DEBUG"
    assert settings.clear_console is False
    assert settings.platform == "win32"
    assert settings.show_progress is False


def test_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("MISSING_REFS_PLATFORM=darwin\n", encoding="utf-8")

    assert load_settings().platform == "darwin"


def test_bad_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MISSING_REFS_PROGRESS", "sometimes")

    with pytest.raises(ValueError):
        load_settings()


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("chatty")
    configure_logging("warning")
