# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasker_pro.config import Settings

_VARS = (
    "TASKER_APP_NAME",
    "TASKER_LOG_LEVEL",
    "TASKER_CONSOLE_ENABLED",
    "TASKER_DEFAULT_USER_ID",
    "TASKER_DATA_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "tasker-pro"
    assert s.log_level == "INFO"
    assert s.console_enabled is True
    assert s.default_user_id is None
    assert s.data_dir == Path(".local/tasker")


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKER_APP_NAME", "todo")
    monkeypatch.setenv("TASKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKER_CONSOLE_ENABLED", "off")
    monkeypatch.setenv("TASKER_DEFAULT_USER_ID", "  alice ")
    monkeypatch.setenv("TASKER_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.console_enabled is False
    assert s.default_user_id == "alice"
    assert s.data_dir == tmp_path


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("yes", True), ("false", False), ("0", False), ("maybe", True), ("", True)],
)
def test_console_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("TASKER_CONSOLE_ENABLED", raw)
    assert Settings.from_env().console_enabled is expected


def test_blank_default_user_means_nobody(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKER_DEFAULT_USER_ID", "   ")
    assert Settings.from_env().default_user_id is None
