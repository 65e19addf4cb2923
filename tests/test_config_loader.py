"""Tests for the configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from config.loader import ConfigLoader


def test_returns_default_when_unset() -> None:
    loader = ConfigLoader(environ={})
    assert loader.get("COPILOT_REQUEST_TIMEOUT", 60.0) == 60.0
    assert loader.get("COPILOT_EDITOR_VERSION", "Neovim/0.9.0") == "Neovim/0.9.0"


@pytest.mark.parametrize("raw, expected", [("true", True), ("1", True), ("YES", True), ("off", False), ("0", False)])
def test_bool_coercion(raw: str, expected: bool) -> None:
    loader = ConfigLoader(environ={"COPILOT_CACHE_SESSION_TOKEN": raw})
    assert loader.get("COPILOT_CACHE_SESSION_TOKEN", False) is expected


def test_numeric_coercion() -> None:
    loader = ConfigLoader(environ={"COPILOT_TOKEN_EXPIRY_SKEW": "30", "COPILOT_REQUEST_TIMEOUT": "12.5"})
    assert loader.get("COPILOT_TOKEN_EXPIRY_SKEW", 60) == 30
    assert loader.get("COPILOT_REQUEST_TIMEOUT", 60.0) == 12.5


def test_invalid_number_falls_back_to_default(caplog: pytest.LogCaptureFixture) -> None:
    loader = ConfigLoader(environ={"COPILOT_TOKEN_EXPIRY_SKEW": "soon"})
    assert loader.get("COPILOT_TOKEN_EXPIRY_SKEW", 60) == 60
    assert "Failed to parse COPILOT_TOKEN_EXPIRY_SKEW" in caplog.text


def test_env_file_does_not_override_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("COPILOT_TEST_FROM_FILE=file\nCOPILOT_TEST_BOTH=file\n")
    monkeypatch.setenv("COPILOT_TEST_BOTH", "process")
    monkeypatch.delenv("COPILOT_TEST_FROM_FILE", raising=False)

    loader = ConfigLoader(env_path=str(env_file))

    assert loader.get("COPILOT_TEST_FROM_FILE", "default") == "file"
    assert loader.get("COPILOT_TEST_BOTH", "default") == "process"
    monkeypatch.delenv("COPILOT_TEST_FROM_FILE", raising=False)
