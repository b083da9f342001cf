"""Tests for Settings configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from forgesetup.config import Settings


class TestSettingsDefaults:
    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.package_manager == "npm"
        assert settings.install_timeout == 600
        assert settings.log_level == "WARNING"

    def test_bot_env_file_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text('FORGESETUP_PACKAGE_MANAGER="yarn"\n')
        assert Settings().package_manager == "npm"


class TestSettingsFromEnv:
    def test_package_manager_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORGESETUP_PACKAGE_MANAGER", "pnpm")
        assert Settings().package_manager == "pnpm"

    def test_log_level_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORGESETUP_LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORGESETUP_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings()

    def test_timeout_bounds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORGESETUP_INSTALL_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_blank_package_manager_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORGESETUP_PACKAGE_MANAGER", "  ")
        with pytest.raises(ValidationError):
            Settings()
