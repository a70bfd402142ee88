"""Tests for event-hub settings."""

from pathlib import Path

import pytest

from event_hub.config import (
    DEFAULT_LOG_PREFIX,
    EventHubSettings,
    clear_settings_cache,
    find_dotenv,
    get_settings,
)


class TestEventHubSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EVENT_HUB_LOG_ENABLED", raising=False)
        monkeypatch.delenv("EVENT_HUB_THREAD_SAFE", raising=False)
        monkeypatch.delenv("EVENT_HUB_LOG_PREFIX", raising=False)
        settings = EventHubSettings(_env_file=None)
        assert settings.log_enabled is False
        assert settings.thread_safe is False
        assert settings.log_prefix == DEFAULT_LOG_PREFIX

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EVENT_HUB_LOG_ENABLED", "true")
        monkeypatch.setenv("EVENT_HUB_LOG_PREFIX", "[bus]")
        settings = EventHubSettings(_env_file=None)
        assert settings.log_enabled is True
        assert settings.log_prefix == "[bus]"

    def test_ignores_unprefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EVENT_HUB_THREAD_SAFE", raising=False)
        monkeypatch.setenv("THREAD_SAFE", "true")
        assert EventHubSettings(_env_file=None).thread_safe is False


class TestGetSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear(self) -> None:
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first


class TestFindDotenv:
    def test_finds_file_in_parent(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        (tmp_path / ".env").write_text("EVENT_HUB_LOG_ENABLED=true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_dotenv(nested) == (tmp_path / ".env").resolve()

    def test_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Path, "home", lambda: tmp_path)
        assert find_dotenv(tmp_path) is None

    def test_stops_outside_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        home = tmp_path / "home"
        home.mkdir()
        monkeypatch.setattr(Path, "home", lambda: home)
        elsewhere = tmp_path / "elsewhere"
        (elsewhere / "x").mkdir(parents=True)
        (elsewhere / ".env").write_text("EVENT_HUB_LOG_ENABLED=true\n")
        start = elsewhere / "x"
        assert find_dotenv(start) is None

    def test_start_outside_home_is_searched(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        home = tmp_path / "home"
        home.mkdir()
        monkeypatch.setattr(Path, "home", lambda: home)
        start = tmp_path / "elsewhere"
        start.mkdir()
        (start / ".env").write_text("EVENT_HUB_LOG_ENABLED=true\n")
        assert find_dotenv(start) == (start / ".env").resolve()

    def test_settings_from_dotenv(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EVENT_HUB_THREAD_SAFE", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("EVENT_HUB_THREAD_SAFE=true\n")
        assert EventHubSettings(_env_file=env_file).thread_safe is True
