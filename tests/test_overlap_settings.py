"""Tests for environment-driven settings."""

from overlap.config import Settings, get_settings, reset_settings_cache


class TestSettingsDefaults:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OVERLAP_LOG_LEVEL", raising=False)

        s = Settings()
        assert s.log_level == "INFO"


class TestSettingsFromEnvironment:
    def test_override(self, monkeypatch):
        monkeypatch.setenv("OVERLAP_LOG_LEVEL", "DEBUG")

        assert Settings().log_level == "DEBUG"

    def test_unrelated_variables_ignored(self, monkeypatch):
        monkeypatch.setenv("OVERLAP_DEFAULT_SPAN", "42")

        assert not hasattr(Settings(), "default_span")


class TestSettingsCache:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_picks_up_new_environment(self, monkeypatch):
        before = get_settings()
        monkeypatch.setenv("OVERLAP_LOG_LEVEL", "WARNING")

        assert get_settings() is before
        reset_settings_cache()
        assert get_settings().log_level == "WARNING"
