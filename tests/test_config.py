"""Tests for environment-driven settings."""

from app.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Unset variables fall back to their defaults."""
        for name in ("HOST", "PORT", "DEBUG", "LOG_LEVEL", "MAX_BODY_BYTES", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()
        assert settings.HOST == "0.0.0.0"
        assert settings.PORT == 8000
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "INFO"
        assert settings.MAX_BODY_BYTES == 102400
        assert settings.cors_origins_list == ["*"]

    def test_environment_overrides(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "Yes")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("MAX_BODY_BYTES", "2048")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

        settings = Settings()
        assert settings.PORT == 9000
        assert settings.DEBUG is True
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.MAX_BODY_BYTES == 2048
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
