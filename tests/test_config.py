"""Tests for the config module."""

from drillmap.config import Settings, _parse_cors_origins, _parse_extensions


class TestParseCorsOrigins:
    """Test CORS origins parsing."""

    def test_parse_cors_origins_with_value(self, monkeypatch):
        """Test parsing CORS origins from environment variable."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://localhost:8080")
        result = _parse_cors_origins()
        assert result == ["http://localhost:3000", "http://localhost:8080"]

    def test_parse_cors_origins_without_value(self, monkeypatch):
        """Test default CORS origins when not set."""
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
        assert _parse_cors_origins() == ["*"]

    def test_parse_cors_origins_empty_string(self, monkeypatch):
        """Test parsing empty CORS origins defaults to wildcard."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "")
        assert _parse_cors_origins() == ["*"]


class TestParseExtensions:
    """Test accepted upload extension parsing."""

    def test_default_extensions(self, monkeypatch):
        monkeypatch.delenv("ALLOWED_EXTENSIONS", raising=False)
        assert _parse_extensions() == [".las", ".xlsx", ".csv"]

    def test_adds_missing_dot_and_lowercases(self):
        assert _parse_extensions("LAS, .Csv ,txt") == [".las", ".csv", ".txt"]

    def test_blank_value_falls_back_to_defaults(self):
        assert _parse_extensions(" , ") == [".las", ".xlsx", ".csv"]


class TestSettings:
    """Test Settings configuration."""

    def test_settings_explicit_values(self):
        """Test Settings with explicit parameters."""
        settings = Settings(
            host="0.0.0.0",
            port=9000,
            debug=True,
            log_level="DEBUG",
            processing_delay_seconds=0.5,
            max_upload_mb=250,
        )

        assert settings.host == "0.0.0.0"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.processing_delay_seconds == 0.5
        assert settings.max_upload_mb == 250

    def test_settings_fixture(self, test_settings):
        assert test_settings.processing_delay_seconds == 0.0
        assert test_settings.allowed_extensions == [".las", ".xlsx", ".csv"]

    def test_settings_cors_origins(self):
        settings = Settings(cors_allow_origins=["http://localhost:3000", "http://example.com"])
        assert settings.cors_allow_origins == ["http://localhost:3000", "http://example.com"]
