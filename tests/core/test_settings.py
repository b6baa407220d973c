"""
Tests for settings and logging configuration.
"""

import pytest
import structlog
from pydantic import ValidationError

from auditlog.core import Settings, configure_logging, get_logger, get_settings, log_stage_failure
from auditlog.jsonx import JSONxConfig, JSONxConverter


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep environment, .env files and structlog state from leaking between tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "LOG_FORMAT", "JSONX_NAMESPACE", "JSONX_PREFIX", "JSONX_ROOT_TAG", "JSONX_PRETTY_PRINT"):
        monkeypatch.delenv(f"AUDITLOG_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.mark.unit
class TestSettings:
    """Test settings loading and validation."""

    def test_defaults_match_transcoder_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.jsonx_config() == JSONxConfig()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("AUDITLOG_JSONX_PREFIX", "jx")
        monkeypatch.setenv("AUDITLOG_JSONX_PRETTY_PRINT", "true")
        monkeypatch.setenv("AUDITLOG_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.jsonx_prefix == "jx"
        assert settings.jsonx_pretty_print is True
        assert settings.log_level == "DEBUG"
        assert settings.jsonx_config().namespace_prefix == "jx"

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("AUDITLOG_JSONX_ROOT_TAG=audit\n", encoding="utf-8")

        assert Settings().jsonx_root_tag == "audit"

    @pytest.mark.parametrize("kwargs", [
        {"jsonx_namespace": ""},
        {"jsonx_namespace": "   "},
        {"jsonx_prefix": "not valid"},
        {"jsonx_root_tag": "1root"},
        {"jsonx_value_tag": "a:b"},
        {"log_format": "xml"},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            Settings(**kwargs)

    def test_empty_namespace_from_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("AUDITLOG_JSONX_NAMESPACE", "")

        with pytest.raises(ValidationError, match="jsonx_namespace"):
            Settings()

    def test_settings_config_builds_converter(self):
        settings = Settings(jsonx_root_tag="audit", jsonx_xml_declaration=False)

        xml_bytes = JSONxConverter(settings.jsonx_config()).convert(b"{}")

        assert xml_bytes.startswith(b"<json:audit ")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestLogging:
    """Test structured logging setup."""

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_configure_logging(self, log_format):
        configure_logging(Settings(log_format=log_format))
        logger = get_logger("auditlog.test")

        logger.info("Logging configured", event_id="123")

        assert structlog.is_configured()

    def test_log_stage_failure(self):
        logger = structlog.testing.CapturingLogger()
        bound = structlog.wrap_logger(logger, processors=[])

        log_stage_failure(bound, ValueError("boom"), {"event_id": "123"})

        assert len(logger.calls) == 1
        call = logger.calls[0]
        assert call.method_name == "warning"
        assert call.kwargs["error"] == "boom"
        assert call.kwargs["error_type"] == "ValueError"
        assert call.kwargs["event_id"] == "123"
