"""
Tests for application settings.
"""
import pytest
from pydantic import ValidationError

from issuerid.core.config import Settings


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ISSUER_ID_SPLIT_FORWARDED_FOR", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.ISSUER_ID_SPLIT_FORWARDED_FOR is False
        assert settings.LOG_LEVEL == "INFO"
        assert settings.API_V1_PREFIX == "/v1"

    def test_split_flag_from_environment(self, monkeypatch):
        monkeypatch.setenv("ISSUER_ID_SPLIT_FORWARDED_FOR", "true")

        settings = Settings(_env_file=None)

        assert settings.ISSUER_ID_SPLIT_FORWARDED_FOR is True

    def test_log_level_is_case_insensitive(self):
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "debug"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
            Settings(_env_file=None, LOG_LEVEL="chatty")
