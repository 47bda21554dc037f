"""
Mock Location API — Settings Tests
====================================

What:  Tests for Settings defaults and validators.
Why:   A bad LOG_LEVEL, ENVIRONMENT or TIMESTAMP_TIMEZONE must fail at startup.
"""

import pytest
from pydantic import ValidationError

from mock_locations.config import Settings


class TestDefaults:

    def test_stock_defaults(self, default_settings):
        assert default_settings.total_items == 100
        assert default_settings.default_page == 1
        assert default_settings.default_page_size == 10
        assert default_settings.recent_days == 1
        assert (default_settings.image_width, default_settings.image_height) == (640, 480)
        assert default_settings.faker_seed is None
        assert default_settings.timestamp_timezone is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TOTAL_ITEMS", "40")
        monkeypatch.setenv("FAKER_SEED", "99")

        config = Settings()

        assert config.total_items == 40
        assert config.faker_seed == 99


class TestValidators:

    def test_log_level_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(log_level="chatty")

    def test_environment_normalized(self):
        config = Settings(environment=" Production ")

        assert config.environment == "production"
        assert config.is_development is False

    def test_invalid_environment(self):
        with pytest.raises(ValidationError, match="Invalid environment"):
            Settings(environment="qa-box")

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError, match="Unknown timestamp_timezone"):
            Settings(timestamp_timezone="Mars/Olympus_Mons")

    def test_blank_timezone_means_local(self):
        assert Settings(timestamp_timezone="").timestamp_timezone is None

    def test_negative_total_items_rejected(self):
        with pytest.raises(ValidationError):
            Settings(total_items=-1)

    def test_cors_origins_list(self):
        config = Settings(cors_origins="http://localhost:3000, https://example.com,")

        assert config.cors_origins_list == ["http://localhost:3000", "https://example.com"]
