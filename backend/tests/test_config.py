"""
Library API — Settings Tests
=============================

What:  Validation rules on library_api.config.Settings.
"""

import pytest
from pydantic import ValidationError

from library_api.config import Settings


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.app_name == "Library API"
        assert s.backend_port == 8000

    def test_log_level_normalized_to_upper(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(log_level="LOUD")

    def test_activity_logger_normalized_to_lower(self):
        assert Settings(activity_logger="Logging").activity_logger == "logging"

    def test_invalid_activity_logger_rejected(self):
        with pytest.raises(ValidationError, match="Invalid activity_logger"):
            Settings(activity_logger="syslog")

    def test_port_range_enforced(self):
        with pytest.raises(ValidationError):
            Settings(backend_port=80)

    def test_cors_origins_list(self):
        s = Settings(cors_origins="http://a.test, http://b.test")
        assert s.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SEED_CATALOG", "false")
        assert Settings().seed_catalog is False
