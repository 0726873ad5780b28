"""
Tests for SecurityServiceConfig
"""

import pytest

from home_sentry.services.config import ENV_CAT_THRESHOLD, SecurityServiceConfig


class TestSecurityServiceConfig:

    def test_default_threshold(self):
        assert SecurityServiceConfig().cat_confidence_threshold == 50.0

    @pytest.mark.parametrize("threshold", [-1.0, 100.5])
    def test_out_of_range_rejected(self, threshold):
        with pytest.raises(ValueError):
            SecurityServiceConfig(cat_confidence_threshold=threshold)

    def test_from_env_default(self, monkeypatch):
        monkeypatch.delenv(ENV_CAT_THRESHOLD, raising=False)

        assert SecurityServiceConfig.from_env().cat_confidence_threshold == 50.0

    def test_from_env_override(self, monkeypatch):
        monkeypatch.setenv(ENV_CAT_THRESHOLD, "72.5")

        assert SecurityServiceConfig.from_env().cat_confidence_threshold == 72.5

    def test_from_env_not_a_number(self, monkeypatch):
        monkeypatch.setenv(ENV_CAT_THRESHOLD, "high")

        with pytest.raises(ValueError, match=ENV_CAT_THRESHOLD):
            SecurityServiceConfig.from_env()
