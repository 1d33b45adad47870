"""Unit tests for settings and provider selection."""

import pytest

from qna.config import Settings
from qna.util.di import PersistenceProvider, ProdPersistenceProvider, get_provider
from qna.util.error import ConfigurationError, DependencyInjectionError
from tests.di import build_test_container
from tests.di.persistence import MockPersistenceProvider


class TestSettings:
    """Tests for Settings validation."""

    def test_production_requires_real_secret(self):
        with pytest.raises(ConfigurationError):
            Settings(environment="production")

    def test_production_uses_https(self):
        settings = Settings(
            environment="production",
            frontend_host="qna.example.com",
            auth={"jwt_secret": "s" * 32},
        )

        assert settings.api.protocol == "https"
        assert settings.api.frontend_url == "https://qna.example.com"

    def test_reputation_defaults(self):
        settings = Settings()

        assert settings.reputation.floor == 1
        assert settings.reputation.accept_bonus == 15
        assert settings.notifications.retention_cap == 100


class TestProviderSelection:
    """Tests for get_provider() and the test container."""

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider, use_mock=False) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_unknown_component_rejected(self):
        with pytest.raises(DependencyInjectionError):
            build_test_container(unmock={"search"})
