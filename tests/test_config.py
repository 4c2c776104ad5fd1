"""Tests for settings and provider selection."""
import pytest

from img_restore.app import dependencies
from img_restore.config import Settings
from img_restore.providers.adapters.openai_adapter import OpenAIAdapter


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("GEMINI_API_KEY", "OPENAI_API_KEY", "DEFAULT_IMAGE_PROVIDER"):
        monkeypatch.delenv(name, raising=False)
    dependencies.get_image_provider.cache_clear()
    yield
    dependencies.get_image_provider.cache_clear()


def use_settings(monkeypatch, **values):
    settings = Settings(_env_file=None, **values)
    monkeypatch.setattr(dependencies, "get_settings", lambda: settings)
    return settings


class TestProviderSelection:
    """Tests for building the configured image provider."""

    def test_openai_provider_needs_no_gemini_key(self, monkeypatch):
        """Test the openai provider starts with only its own key set."""
        settings = use_settings(monkeypatch, DEFAULT_IMAGE_PROVIDER="openai", OPENAI_API_KEY="sk-test")

        assert settings.GEMINI_API_KEY is None
        assert isinstance(dependencies.get_image_provider(), OpenAIAdapter)

    def test_gemini_provider_without_key_fails_clearly(self, monkeypatch):
        use_settings(monkeypatch, DEFAULT_IMAGE_PROVIDER="gemini")

        with pytest.raises(RuntimeError, match="GEMINI_API_KEY"):
            dependencies.get_image_provider()
