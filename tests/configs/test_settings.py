"""
Test suite for configuration settings.

Tests environment variable mapping, API key aliases, and log level
validation for the pydantic-settings classes.

System role: Verification of application configuration
"""

import pytest
from pydantic import ValidationError

from mermaid_chat.configs import LLMSettings, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove provider variables that could leak in from the host."""
    for name in (
        "LLM_API_KEY",
        "GOOGLE_API_KEY",
        "GOOGLE_GENERATIVE_AI_API_KEY",
        "LLM_MODEL",
        "LLM_TEMPERATURE",
        "LLM_DISABLE_SAFETY_FILTERS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLLMSettings:
    """Test suite for completion provider settings."""

    def test_defaults_should_match_provider_tuning(self) -> None:
        """Test default sampling parameters."""
        settings = LLMSettings(_env_file=None)

        assert settings.model == "gemini-2.0-pro-exp-02-05"
        assert settings.temperature == 0.2
        assert settings.top_p == 0.8
        assert settings.top_k == 40
        assert settings.max_output_tokens == 2048
        assert settings.disable_safety_filters is True
        assert settings.is_configured is False

    @pytest.mark.parametrize(
        "env_name",
        ["LLM_API_KEY", "GOOGLE_API_KEY", "GOOGLE_GENERATIVE_AI_API_KEY"],
    )
    def test_api_key_should_load_from_any_alias(
        self, monkeypatch: pytest.MonkeyPatch, env_name: str
    ) -> None:
        """Test every supported environment variable name provides the key."""
        # Arrange
        monkeypatch.setenv(env_name, "secret")

        # Act
        settings = LLMSettings(_env_file=None)

        # Assert
        assert settings.api_key == "secret"
        assert settings.is_configured is True

    def test_prefixed_variables_should_override_defaults(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test LLM_-prefixed variables configure the model."""
        monkeypatch.setenv("LLM_MODEL", "gemini-2.5-flash")
        monkeypatch.setenv("LLM_TEMPERATURE", "0.5")

        settings = LLMSettings(_env_file=None)

        assert settings.model == "gemini-2.5-flash"
        assert settings.temperature == 0.5

    def test_safety_filters_should_be_configurable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test LLM_DISABLE_SAFETY_FILTERS turns provider filtering back on."""
        monkeypatch.setenv("LLM_DISABLE_SAFETY_FILTERS", "false")

        settings = LLMSettings(_env_file=None)

        assert settings.disable_safety_filters is False

    def test_temperature_should_be_bounded(self) -> None:
        """Test out-of-range temperature is rejected."""
        with pytest.raises(ValidationError):
            LLMSettings(_env_file=None, temperature=5.0)


class TestSettings:
    """Test suite for aggregated application settings."""

    def test_log_level_should_be_normalized(self) -> None:
        """Test lower-case level names are accepted and upper-cased."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_should_be_rejected(self) -> None:
        """Test unknown level names fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_settings_should_aggregate_llm_settings(self) -> None:
        """Test the provider settings are nested under llm."""
        settings = Settings(_env_file=None)

        assert isinstance(settings.llm, LLMSettings)
        assert settings.cors_allow_origins == ["*"]
