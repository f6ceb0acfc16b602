"""
Completion provider configuration settings.

Holds the Gemini model identifier, sampling parameters, and API key used by
the diagram agent. Passed to the agent explicitly instead of being read from
the environment at call time.

Dependencies: pydantic, pydantic_settings
System role: Completion provider configuration for diagram generation
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from mermaid_chat.configs.base import BaseSettings

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant that generates Mermaid diagrams based on user requests."
)


class LLMSettings(BaseSettings):
    """Gemini completion provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "LLM_API_KEY",
            "GOOGLE_API_KEY",
            "GOOGLE_GENERATIVE_AI_API_KEY",
        ),
        description="Google Generative AI API key",
    )
    model: str = Field(
        default="gemini-2.0-pro-exp-02-05",
        description="Gemini model identifier",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (low for predictable markup)",
    )
    top_p: float = Field(default=0.8, ge=0.0, le=1.0, description="Nucleus sampling mass")
    top_k: int = Field(default=40, ge=1, description="Top-k sampling cutoff")
    max_output_tokens: int = Field(
        default=2048,
        ge=1,
        description="Maximum tokens in a single completion",
    )
    disable_safety_filters: bool = Field(
        default=True,
        description="Set every Gemini harm category to BLOCK_NONE",
    )
    default_system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System context used when a conversation carries none",
    )

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.api_key)
