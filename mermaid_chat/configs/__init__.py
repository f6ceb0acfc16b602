"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from mermaid_chat.configs.llm import LLMSettings
from mermaid_chat.configs.settings import Settings, get_settings

__all__ = ["LLMSettings", "Settings", "get_settings"]
