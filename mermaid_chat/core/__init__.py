"""
Core business logic module.

Contains the markup normalizer, the exception hierarchy, and the diagram
agent. Agent classes are imported from their own package so that importing
the normalizer never pulls in the model SDK.
"""

from mermaid_chat.core.exceptions import (
    DiagramGenerationError,
    MermaidChatException,
    ProviderConfigurationError,
    ValidationError,
)
from mermaid_chat.core.normalizer import DiagramKeyword, normalize

__all__ = [
    # Exceptions
    "MermaidChatException",
    "ValidationError",
    "ProviderConfigurationError",
    "DiagramGenerationError",
    # Normalizer
    "DiagramKeyword",
    "normalize",
]
