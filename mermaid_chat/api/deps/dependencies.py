"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: mermaid_chat.configs, mermaid_chat.application, mermaid_chat.core
System role: DI container for service injection
"""

import logging
from functools import lru_cache

from fastapi import Depends

from mermaid_chat.application.services import DiagramService
from mermaid_chat.configs import Settings, get_settings
from mermaid_chat.core.agentic_system.diagram_agent import DiagramAgent
from mermaid_chat.core.exceptions import ProviderConfigurationError

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._diagram_agent = None

    @property
    def diagram_agent(self) -> DiagramAgent:
        """
        Get cached diagram agent.

        Raises:
            ProviderConfigurationError: If no API key is configured
        """
        if self._diagram_agent is None:
            settings = get_settings()
            self._diagram_agent = DiagramAgent(settings=settings.llm)
        return self._diagram_agent

    def clear(self) -> None:
        """Clear all cached instances."""
        self._diagram_agent = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_diagram_agent(
    cache: ServiceCache = Depends(get_service_cache),
) -> DiagramAgent | None:
    """
    Get diagram agent, or None when the provider is not configured.

    Pasted-markup normalization still works without an agent, so a
    missing API key is reported per request rather than at startup.
    """
    try:
        return cache.diagram_agent
    except ProviderConfigurationError as e:
        logger.warning(f"{__name__}:get_diagram_agent - {e}")
        return None


def get_diagram_service(
    agent: DiagramAgent | None = Depends(get_diagram_agent),
) -> DiagramService:
    """
    Get diagram service instance.

    Args:
        agent: Diagram agent (injected via Depends)

    Returns:
        DiagramService: Diagram service instance
    """
    return DiagramService(agent=agent)
