"""
Diagram service orchestrator.

Coordinates diagram generation: asks the diagram agent for a completion and
runs every reply, or pasted markup, through the single canonical normalizer.

Dependencies: mermaid_chat.core.agentic_system.diagram_agent, mermaid_chat.core.normalizer
System role: Diagram generation use case orchestration
"""

import logging

from mermaid_chat.core.agentic_system.diagram_agent import DiagramAgent
from mermaid_chat.core.exceptions import ProviderConfigurationError, ValidationError
from mermaid_chat.core.normalizer import detect_keyword, normalize_with_result
from mermaid_chat.models.diagram import ChatMessage, DiagramResult

logger = logging.getLogger(__name__)


class DiagramService:
    """Diagram service orchestrator."""

    def __init__(self, agent: DiagramAgent | None = None) -> None:
        """
        Initialize diagram service.

        Args:
            agent: Diagram agent for model-backed generation. Only
                normalize_markup() works without one.
        """
        self.agent = agent

    async def generate_from_conversation(self, messages: list[ChatMessage]) -> DiagramResult:
        """
        Generate a diagram from a chat conversation.

        Args:
            messages: Conversation so far; last message is the current request

        Returns:
            DiagramResult: Normalized diagram with the raw completion

        Raises:
            ProviderConfigurationError: If no diagram agent is available
            DiagramGenerationError: If the completion provider fails
        """
        raw = await self._require_agent().ainvoke_conversation(messages)
        return self._build_result(raw)

    async def generate_from_description(
        self,
        description: str,
        previous_messages: list[ChatMessage] | None = None,
    ) -> DiagramResult:
        """
        Generate a diagram from a natural-language description.

        Args:
            description: What the diagram should show
            previous_messages: Earlier messages and diagrams for context

        Returns:
            DiagramResult: Normalized diagram with the raw completion

        Raises:
            ValidationError: If the description is blank
            DiagramGenerationError: If the completion provider fails
        """
        if not description or not description.strip():
            raise ValidationError("Description is required", field="description")

        raw = await self._require_agent().ainvoke_description(
            description=description,
            previous_messages=previous_messages or [],
        )
        return self._build_result(raw)

    def normalize_markup(self, markup: str) -> DiagramResult:
        """Normalize markup pasted by the user; no model call is made."""
        return self._build_result(markup)

    def _require_agent(self) -> DiagramAgent:
        if self.agent is None:
            raise ProviderConfigurationError(
                "Diagram generation is unavailable: no completion provider configured"
            )
        return self.agent

    def _build_result(self, raw: str) -> DiagramResult:
        diagram, used_fallback = normalize_with_result(raw)
        if used_fallback:
            logger.warning(f"{__name__}:_build_result - no diagram structure found, using fallback")

        return DiagramResult(
            diagram=diagram,
            keyword=detect_keyword(diagram),
            raw=raw,
            used_fallback=used_fallback,
        )
