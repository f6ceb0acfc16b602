"""
Diagram domain models and schemas.

Request/response schemas for Mermaid diagram generation and normalization.

Dependencies: pydantic
System role: Diagram API contracts
"""

from enum import Enum

from pydantic import BaseModel, Field

from mermaid_chat.core.normalizer import DiagramKeyword


class MessageRole(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Single message of the diagram conversation."""

    role: MessageRole = Field(description="Message role: 'system', 'user' or 'assistant'")
    content: str = Field(description="Message content")
    diagram: str | None = Field(
        default=None,
        description="Diagram markup returned with an assistant message",
    )


class ConversationDiagramRequest(BaseModel):
    """Request schema for generating a diagram from a full conversation."""

    messages: list[ChatMessage] = Field(
        description="Conversation so far; the last message is the current request",
    )


class DescriptionDiagramRequest(BaseModel):
    """Request schema for generating a diagram from a description."""

    description: str = Field(description="Natural-language description of the diagram")
    previous_messages: list[ChatMessage] = Field(
        default_factory=list,
        description="Earlier messages and diagrams for context",
    )


class NormalizeDiagramRequest(BaseModel):
    """Request schema for normalizing pasted diagram markup."""

    markup: str = Field(description="Raw diagram markup pasted by the user")


class DiagramResult(BaseModel):
    """Outcome of one normalization pass."""

    diagram: str = Field(description="Normalized Mermaid markup")
    keyword: DiagramKeyword = Field(description="Declaration keyword the diagram starts with")
    raw: str = Field(description="Text the diagram was normalized from")
    used_fallback: bool = Field(
        default=False,
        description="True when no structure was found and the fallback diagram was used",
    )


class DiagramResponse(BaseModel):
    """Response schema for diagram endpoints."""

    diagram: str = Field(description="Normalized Mermaid markup")
    keyword: DiagramKeyword
    used_fallback: bool = False
