"""
Shared test fixtures and configuration for entire test suite.

Provides: completion provider settings, mocked chat model and agent, sample
conversations
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest
from langchain_core.messages import AIMessage

from mermaid_chat.configs.llm import LLMSettings
from mermaid_chat.models.diagram import ChatMessage, MessageRole


@pytest.fixture
def llm_settings() -> LLMSettings:
    """Provide completion provider settings with a dummy API key."""
    return LLMSettings(api_key="test-api-key", model="gemini-test")


@pytest.fixture
def unconfigured_llm_settings() -> LLMSettings:
    """Provide completion provider settings without an API key."""
    return LLMSettings(api_key=None)


@pytest.fixture
def mock_chat_model() -> AsyncMock:
    """
    Create mock LangChain chat model.

    Returns:
        AsyncMock: Model whose ainvoke() returns a fenced flowchart reply
    """
    model = AsyncMock()
    model.ainvoke = AsyncMock(
        return_value=AIMessage(content="Sure!\n```mermaid\nflowchart TD\n    A-->B\n```")
    )
    return model


@pytest.fixture
def mock_diagram_agent() -> AsyncMock:
    """
    Create mock DiagramAgent for testing.

    Returns:
        AsyncMock: Mocked agent returning raw completion text
    """
    agent = AsyncMock()
    agent.ainvoke_conversation = AsyncMock(
        return_value="```mermaid\nsequenceDiagram\n    Alice->>John: Hello\n```"
    )
    agent.ainvoke_description = AsyncMock(return_value="A --> B")
    return agent


@pytest.fixture
def sample_conversation() -> list[ChatMessage]:
    """Provide a conversation with a system message and one earlier exchange."""
    return [
        ChatMessage(role=MessageRole.SYSTEM, content="Keep diagrams small."),
        ChatMessage(role=MessageRole.USER, content="Draw a login flow"),
        ChatMessage(
            role=MessageRole.ASSISTANT,
            content="Here's your diagram:",
            diagram="flowchart TD\n    A[Login] --> B[Home]",
        ),
        ChatMessage(role=MessageRole.USER, content="Add a logout step"),
    ]
