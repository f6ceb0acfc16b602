"""
Diagram generation agent module.

Provides the Gemini-backed agent that turns conversations and descriptions
into raw Mermaid completions.

Dependencies: langchain_core, langchain_google_genai
System role: Agent module exports
"""

from mermaid_chat.core.agentic_system.diagram_agent.diagram_agent import (
    DiagramAgent,
    build_chat_model,
)

__all__ = ["DiagramAgent", "build_chat_model"]
