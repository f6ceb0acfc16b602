"""
Diagram generation agent.

Sends diagram requests to a Gemini chat model through LangChain and returns
the raw completion text. Cleaning the reply into renderable markup is the
normalizer's job, not the agent's.

The model is built from LLMSettings handed in by the caller; nothing here
reads process-wide configuration.

Dependencies: langchain_core, langchain_google_genai, mermaid_chat.configs
System role: Completion provider boundary for diagram generation
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from mermaid_chat.configs.llm import LLMSettings
from mermaid_chat.core.agentic_system.diagram_agent.diagram_agent_prompt import (
    CONVERSATION_PROMPT,
    DEFAULT_REQUEST,
    DESCRIPTION_PROMPT,
    format_previous_messages,
)
from mermaid_chat.core.exceptions import (
    DiagramGenerationError,
    ProviderConfigurationError,
)
from mermaid_chat.models.diagram import ChatMessage, MessageRole
from mermaid_chat.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

UNFILTERED_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_NONE,
}


def build_chat_model(settings: LLMSettings) -> ChatGoogleGenerativeAI:
    """
    Build the Gemini chat model from settings.

    Args:
        settings: Completion provider settings

    Returns:
        ChatGoogleGenerativeAI: Configured chat model

    Raises:
        ProviderConfigurationError: If no API key is configured
    """
    if not settings.is_configured:
        raise ProviderConfigurationError(
            "Gemini API key is required. Set LLM_API_KEY or GOOGLE_API_KEY.",
            details={"model": settings.model},
        )

    return ChatGoogleGenerativeAI(
        model=settings.model,
        google_api_key=settings.api_key,
        temperature=settings.temperature,
        top_p=settings.top_p,
        top_k=settings.top_k,
        max_output_tokens=settings.max_output_tokens,
        safety_settings=UNFILTERED_SAFETY_SETTINGS if settings.disable_safety_filters else None,
    )


def message_text(message: BaseMessage) -> str:
    """Flatten string or list-of-parts message content into plain text."""
    content = message.content
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class DiagramAgent:
    """
    Diagram generation agent backed by a LangChain chat model.

    Supports two request shapes: a full conversation (history plus the
    latest message) and a one-off description with earlier messages
    flattened into the prompt as context.
    """

    def __init__(
        self,
        settings: LLMSettings,
        model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize diagram agent.

        Args:
            settings: Completion provider settings
            model: Pre-built chat model. If None, builds Gemini from settings.

        Raises:
            ProviderConfigurationError: If no model is given and no API key is set
        """
        self._settings = settings
        self._model = model if model is not None else build_chat_model(settings)

    @property
    def model_id(self) -> str:
        return self._settings.model

    async def ainvoke_conversation(self, messages: list[ChatMessage]) -> str:
        """
        Generate a diagram from a running conversation.

        The first system message, if any, becomes the context block of the
        instructions. Remaining messages become chat history, except the
        last one, which is sent as the current request.

        Args:
            messages: Conversation messages in order

        Returns:
            str: Raw completion text

        Raises:
            DiagramGenerationError: If the model call fails
        """
        system_context = next(
            (m.content for m in messages if m.role == MessageRole.SYSTEM),
            self._settings.default_system_prompt,
        )
        chat_messages = [m for m in messages if m.role != MessageRole.SYSTEM]

        history: list[BaseMessage] = [
            HumanMessage(content=m.content) if m.role == MessageRole.USER else AIMessage(content=m.content)
            for m in chat_messages[:-1]
        ]
        request = chat_messages[-1].content if chat_messages else DEFAULT_REQUEST

        prompt_messages = CONVERSATION_PROMPT.invoke({
            "system_context": system_context,
            "history": history,
            "request": request,
        }).to_messages()

        logger.info(
            f"{__name__}:ainvoke_conversation - history_len={len(history)}, "
            f"request={safe_log_value(request, 80)}"
        )
        return await self._complete(prompt_messages)

    async def ainvoke_description(
        self,
        description: str,
        previous_messages: list[ChatMessage] | None = None,
    ) -> str:
        """
        Generate a diagram from a single description.

        Args:
            description: Natural-language description of the diagram
            previous_messages: Earlier messages and diagrams for context

        Returns:
            str: Raw completion text

        Raises:
            DiagramGenerationError: If the model call fails
        """
        prompt_messages = DESCRIPTION_PROMPT.invoke({
            "context": format_previous_messages(previous_messages or []),
            "description": description,
        }).to_messages()

        logger.info(
            f"{__name__}:ainvoke_description - previous_len={len(previous_messages or [])}, "
            f"description={safe_log_value(description, 80)}"
        )
        return await self._complete(prompt_messages)

    async def _complete(self, prompt_messages: list[BaseMessage]) -> str:
        try:
            result = await self._model.ainvoke(prompt_messages)
        except Exception as e:
            logger.error(f"{__name__}:_complete - {type(e).__name__}: {e}")
            raise DiagramGenerationError(
                f"Completion provider call failed: {e}",
                provider=self.model_id,
            ) from e

        text = message_text(result)
        logger.debug(f"{__name__}:_complete - raw={safe_log_value(text)}")
        return text
