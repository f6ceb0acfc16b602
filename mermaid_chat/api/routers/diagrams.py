"""Diagram API endpoints.

Routes:
- POST /diagrams/conversation - Generate a diagram from a chat conversation
- POST /diagrams/generate - Generate a diagram from a description
- POST /diagrams/normalize - Normalize pasted diagram markup

Dependencies: mermaid_chat.application.services.diagram_service, mermaid_chat.models
System role: Diagram generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mermaid_chat.api.deps import get_diagram_service
from mermaid_chat.application.services.diagram_service import DiagramService
from mermaid_chat.core.exceptions import (
    ProviderConfigurationError,
    ValidationError,
)
from mermaid_chat.models.diagram import (
    ConversationDiagramRequest,
    DescriptionDiagramRequest,
    DiagramResponse,
    DiagramResult,
    NormalizeDiagramRequest,
)
from mermaid_chat.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/diagrams", tags=["diagrams"])


def _to_response(result: DiagramResult) -> DiagramResponse:
    return DiagramResponse(
        diagram=result.diagram,
        keyword=result.keyword,
        used_fallback=result.used_fallback,
    )


@router.post("/conversation", response_model=DiagramResponse)
async def generate_from_conversation(
    request: ConversationDiagramRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """Generate a diagram from the full chat conversation.

    Args:
        request: Conversation messages; the last one is the current request
        diagram_service: Injected DiagramService

    Returns:
        DiagramResponse: Normalized diagram markup

    Raises:
        HTTPException(503): Completion provider not configured
        HTTPException(500): Generation failed
    """
    try:
        result = await diagram_service.generate_from_conversation(request.messages)
        return _to_response(result)

    except ProviderConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.message)
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:generate_from_conversation - failed",
            e,
            message_count=len(request.messages),
        )
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate diagram: {str(e)}",
        )


@router.post("/generate", response_model=DiagramResponse)
async def generate_from_description(
    request: DescriptionDiagramRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """Generate a diagram from a description and earlier messages.

    Args:
        request: Description plus optional previous messages
        diagram_service: Injected DiagramService

    Returns:
        DiagramResponse: Normalized diagram markup

    Raises:
        HTTPException(400): Blank description
        HTTPException(503): Completion provider not configured
        HTTPException(500): Generation failed
    """
    try:
        result = await diagram_service.generate_from_description(
            description=request.description,
            previous_messages=request.previous_messages,
        )
        return _to_response(result)

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ProviderConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.message)
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:generate_from_description - failed",
            e,
            description=request.description,
        )
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate diagram: {str(e)}",
        )


@router.post("/normalize", response_model=DiagramResponse)
async def normalize_markup(
    request: NormalizeDiagramRequest,
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """Normalize diagram markup pasted directly by the user."""
    return _to_response(diagram_service.normalize_markup(request.markup))
