"""
Health check API endpoints.

Routes: GET /health, GET /health/llm

Dependencies: mermaid_chat.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mermaid_chat.api.deps import get_settings_dependency
from mermaid_chat.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/llm", response_model=HealthResponse)
async def health_check_llm(
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Completion provider configuration check."""
    if not settings.llm.is_configured:
        return HealthResponse(status="degraded", message="LLM API key not configured")
    return HealthResponse(status="healthy", message=f"LLM configured ({settings.llm.model})")
