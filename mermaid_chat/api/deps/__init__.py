"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_diagram_agent,
    get_diagram_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_diagram_agent",
    "get_diagram_service",
    "get_service_cache",
    "get_settings_dependency",
]
