"""
Logging helpers for diagram requests and model output.

Model replies and pasted markup are multi-line and can be long. These
helpers put them on a single, bounded log line so one request stays one
record under the correlation-ID format.

Dependencies: logging (stdlib), mermaid_chat.core.exceptions
System role: Logging helper functions
"""

import logging
from typing import Any

from mermaid_chat.core.exceptions import MermaidChatException


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a value as a single bounded log token.

    Newlines in markup are escaped; collections are summarized by size.

    Args:
        value: Value to render
        max_length: Maximum length before truncating

    Returns:
        str: One-line representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    text = str(value).replace("\r", "").replace("\n", "\\n")
    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def format_log_context(**context: Any) -> str:
    """Join context as ``key=value`` pairs in call order."""
    return " ".join(f"{key}={safe_log_value(val)}" for key, val in context.items())


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an exception with its type, request context, and domain details.

    Details carried by MermaidChatException (field, provider, model) are
    appended after the caller's context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Request context to include in the line
    """
    fields = dict(context)
    if isinstance(exc, MermaidChatException):
        fields.update(exc.details)
    fields["error_type"] = type(exc).__name__

    logger.exception(f"{message} | {format_log_context(**fields)}")
