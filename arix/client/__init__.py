"""Completion capability for the chat controller.

Responsibilities:
    - Gemini configuration loaded from the environment
    - Translating ``{role, text}`` payloads into generateContent requests
    - Turning transport and parsing failures into CompletionError

Keeps the HTTP details out of the exchange controller.
"""

from arix.client.config import GeminiConfig, get_gemini_config
from arix.client.gemini import (
    CompletionClient,
    CompletionError,
    GeminiClient,
    close_completion_client,
    get_completion_client,
)

__all__ = [
    "CompletionClient",
    "CompletionError",
    "GeminiClient",
    "GeminiConfig",
    "close_completion_client",
    "get_completion_client",
    "get_gemini_config",
]
