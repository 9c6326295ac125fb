"""Exchange orchestration between the session store and the completion client."""

from arix.chat.controller import (
    CONTEXT_LABEL,
    FAILED_REPLY,
    UNAVAILABLE_REPLY,
    ExchangeController,
    build_payload,
    extract_reply_text,
)
from arix.chat.session import ChatSession

__all__ = [
    "CONTEXT_LABEL",
    "FAILED_REPLY",
    "UNAVAILABLE_REPLY",
    "ChatSession",
    "ExchangeController",
    "build_payload",
    "extract_reply_text",
]
