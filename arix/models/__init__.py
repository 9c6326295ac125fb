"""Pydantic models for transcript state, the completion wire format and the API.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Individual transcript entry
    - PayloadEntry: Provider-agnostic request element
    - GenerationConfig: Plain-text output settings
    - GenerateContentResponse: Completion response (candidates/parts)
    - ExchangeResult: Outcome of one submit
    - DocumentExtractResponse: PDF extraction result
"""

from arix.models.schemas import (
    Candidate,
    Content,
    DocumentExtractResponse,
    ExchangeResult,
    ExchangeStatus,
    GenerateContentResponse,
    GenerationConfig,
    Message,
    Part,
    PayloadEntry,
    Role,
)

__all__ = [
    "Candidate",
    "Content",
    "DocumentExtractResponse",
    "ExchangeResult",
    "ExchangeStatus",
    "GenerateContentResponse",
    "GenerationConfig",
    "Message",
    "Part",
    "PayloadEntry",
    "Role",
]
