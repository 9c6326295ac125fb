from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a transcript entry."""

    USER = "user"
    MODEL = "model"


class Message(BaseModel):
    """One transcript entry.

    Attributes:
        id: Per-session identifier, strictly increasing in creation order.
        role: Who produced the message.
        content: Plain message text.
        created_at: Local creation time, used for display only.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    role: Role
    content: str
    created_at: datetime = Field(default_factory=datetime.now)


class PayloadEntry(BaseModel):
    """A provider-agnostic ``{role, text}`` pair sent to the completion capability."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str


class GenerationConfig(BaseModel):
    """Generation settings sent with every request.

    Output is always plain text: no function calling, no structured output.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    response_mime_type: str = Field(default="text/plain", alias="responseMimeType")


class Part(BaseModel):
    text: str | None = None


class Content(BaseModel):
    role: str | None = None
    parts: list[Part] = Field(default_factory=list)


class Candidate(BaseModel):
    content: Content | None = None


class GenerateContentResponse(BaseModel):
    """Subset of the generateContent response that the controller reads.

    Missing collections default to empty; unknown fields are ignored.
    """

    candidates: list[Candidate] = Field(default_factory=list)


class ExchangeStatus(str, Enum):
    """User-visible outcome of one exchange."""

    DELIVERED = "delivered"
    UNAVAILABLE = "unavailable"


class ExchangeResult(BaseModel):
    """Outcome of a completed exchange.

    Attributes:
        status: Whether real model text came back.
        reply: The ``model`` message appended to the transcript.
    """

    status: ExchangeStatus
    reply: Message


class DocumentExtractResponse(BaseModel):
    """Response after PDF text extraction.

    Attributes:
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        characters: Length of the extracted text.
        text: Extracted text, one line break after each page.
    """

    filename: str
    pages: int = Field(ge=1)
    characters: int = Field(ge=0)
    text: str
