"""Completion client configuration with environment variable loading.

Pydantic-based configuration for the Gemini generateContent endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-pro"


class GeminiConfig(BaseModel):
    """Configuration for the Gemini completion client.

    Attributes:
        api_key: API key sent in the ``x-goog-api-key`` header.
        base_url: API base URL, without trailing slash.
        model_name: Model identifier to use.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY")
        or os.getenv("NEXT_PUBLIC_GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        min_length=1,
        description="Model to use",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_gemini_config() -> GeminiConfig:
    """Create client configuration from environment.

    Returns:
        Configured GeminiConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return GeminiConfig()
