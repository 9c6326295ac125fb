"""Completion capability backed by the Gemini generateContent REST endpoint.

The controller only depends on the ``CompletionClient`` protocol, so tests
and other providers can swap in anything with a matching ``generate``.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

import httpx
from pydantic import ValidationError

from arix.client.config import GeminiConfig, get_gemini_config
from arix.models.schemas import GenerateContentResponse, GenerationConfig, PayloadEntry

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """Raised when the completion call fails in transport or parsing."""

    pass


class CompletionClient(Protocol):
    async def generate(
        self,
        entries: Sequence[PayloadEntry],
        config: GenerationConfig,
    ) -> GenerateContentResponse: ...


def build_request_body(
    entries: Sequence[PayloadEntry],
    config: GenerationConfig,
) -> dict:
    """Translate payload entries into the generateContent JSON body."""
    return {
        "contents": [
            {"role": entry.role.value, "parts": [{"text": entry.text}]}
            for entry in entries
        ],
        "generationConfig": config.model_dump(by_alias=True),
    }


class GeminiClient:
    """Async client for ``models/{model}:generateContent``.

    No timeout, retry or cancellation is applied: a call runs until the
    transport completes or fails.
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            http_client: Optional preconfigured HTTP client (e.g. with a
                    mock transport). Created on demand if not provided.
        """
        self._config = config or get_gemini_config()
        self._http = http_client
        self._owns_http = http_client is None

    @property
    def endpoint(self) -> str:
        return f"{self._config.base_url}/models/{self._config.model_name}:generateContent"

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=None)
        return self._http

    async def generate(
        self,
        entries: Sequence[PayloadEntry],
        config: GenerationConfig,
    ) -> GenerateContentResponse:
        """Send one generateContent request.

        Args:
            entries: Ordered ``{role, text}`` pairs.
            config: Generation settings.

        Returns:
            Parsed response with zero or more candidates.

        Raises:
            CompletionError: On network errors, non-2xx statuses or a
                malformed response body.
        """
        body = build_request_body(entries, config)
        logger.debug(f"Sending {len(entries)} entries to {self._config.model_name}")

        try:
            response = await self._get_http().post(
                self.endpoint,
                headers={"x-goog-api-key": self._config.api_key},
                json=body,
            )
            response.raise_for_status()
            return GenerateContentResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise CompletionError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CompletionError(f"Connection failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise CompletionError(f"Malformed response: {e}") from e

    async def aclose(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None


# Module-level singleton instance
_completion_client: GeminiClient | None = None


def get_completion_client() -> GeminiClient:
    """Get or create the shared completion client.

    The client holds no session state, so every session may use it.

    Returns:
        The GeminiClient instance.
    """
    global _completion_client
    if _completion_client is None:
        _completion_client = GeminiClient()
    return _completion_client


async def close_completion_client() -> None:
    """Close and forget the shared completion client, if one was created."""
    global _completion_client
    if _completion_client is not None:
        await _completion_client.aclose()
        _completion_client = None
