"""Exchange controller: one request/response cycle per user submission.

Every failure from the completion capability is absorbed here and turned
into a placeholder model turn. The store never sees raw errors.
"""

import logging
from collections.abc import Sequence

from arix.client.gemini import CompletionClient
from arix.models.schemas import (
    ExchangeResult,
    ExchangeStatus,
    GenerateContentResponse,
    GenerationConfig,
    Message,
    PayloadEntry,
    Role,
)
from arix.session.store import SessionStore

logger = logging.getLogger(__name__)

CONTEXT_LABEL = "Context PDF:"
UNAVAILABLE_REPLY = "⚠️ AI response unavailable."
FAILED_REPLY = "⚠️ Failed to fetch response."


def build_payload(
    transcript: Sequence[Message],
    document_context: str | None = None,
) -> list[PayloadEntry]:
    """Project the transcript into request entries.

    Document context, when present, is appended as a trailing user entry
    on every call.

    Args:
        transcript: Messages in conversation order.
        document_context: Extracted document text, if any.

    Returns:
        Ordered payload entries.
    """
    entries = [PayloadEntry(role=msg.role, text=msg.content) for msg in transcript]
    if document_context:
        entries.append(
            PayloadEntry(role=Role.USER, text=f"{CONTEXT_LABEL}\n{document_context}")
        )
    return entries


def extract_reply_text(response: GenerateContentResponse) -> str | None:
    """Return the first candidate's first text part, trimmed, or None."""
    if not response.candidates:
        return None
    content = response.candidates[0].content
    if content is None or not content.parts:
        return None
    text = content.parts[0].text
    if text is None:
        return None
    return text.strip() or None


class ExchangeController:
    """Drives exchanges against a single session store.

    At most one exchange is outstanding at a time. A submission made while
    one is pending is dropped, not queued.
    """

    def __init__(
        self,
        store: SessionStore,
        client: CompletionClient,
        generation_config: GenerationConfig | None = None,
    ) -> None:
        self._store = store
        self._client = client
        self._generation_config = generation_config or GenerationConfig()

    @property
    def store(self) -> SessionStore:
        return self._store

    async def submit(self, raw_input: str) -> ExchangeResult | None:
        """Run one exchange for the given user input.

        Args:
            raw_input: Text as typed by the user.

        Returns:
            The exchange result, or None if the input was blank or another
            exchange is still pending.
        """
        text = raw_input.strip()
        if not text:
            return None
        if self._store.pending:
            logger.debug("Dropping submission while an exchange is pending")
            return None

        # Everything up to the first await runs without interleaving.
        self._store.append_message(Role.USER, text)
        self._store.set_pending(True)
        try:
            payload = build_payload(self._store.transcript, self._store.document_context)
            status, reply_text = await self._request_reply(payload)
            reply = self._store.append_message(Role.MODEL, reply_text)
        finally:
            self._store.set_pending(False)

        return ExchangeResult(status=status, reply=reply)

    async def _request_reply(
        self, payload: list[PayloadEntry]
    ) -> tuple[ExchangeStatus, str]:
        try:
            response = await self._client.generate(payload, self._generation_config)
        except Exception as e:
            logger.error(f"Completion request failed: {e}")
            return ExchangeStatus.UNAVAILABLE, FAILED_REPLY

        reply_text = extract_reply_text(response)
        if reply_text is None:
            logger.warning("Completion response contained no text")
            return ExchangeStatus.UNAVAILABLE, UNAVAILABLE_REPLY
        return ExchangeStatus.DELIVERED, reply_text
