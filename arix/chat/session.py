"""Presentation boundary for one chat session.

Bundles a store, an exchange controller and a document ingestor. The
rendering layer reads state from here and calls the entry points.
"""

from collections.abc import Callable

from arix.chat.controller import ExchangeController
from arix.client.gemini import CompletionClient, get_completion_client
from arix.models.schemas import ExchangeResult, Message
from arix.parsing.pdf_parser import DocumentIngestor, attach_document
from arix.session.store import SessionStore, StoreListener


class ChatSession:
    """Manages chat state for a single page visit."""

    def __init__(
        self,
        client: CompletionClient | None = None,
        ingestor: DocumentIngestor | None = None,
    ) -> None:
        self.store = SessionStore()
        self.controller = ExchangeController(self.store, client or get_completion_client())
        self.ingestor = ingestor or DocumentIngestor()
        self.draft: str = ""

    @property
    def transcript(self) -> tuple[Message, ...]:
        return self.store.transcript

    @property
    def pending(self) -> bool:
        return self.store.pending

    @property
    def document_name(self) -> str | None:
        return self.store.document_name

    def update_draft(self, text: str | None) -> None:
        self.draft = text or ""

    async def submit(self, text: str | None = None) -> ExchangeResult | None:
        """Submit the given text, or the current draft.

        The draft is cleared when the submission is accepted.
        """
        raw = self.draft if text is None else text
        if raw.strip() and not self.store.pending:
            self.draft = ""
        return await self.controller.submit(raw)

    async def attach_document(self, data: bytes, display_name: str) -> bool:
        return await attach_document(self.store, self.ingestor, data, display_name)

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        return self.store.subscribe(listener)
