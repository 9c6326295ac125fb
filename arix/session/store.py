"""In-memory session state: transcript, pending flag and document context.

The store holds no business logic. Listeners observe every mutation and
must not mutate the store themselves.
"""

import itertools
import logging
from collections.abc import Callable

from arix.models.schemas import Message, Role

logger = logging.getLogger(__name__)

StoreListener = Callable[["SessionStore"], None]


class SessionStore:
    """Single source of truth for one chat session.

    Created once per page visit and never shared between sessions.
    """

    def __init__(self) -> None:
        self._transcript: list[Message] = []
        self._ids = itertools.count(1)
        self._pending: bool = False
        self._document_context: str | None = None
        self._document_name: str | None = None
        self._listeners: list[StoreListener] = []

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._transcript)

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def document_context(self) -> str | None:
        return self._document_context

    @property
    def document_name(self) -> str | None:
        return self._document_name

    def append_message(self, role: Role, content: str) -> Message:
        """Append a message with a fresh id.

        Args:
            role: Speaker of the message.
            content: Message text.

        Returns:
            The appended Message.

        Raises:
            ValueError: If a user message has blank content.
        """
        role = Role(role)
        if role is Role.USER and not content.strip():
            raise ValueError("User message content must not be empty")

        message = Message(id=next(self._ids), role=role, content=content)
        self._transcript.append(message)
        self._notify()
        return message

    def set_pending(self, value: bool) -> None:
        self._pending = bool(value)
        self._notify()

    def set_document_context(self, text: str | None, name: str | None = None) -> None:
        """Replace the document context and its display name wholesale."""
        self._document_context = text or None
        self._document_name = name if self._document_context else None
        self._notify()

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener called after every mutation.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Session store listener failed")
