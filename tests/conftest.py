"""Pytest fixtures and shared test configuration.

Fixtures:
    - store: Fresh in-memory session store
    - fake_client: Scriptable completion capability
    - fake_backend: Document backend yielding fixed text runs per page
    - make_pdf: Builds small text PDFs in memory
    - async_client: HTTPX client for API testing
"""

import asyncio
from collections.abc import AsyncGenerator, Callable, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from arix.api import app
from arix.models.schemas import (
    Candidate,
    Content,
    GenerateContentResponse,
    GenerationConfig,
    Part,
    PayloadEntry,
)
from arix.session.store import SessionStore


def text_response(text: str | None) -> GenerateContentResponse:
    """Build a response with one candidate holding one text part."""
    return GenerateContentResponse(
        candidates=[Candidate(content=Content(role="model", parts=[Part(text=text)]))]
    )


class FakeCompletionClient:
    """Completion capability that records calls and replays a scripted outcome.

    Set ``error`` to raise instead of answering. Set ``gate`` to an
    ``asyncio.Event`` to hold the call open until the event is set.
    """

    def __init__(self) -> None:
        self.response: GenerateContentResponse = text_response("Hello!")
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.started = asyncio.Event()
        self.calls: list[tuple[list[PayloadEntry], GenerationConfig]] = []

    async def generate(
        self,
        entries: Sequence[PayloadEntry],
        config: GenerationConfig,
    ) -> GenerateContentResponse:
        self.calls.append((list(entries), config))
        self.started.set()
        await asyncio.sleep(0)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.response


class FakeDocument:
    def __init__(self, pages: list[list[str]]) -> None:
        self._pages = pages
        self.requested: list[int] = []

    @property
    def page_count(self) -> int:
        return len(self._pages)

    async def get_text_runs(self, index: int) -> list[str]:
        self.requested.append(index)
        await asyncio.sleep(0)
        return self._pages[index]


class FakeBackend:
    """Document backend returning the same pages for any input."""

    def __init__(self, pages: list[list[str]] | None = None) -> None:
        self.pages = pages if pages is not None else [["A", "B"], ["C"]]
        self.opened: list[bytes] = []
        self.error: Exception | None = None
        self.last_document: FakeDocument | None = None

    def open(self, data: bytes) -> FakeDocument:
        self.opened.append(data)
        if self.error is not None:
            raise self.error
        self.last_document = FakeDocument(self.pages)
        return self.last_document


def build_pdf(page_texts: list[str]) -> bytes:
    """Build a minimal PDF with one Helvetica text line per page."""
    count = len(page_texts)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(count))
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(page_texts):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_pos = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_pos}\n%%EOF\n"
    ).encode()
    return bytes(out)


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def fake_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def make_pdf() -> Callable[[list[str]], bytes]:
    """Return the in-memory PDF builder.

    Returns:
        Callable taking one text line per page.
    """
    return build_pdf


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
