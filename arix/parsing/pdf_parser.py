"""PDF text extraction for document context.

The ingestor is polymorphic over a document backend: anything that can
open raw bytes and yield per-page text runs. The default backend uses
pypdf and extracts one page at a time in a worker thread.
"""

import asyncio
import io
import logging
from collections.abc import Callable
from typing import Protocol

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from arix.session.store import SessionStore

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"


class DocumentParseError(Exception):
    """Raised when a document cannot be decoded or read."""

    pass


class ParsedDocument(Protocol):
    @property
    def page_count(self) -> int: ...

    async def get_text_runs(self, index: int) -> list[str]: ...


class DocumentBackend(Protocol):
    def open(self, data: bytes) -> ParsedDocument: ...


class IngestedDocument(BaseModel):
    """Extracted text of a document.

    Attributes:
        text: Page texts in order, each followed by a line break.
        pages: Total number of pages in the document.
    """

    text: str
    pages: int = Field(ge=1)


class PypdfDocument:
    """A document opened with pypdf."""

    def __init__(self, reader: PdfReader) -> None:
        self._reader = reader

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    def _collect_runs(self, index: int) -> list[str]:
        runs: list[str] = []

        def visit(text, cm, tm, font_dict, font_size) -> None:
            if text:
                runs.append(text)

        self._reader.pages[index].extract_text(visitor_text=visit)
        return runs

    async def get_text_runs(self, index: int) -> list[str]:
        return await asyncio.to_thread(self._collect_runs, index)


class PypdfBackend:
    def open(self, data: bytes) -> PypdfDocument:
        return PypdfDocument(PdfReader(io.BytesIO(data)))


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        DocumentParseError: If validation fails.
    """
    if not file_content:
        raise DocumentParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise DocumentParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise DocumentParseError("Invalid PDF: file does not start with PDF header")


def join_page_texts(pages: list[list[str]]) -> str:
    """Join text runs with spaces within a page; end every page with a newline."""
    return "".join(" ".join(runs) + "\n" for runs in pages)


class DocumentIngestor:
    """Turns uploaded document bytes into plain text.

    The backend is created on first use.
    """

    def __init__(
        self, backend_factory: Callable[[], DocumentBackend] = PypdfBackend
    ) -> None:
        self._backend_factory = backend_factory
        self._backend: DocumentBackend | None = None

    @property
    def backend(self) -> DocumentBackend:
        if self._backend is None:
            self._backend = self._backend_factory()
        return self._backend

    async def ingest(self, data: bytes) -> IngestedDocument:
        """Extract the text of every page, in document order.

        Args:
            data: Raw bytes of the PDF file.

        Returns:
            IngestedDocument with the joined text and page count.

        Raises:
            DocumentParseError: If the file is invalid, too large, empty, or corrupt.
        """
        _validate_pdf_bytes(data)

        try:
            document = self.backend.open(data)
            page_count = document.page_count
        except PdfReadError as e:
            raise DocumentParseError(f"Corrupt or invalid PDF: {e}") from e
        except Exception as e:
            raise DocumentParseError(f"Failed to read PDF: {e}") from e

        if page_count == 0:
            raise DocumentParseError("PDF contains no pages")

        pages: list[list[str]] = []
        for i in range(page_count):
            try:
                pages.append(await document.get_text_runs(i))
            except Exception as e:
                raise DocumentParseError(
                    f"Failed to extract text from page {i + 1}: {e}"
                ) from e

        text = join_page_texts(pages)
        if not text.strip():
            logger.warning("PDF contains no extractable text (may be scanned/image-based)")

        return IngestedDocument(text=text, pages=page_count)


async def attach_document(
    store: SessionStore,
    ingestor: DocumentIngestor,
    data: bytes,
    name: str,
) -> bool:
    """Ingest a document and replace the session's document context.

    On failure the previous context and name are kept. The pending flag
    is never touched.

    Returns:
        True if the context was replaced.
    """
    try:
        document = await ingestor.ingest(data)
    except DocumentParseError as e:
        logger.warning(f"PDF parse error for {name}: {e}")
        return False

    store.set_document_context(document.text, name)
    logger.info(f"Attached document {name} ({document.pages} pages)")
    return True
