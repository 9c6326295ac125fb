"""PDF parsing utilities for document context.

Responsibilities:
    - Byte-level validation (size limit, PDF header)
    - Page-at-a-time text extraction with pypdf
    - Replacing a session's document context on successful ingestion

Any backend that opens bytes and yields per-page text runs can replace
pypdf.
"""

from arix.parsing.pdf_parser import (
    MAX_FILE_SIZE,
    DocumentBackend,
    DocumentIngestor,
    DocumentParseError,
    IngestedDocument,
    ParsedDocument,
    PypdfBackend,
    attach_document,
    join_page_texts,
)

__all__ = [
    "MAX_FILE_SIZE",
    "DocumentBackend",
    "DocumentIngestor",
    "DocumentParseError",
    "IngestedDocument",
    "ParsedDocument",
    "PypdfBackend",
    "attach_document",
    "join_page_texts",
]
