"""PDF text-extraction endpoint.

Stateless: extracts text with the same ingestor the chat page uses and
returns it without touching any chat session.
"""

import logging

from fastapi import APIRouter, HTTPException, UploadFile, status

from arix.models.schemas import DocumentExtractResponse
from arix.parsing.pdf_parser import MAX_FILE_SIZE, DocumentIngestor, DocumentParseError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])

# 10MB limit matches pdf_parser constant
MAX_UPLOAD_SIZE = MAX_FILE_SIZE

_ingestor = DocumentIngestor()


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Raises:
        HTTPException: 400 if the name is missing or the extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/extract", response_model=DocumentExtractResponse)
async def extract_document(file: UploadFile) -> DocumentExtractResponse:
    """Extract plain text from an uploaded PDF.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        DocumentExtractResponse with filename, page count and text.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds 10MB limit.
    """
    filename = _validate_file_extension(file.filename)
    content = await _read_and_validate_size(file)

    try:
        document = await _ingestor.ingest(content)
    except DocumentParseError as e:
        logger.warning(f"PDF parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    logger.info(f"Extracted text from {filename} ({document.pages} pages)")
    return DocumentExtractResponse(
        filename=filename,
        pages=document.pages,
        characters=len(document.text),
        text=document.text,
    )
