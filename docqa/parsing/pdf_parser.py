"""PDF text extraction using pypdf.

Pages are read in order and joined with a blank line between them.
"""

import asyncio
import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from docqa.parsing.errors import IngestionError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
PAGE_SEPARATOR = "\n\n"

_METADATA_FIELDS = {
    "/Title": "title",
    "/Author": "author",
    "/Subject": "subject",
    "/Creator": "creator",
    "/Producer": "producer",
}


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Page texts joined in page order.
        pages: Total number of pages in the document.
        metadata: Document metadata (title, author, etc.).
    """

    text: str
    pages: int = Field(ge=0)
    metadata: dict[str, str] = Field(default_factory=dict)


class PDFParseError(IngestionError):
    """Raised when PDF parsing fails."""


def _validate_pdf_bytes(file_content: bytes) -> None:
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise PDFParseError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _extract_metadata(reader: PdfReader) -> dict[str, str]:
    try:
        info = reader.metadata
    except Exception as e:
        logger.warning(f"Failed to read PDF metadata: {e}")
        return {}
    if not info:
        return {}

    metadata = {
        name: str(info[key]) for key, name in _METADATA_FIELDS.items() if info.get(key)
    }
    if info.get("/CreationDate"):
        metadata["creation_date"] = str(info["/CreationDate"])
    return metadata


def parse_pdf(file_content: bytes) -> PDFContent:
    """Parse a PDF file and extract the text of every page.

    Empty pages contribute an empty string, so page boundaries stay
    visible in the joined text.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with extracted text, page count, and metadata.

    Raises:
        PDFParseError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise PDFParseError("PDF contains no pages")

    page_texts: list[str] = []
    for number, page in enumerate(reader.pages, start=1):
        try:
            page_texts.append(page.extract_text() or "")
        except Exception as e:
            raise PDFParseError(f"Failed to extract text from page {number}: {e}") from e

    text = PAGE_SEPARATOR.join(page_texts)
    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(text=text, pages=pages, metadata=_extract_metadata(reader))


async def extract_pdf_text(file_content: bytes) -> PDFContent:
    """Parse a PDF in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(parse_pdf, file_content)
