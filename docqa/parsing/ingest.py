"""File ingestion: validates an uploaded file and returns its text.

Plain text formats are decoded as UTF-8; PDFs are handed to the pypdf
based parser.
"""

import logging

from docqa.models.schemas import IngestedDocument
from docqa.parsing.errors import FileTooLargeError, UnsupportedFileTypeError
from docqa.parsing.pdf_parser import MAX_FILE_SIZE, extract_pdf_text

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".md", ".pdf")
UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Please upload a .txt, .md, or .pdf file."


def is_supported_file(filename: str | None) -> bool:
    """Check the file name against the supported extensions, ignoring case."""
    if not filename:
        return False
    return filename.lower().endswith(SUPPORTED_EXTENSIONS)


def decode_text(content: bytes) -> str:
    """Decode text file bytes the way a browser's ``File.text()`` does.

    A UTF-8 byte order mark is dropped and invalid sequences become U+FFFD.
    """
    return content.decode("utf-8-sig", errors="replace")


async def ingest_file(filename: str, content: bytes) -> IngestedDocument:
    """Extract the full text of an uploaded file.

    Args:
        filename: Original file name, used to pick the reader.
        content: Raw file bytes.

    Returns:
        IngestedDocument with the extracted text.

    Raises:
        UnsupportedFileTypeError: If the extension is not .txt, .md or .pdf.
        FileTooLargeError: If the content exceeds MAX_FILE_SIZE.
        PDFParseError: If a PDF cannot be read.
    """
    if not is_supported_file(filename):
        logger.warning(f"Rejected unsupported file: {filename}")
        raise UnsupportedFileTypeError(UNSUPPORTED_FILE_MESSAGE)

    if len(content) > MAX_FILE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise FileTooLargeError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if filename.lower().endswith(".pdf"):
        pdf_content = await extract_pdf_text(content)
        logger.info(f"Extracted {pdf_content.pages} pages from {filename}")
        return IngestedDocument(filename=filename, text=pdf_content.text, pages=pdf_content.pages)

    text = decode_text(content)
    logger.info(f"Read {len(text)} characters from {filename}")
    return IngestedDocument(filename=filename, text=text)
