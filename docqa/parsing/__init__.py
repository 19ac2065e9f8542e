"""File ingestion for document Q&A.

Turns an uploaded or dropped file into a single text string.

Responsibilities:
    - Extension validation (.txt, .md, .pdf)
    - UTF-8 decoding of plain text files
    - PDF text extraction with pypdf, pages joined in order
"""

from docqa.parsing.errors import FileTooLargeError, IngestionError, UnsupportedFileTypeError
from docqa.parsing.ingest import SUPPORTED_EXTENSIONS, ingest_file, is_supported_file
from docqa.parsing.pdf_parser import PDFContent, PDFParseError, extract_pdf_text, parse_pdf

__all__ = [
    "FileTooLargeError",
    "IngestionError",
    "PDFContent",
    "PDFParseError",
    "SUPPORTED_EXTENSIONS",
    "UnsupportedFileTypeError",
    "extract_pdf_text",
    "ingest_file",
    "is_supported_file",
    "parse_pdf",
]
