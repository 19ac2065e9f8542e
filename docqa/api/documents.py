"""Document text extraction endpoint.

Handles file upload, validation and text extraction. Nothing is stored:
the caller keeps the text and sends it back as context with each question.
"""

import logging

from fastapi import APIRouter, HTTPException, UploadFile, status

from docqa.models.schemas import DocumentExtractResponse
from docqa.parsing import FileTooLargeError, IngestionError, ingest_file
from docqa.parsing.pdf_parser import MAX_FILE_SIZE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_FILE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/extract", response_model=DocumentExtractResponse)
async def extract_document(file: UploadFile) -> DocumentExtractResponse:
    """Extract the text of an uploaded .txt, .md or .pdf file.

    Args:
        file: The uploaded file (multipart/form-data).

    Returns:
        DocumentExtractResponse with filename, text and page count.

    Raises:
        400: Missing filename, unsupported type, or unreadable file.
        413: File exceeds 10MB limit.
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    content = await _read_and_validate_size(file)

    try:
        document = await ingest_file(file.filename, content)
    except FileTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=str(e),
        ) from e
    except IngestionError as e:
        logger.warning(f"Extraction failed for {file.filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return DocumentExtractResponse(
        filename=document.filename,
        text=document.text,
        pages=document.pages,
    )
