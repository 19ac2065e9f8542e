"""Question answering endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from docqa.agent import QAError, QAService, get_qa_service
from docqa.models.schemas import AskRequest, QAResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/qa", tags=["qa"])


def get_gateway() -> QAService:
    """Return the shared QA service, or 503 when the model is not configured."""
    try:
        return get_qa_service()
    except ValidationError as e:
        logger.error(f"QA service unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Question answering is not configured. Set LLM_API_KEY or OPENAI_API_KEY.",
        ) from e


@router.post("/ask", response_model=QAResult)
async def ask_question(
    request: AskRequest,
    qa_service: Annotated[QAService, Depends(get_gateway)],
) -> QAResult:
    """Answer a question from the supplied document context.

    Raises:
        422: Context or question missing or blank.
        502: The model call failed or returned an invalid answer.
        503: No API key is configured.
    """
    try:
        return await qa_service.answer(request.context, request.question)
    except QAError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e
