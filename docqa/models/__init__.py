"""Pydantic models shared by the UI, the API and the QA gateway.

Models:
    - MessageRole / ChatMessage: transcript entries
    - QAResult: structured answer with supporting sources
    - IngestedDocument: text extracted from an uploaded file
    - AskRequest / DocumentExtractResponse: HTTP payloads
"""

from docqa.models.schemas import (
    AskRequest,
    ChatMessage,
    DocumentExtractResponse,
    IngestedDocument,
    MessageRole,
    QAResult,
)

__all__ = [
    "AskRequest",
    "ChatMessage",
    "DocumentExtractResponse",
    "IngestedDocument",
    "MessageRole",
    "QAResult",
]
