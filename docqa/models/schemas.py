from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageRole(str, Enum):
    """Speaker of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single message in the conversation transcript.

    Messages are frozen once created; the transcript only ever grows.

    Attributes:
        role: Who wrote the message.
        content: The message text.
        sources: Excerpts from the document quoted in support of an answer.
    """

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str
    sources: list[str] | None = None


class QAResult(BaseModel):
    """Structured answer returned by the model for one question.

    Attributes:
        answer: Answer based only on the provided context.
        sources: Exact sentences from the context supporting the answer.
    """

    answer: str = Field(
        ...,
        description="A detailed answer to the user's question based only on the provided context.",
    )
    sources: list[str] = Field(
        ...,
        description="The exact sentences from the context that directly support the answer.",
    )


class IngestedDocument(BaseModel):
    """Text extracted from an uploaded file.

    Attributes:
        filename: Original file name.
        text: Full document text.
        pages: Page count for paged formats (PDF), None for plain text.
    """

    filename: str
    text: str
    pages: int | None = Field(default=None, ge=0)


class AskRequest(BaseModel):
    """Request payload for the question answering endpoint.

    Attributes:
        context: Document text to answer from.
        question: User's question about the document.
    """

    context: str = Field(..., min_length=1)
    question: str = Field(..., min_length=1)

    @field_validator("context")
    @classmethod
    def require_context(cls, v: str) -> str:
        """Reject whitespace-only context without altering the text."""
        if not v.strip():
            raise ValueError("Document context is required")
        return v

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Strip whitespace from question before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class DocumentExtractResponse(BaseModel):
    """Response after extracting text from an uploaded file.

    Attributes:
        filename: Name of the uploaded file.
        text: Extracted document text.
        pages: Number of pages (PDF only).
    """

    filename: str
    text: str
    pages: int | None = None
