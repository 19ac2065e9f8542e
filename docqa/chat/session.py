"""Chat state for one browser session.

Holds the committed document context and the append-only transcript, and
drives a question through idle -> awaiting response -> resolved.
"""

import logging
from collections.abc import Callable

from docqa.agent import QAError, QAService, get_qa_service
from docqa.models.schemas import ChatMessage, MessageRole

logger = logging.getLogger(__name__)

GREETING = "I have processed the document. What would you like to know?"
MISSING_DOCUMENT_ERROR = "Please provide some document text first."


class ChatSession:
    """Manages document context and transcript for a user session.

    The transcript only grows: messages are appended in conversation order
    and never edited or removed, except that committing a new document
    starts a fresh transcript.
    """

    def __init__(
        self,
        qa_service: QAService | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            qa_service: Gateway used to answer questions.
                        The shared service is used if not provided.
            on_change: Called whenever the transcript or loading state changes.
        """
        self._qa_service = qa_service
        self._on_change = on_change
        self._messages: list[ChatMessage] = []
        self.document_text: str = ""
        self.is_loading: bool = False
        self.error: str | None = None

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def has_document(self) -> bool:
        return bool(self.document_text)

    @property
    def can_ask(self) -> bool:
        return self.has_document and not self.is_loading

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def set_document(self, text: str) -> None:
        """Commit text as the context for all following questions."""
        self.document_text = text
        self._messages = [ChatMessage(role=MessageRole.ASSISTANT, content=GREETING)]
        self.error = None
        self._notify()
        logger.info(f"Document context set ({len(text)} characters)")

    async def ask(self, question: str) -> ChatMessage | None:
        """Ask a question about the current document.

        The user message is appended before the model is called. On success
        the assistant's answer is appended with its sources; on failure an
        assistant message describing the error is appended and ``error`` is
        set for the banner.

        Args:
            question: The user's question.

        Returns:
            The appended assistant message, or None if the question was not
            sent (blank, no document, or another question still pending).
        """
        if not question.strip() or self.is_loading:
            return None

        if not self.has_document:
            self.error = MISSING_DOCUMENT_ERROR
            self._notify()
            return None

        self._messages.append(ChatMessage(role=MessageRole.USER, content=question))
        self.is_loading = True
        self.error = None
        self._notify()

        try:
            qa_service = self._qa_service or get_qa_service()
            result = await qa_service.answer(self.document_text, question)
            reply = ChatMessage(
                role=MessageRole.ASSISTANT,
                content=result.answer,
                sources=result.sources,
            )
        except (QAError, ValueError) as e:
            logger.warning(f"Question failed: {e}")
            self.error = f"Sorry, I couldn't get an answer. {e}"
            reply = ChatMessage(
                role=MessageRole.ASSISTANT,
                content=f"Sorry, I ran into an error. Please try again. Details: {e}",
            )
        finally:
            self.is_loading = False

        self._messages.append(reply)
        self._notify()
        return reply
