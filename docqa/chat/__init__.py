"""Document and conversation state behind the chat page.

Kept free of UI code so the page stays a thin rendering layer.
"""

from docqa.chat.document import DocumentInput, DocumentNotReadyError
from docqa.chat.session import ChatSession

__all__ = ["ChatSession", "DocumentInput", "DocumentNotReadyError"]
