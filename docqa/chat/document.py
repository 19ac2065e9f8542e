"""State of the document panel before the text is committed as context."""

import logging

from docqa.parsing import IngestionError, ingest_file, is_supported_file
from docqa.parsing.ingest import UNSUPPORTED_FILE_MESSAGE

logger = logging.getLogger(__name__)


class DocumentNotReadyError(Exception):
    """Raised when submitting a document that is empty, loading, or in error."""


class DocumentInput:
    """Holds the editable document text and the file badge shown above it.

    Attributes:
        text: Current text in the document area.
        file_label: File name badge, or None when the text was typed.
        file_error: Message for the last failed upload, if any.
        is_processing: True while a file is being read.
    """

    def __init__(self) -> None:
        self.text: str = ""
        self.file_label: str | None = None
        self.file_error: str | None = None
        self.is_processing: bool = False

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip()) and not self.is_processing and not self.file_error

    async def load_file(self, filename: str, content: bytes) -> None:
        """Replace the text with the content of an uploaded file.

        Failures are recorded in ``file_error`` and never raised.
        """
        if not is_supported_file(filename):
            logger.warning(f"Unsupported upload: {filename}")
            self.file_error = UNSUPPORTED_FILE_MESSAGE
            self.file_label = filename
            self.text = ""
            return

        self.file_label = f"Processing {filename}..."
        self.is_processing = True
        self.file_error = None
        self.text = ""

        try:
            document = await ingest_file(filename, content)
        except IngestionError as e:
            logger.warning(f"Error processing file {filename}: {e}")
            self.file_error = str(e)
            self.file_label = f"Error reading {filename}"
            self.text = f"Could not read the content of the file. {e}"
        else:
            self.text = document.text
            self.file_label = filename
        finally:
            self.is_processing = False

    def reject_upload(self, message: str) -> None:
        """Record an upload the browser refused before it reached the server."""
        logger.warning(f"Upload rejected: {message}")
        self.file_error = message
        self.file_label = None
        self.text = ""

    def edit_text(self, text: str) -> None:
        """Apply a manual edit; typed text is no longer tied to a file."""
        self.text = text
        self.file_label = None
        self.file_error = None

    def clear_error(self) -> None:
        if not self.is_processing:
            self.file_error = None

    def submit(self) -> str:
        """Return the text to use as document context.

        Raises:
            DocumentNotReadyError: If there is no usable text yet.
        """
        if not self.can_submit:
            raise DocumentNotReadyError("Document text is empty, still loading, or failed to load")
        return self.text
