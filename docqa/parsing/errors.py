"""Errors raised while turning uploaded files into text."""


class IngestionError(Exception):
    """Raised when a file cannot be turned into document text."""


class UnsupportedFileTypeError(IngestionError):
    """Raised when the file extension is not one we can read."""


class FileTooLargeError(IngestionError):
    """Raised when a file exceeds the upload size limit."""
