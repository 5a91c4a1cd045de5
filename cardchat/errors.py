"""Exceptions raised by the chat client core."""


class CardChatError(Exception):
    """Base class for recoverable chat client failures."""

    pass


class TransportError(CardChatError):
    """Raised when the chat backend cannot be reached or answers with an error.

    Attributes:
        status_code: HTTP status returned by the backend, or None for
            network-level failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UploadValidationError(CardChatError):
    """Raised when an uploaded file cannot be turned into a prompt."""

    pass


class UnsupportedFileTypeError(UploadValidationError):
    """Raised when the uploaded file is not declared as CSV."""

    pass


class EmptyFileError(UploadValidationError):
    """Raised when the uploaded file has no non-blank lines."""

    pass
