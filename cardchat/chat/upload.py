"""Stages an uploaded CSV file as pending chat input."""

import logging

from cardchat.chat.state import ConversationState
from cardchat.errors import UnsupportedFileTypeError, UploadValidationError
from cardchat.models.schemas import UploadedFile
from cardchat.parsing.csv_prompt import csv_to_prompt

logger = logging.getLogger(__name__)

CSV_CONTENT_TYPE = "text/csv"


def decode_upload(content: bytes) -> str:
    """Decode file bytes as UTF-8, dropping a leading BOM."""
    return content.decode("utf-8-sig", errors="replace")


def build_prompt(file: UploadedFile) -> str:
    """Validate an uploaded file and format its content as a prompt.

    Args:
        file: The uploaded file.

    Returns:
        The formatted recommendation request.

    Raises:
        UnsupportedFileTypeError: If the declared type is not text/csv.
        EmptyFileError: If the file has no non-blank lines.
    """
    if file.content_type != CSV_CONTENT_TYPE:
        raise UnsupportedFileTypeError("Please upload a valid CSV file.")

    return csv_to_prompt(decode_upload(file.content))


class UploadController:
    """Turns picked CSV files into pending input for a conversation."""

    def __init__(self, state: ConversationState) -> None:
        self._state = state

    def handle_upload(self, file: UploadedFile | None) -> str | None:
        """Replace the pending input with the prompt built from file.

        Does not send anything. On failure the pending input is untouched.

        Args:
            file: The picked file, or None if the picker was cancelled.

        Returns:
            The staged prompt, or None when no file was given.

        Raises:
            UnsupportedFileTypeError: If the file is not CSV.
            EmptyFileError: If the file has no usable lines.
        """
        if file is None:
            return None

        try:
            prompt = build_prompt(file)
        except UploadValidationError as e:
            logger.warning(f"Rejected upload {file.filename!r}: {e}")
            raise

        self._state.pending_input = prompt
        logger.info(f"Staged prompt from {file.filename!r}")
        return prompt
