"""CSV-to-prompt formatting for spending history uploads.

Lines are carried over verbatim: the prompt is read by a language model,
so columns, delimiters and quoting are left alone.
"""

import logging

from cardchat.errors import EmptyFileError

logger = logging.getLogger(__name__)

PROMPT_HEADER = "Below are my spending habits:\n\n"
PROMPT_TRAILER = "\nPlease suggest me a good credit card that I can use for more benefits."


def _content_lines(text: str) -> list[str]:
    """Return the stripped, non-blank lines of text in their original order."""
    stripped = (line.strip() for line in text.split("\n"))
    return [line for line in stripped if line]


def count_rows(text: str) -> int:
    """Count the lines that csv_to_prompt would keep."""
    return len(_content_lines(text))


def csv_to_prompt(text: str) -> str:
    """Format uploaded CSV text as a credit card recommendation request.

    Args:
        text: Decoded file content.

    Returns:
        Header line, one line per non-blank input row, and the request trailer.

    Raises:
        EmptyFileError: If the text has no non-blank lines.
    """
    rows = _content_lines(text)
    if not rows:
        raise EmptyFileError("The CSV file is empty.")

    logger.debug(f"Formatting {len(rows)} CSV rows into a prompt")

    body = "".join(f"{row}\n" for row in rows)
    return PROMPT_HEADER + body + PROMPT_TRAILER
