"""CSV upload endpoint for turning spending history into a prompt.

Handles file upload, validation and formatting. Nothing is sent to the
recommendation backend: the caller decides whether to send the prompt.
"""

import logging

from fastapi import APIRouter, HTTPException, UploadFile, status

from cardchat.chat.upload import build_prompt, decode_upload
from cardchat.errors import EmptyFileError, UnsupportedFileTypeError
from cardchat.models.schemas import CsvPromptResponse, UploadedFile
from cardchat.parsing.csv_prompt import count_rows

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])

MAX_UPLOAD_SIZE = 1024 * 1024  # 1MB


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_UPLOAD_SIZE:
        size_kb = len(content) / 1024
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_kb:.0f}KB) exceeds maximum allowed (1MB)",
        )

    return content


@router.post("/csv", response_model=CsvPromptResponse)
async def upload_csv(file: UploadFile) -> CsvPromptResponse:
    """Upload a CSV of spending habits and get the recommendation prompt.

    Args:
        file: The uploaded CSV file (multipart/form-data).

    Returns:
        CsvPromptResponse with filename, row count and formatted prompt.

    Raises:
        400: Not declared as text/csv, or no non-blank lines.
        413: File exceeds 1MB limit.
    """
    content = await _read_and_validate_size(file)
    upload = UploadedFile(
        filename=file.filename,
        content_type=file.content_type,
        content=content,
    )

    try:
        prompt = build_prompt(upload)
    except (UnsupportedFileTypeError, EmptyFileError) as e:
        logger.warning(f"CSV upload rejected for {file.filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    rows = count_rows(decode_upload(content))
    logger.info(f"Built prompt from {file.filename} ({rows} rows)")

    return CsvPromptResponse(filename=file.filename, rows=rows, prompt=prompt)
