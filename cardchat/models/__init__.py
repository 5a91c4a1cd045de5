"""Pydantic models for conversation state and HTTP payloads.

Models:
    - Sender / ConversationStatus: closed sets of tags
    - Message: immutable conversation log entry
    - ParsedReply: reply split into reasoning and conclusion
    - ChatRequest: body sent to the recommendation backend
    - UploadedFile: framework-neutral view of a picked file
    - CsvPromptResponse: result of the CSV upload endpoint
"""

from cardchat.models.schemas import (
    ChatRequest,
    ConversationStatus,
    CsvPromptResponse,
    Message,
    ParsedReply,
    Sender,
    UploadedFile,
)

__all__ = [
    "ChatRequest",
    "ConversationStatus",
    "CsvPromptResponse",
    "Message",
    "ParsedReply",
    "Sender",
    "UploadedFile",
]
