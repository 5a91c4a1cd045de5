from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Author of a message in the conversation."""

    USER = "user"
    SERVER = "server"


class ConversationStatus(str, Enum):
    """States of the conversation state machine."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class Message(BaseModel):
    """A single entry in the conversation log.

    Attributes:
        sender: Who wrote the message.
        text: The message text shown to the user.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str


class ParsedReply(BaseModel):
    """A backend reply split into its hidden and visible parts.

    Attributes:
        reasoning: Text of the first <think> block, trimmed. Empty when absent.
        conclusion: Reply text with the reasoning block removed.
    """

    model_config = ConfigDict(frozen=True)

    reasoning: str = ""
    conclusion: str


class ChatRequest(BaseModel):
    """Request payload sent to the recommendation backend.

    Attributes:
        query: The user's message.
    """

    query: str = Field(..., min_length=1)

    @field_validator("query")
    @classmethod
    def reject_blank_query(cls, v: str) -> str:
        """Reject whitespace-only queries."""
        if not v.strip():
            raise ValueError("query must not be blank")
        return v


class UploadedFile(BaseModel):
    """A file picked by the user, independent of the UI framework.

    Attributes:
        filename: Original file name, if the browser sent one.
        content_type: MIME type declared by the browser.
        content: Raw file bytes.
    """

    filename: str | None = None
    content_type: str | None = None
    content: bytes = b""


class CsvPromptResponse(BaseModel):
    """Response after turning an uploaded CSV into a prompt.

    Attributes:
        filename: Name of the uploaded file.
        rows: Number of non-blank lines carried into the prompt.
        prompt: The formatted recommendation request.
    """

    filename: str | None
    rows: int = Field(ge=1)
    prompt: str
