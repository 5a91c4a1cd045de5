"""Client configuration with environment variable loading.

Pydantic-based settings for reaching the recommendation backend.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "http://127.0.0.1:5000/chat"


def _timeout_from_env() -> str | None:
    return os.getenv("CHAT_API_TIMEOUT", "").strip() or None


class ClientConfig(BaseModel):
    """Configuration for the chat backend transport.

    Attributes:
        api_url: Full URL of the backend chat endpoint.
        timeout: Request timeout in seconds (None waits indefinitely).
    """

    model_config = ConfigDict(validate_default=True)

    api_url: str = Field(
        default_factory=lambda: os.getenv("CHAT_API_URL", DEFAULT_API_URL),
        description="Backend chat endpoint",
    )
    timeout: float | None = Field(
        default_factory=_timeout_from_env,
        gt=0.0,
        description="Request timeout in seconds, None for no timeout",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate that the endpoint is an http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("CHAT_API_URL must be an http:// or https:// URL")
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If CHAT_API_URL or CHAT_API_TIMEOUT is malformed.
    """
    return ClientConfig()
