"""HTTP transport to the recommendation backend.

One POST per message, no retry. The caller decides how to surface failures.
"""

import json
import logging

import httpx

from cardchat.client.config import ClientConfig, get_client_config
from cardchat.errors import TransportError
from cardchat.models.schemas import ChatRequest

logger = logging.getLogger(__name__)


def reply_text(data: object) -> str:
    """Return the string form of a decoded response body.

    The backend is expected to answer with a JSON string. Any other JSON
    value is serialized back to JSON text so that nothing is dropped.
    """
    if isinstance(data, str):
        return data
    logger.warning(
        f"Chat backend returned a JSON {type(data).__name__}, not a string; "
        "passing its JSON text through as the reply"
    )
    return json.dumps(data, ensure_ascii=False)


class ChatTransport:
    """Sends user queries to the chat endpoint and returns the raw reply."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, e.g. for in-process backends.
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def api_url(self) -> str:
        return self._config.api_url

    async def send(self, query: str) -> str:
        """Post a query and return the reply text.

        Args:
            query: The user's message.

        Returns:
            The response body's string representation.

        Raises:
            ValueError: If query is blank.
            TransportError: On non-success status, network failure, or a
                body that is not JSON.
        """
        if not query.strip():
            raise ValueError("query must not be blank")
        payload = ChatRequest(query=query).model_dump()

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._config.timeout),
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self._config.api_url, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                logger.warning(f"Chat backend answered HTTP {status_code}")
                raise TransportError(
                    f"HTTP error! Status: {status_code}", status_code=status_code
                ) from e
            except httpx.RequestError as e:
                logger.warning(f"Chat backend unreachable at {self._config.api_url}: {e}")
                raise TransportError(f"Connection failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Chat backend returned a non-JSON body: {e}")
            raise TransportError(
                "Invalid JSON in chat response", status_code=response.status_code
            ) from e

        return reply_text(data)
