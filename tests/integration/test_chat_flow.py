"""Integration tests for a full conversation against an in-process backend.

Uses the real ChatTransport and ConversationState talking over httpx to a
small FastAPI app standing in for the recommendation service.
"""

import pytest
from fastapi import FastAPI, HTTPException
import httpx
from httpx import ASGITransport

from cardchat.chat.state import ConversationState
from cardchat.chat.upload import UploadController
from cardchat.client.config import ClientConfig
from cardchat.client.transport import ChatTransport
from cardchat.errors import TransportError
from cardchat.models.schemas import ChatRequest, Message, Sender, UploadedFile


def create_backend(received: list[str]) -> FastAPI:
    """Recommendation service double that answers with a reasoning block."""
    backend = FastAPI()

    @backend.post("/chat")
    async def chat(request: ChatRequest) -> str:
        received.append(request.query)
        if request.query == "explode":
            raise HTTPException(status_code=500, detail="model crashed")
        return f"<think>user asked: {request.query}</think>\n\nGet the Travel Rewards card."

    return backend


@pytest.fixture
def received() -> list[str]:
    return []


@pytest.fixture
def state(received: list[str]) -> ConversationState:
    transport = ChatTransport(
        config=ClientConfig(api_url="http://backend.test/chat"),
        transport=ASGITransport(app=create_backend(received)),
    )
    return ConversationState(transport)


class TestChatFlow:
    """End-to-end send/receive through HTTP."""

    async def test_reply_shows_only_conclusion(
        self, state: ConversationState, received: list[str]
    ) -> None:
        reply = await state.send_message("hello")

        assert received == ["hello"]
        assert reply == Message(sender=Sender.SERVER, text="Get the Travel Rewards card.")
        assert [m.text for m in state.messages] == ["hello", "Get the Travel Rewards card."]
        assert all("think" not in m.text for m in state.messages)
        assert not state.is_loading

    async def test_backend_error_surfaces(self, state: ConversationState) -> None:
        with pytest.raises(TransportError) as exc_info:
            await state.send_message("explode")

        assert exc_info.value.status_code == 500
        assert state.messages == (Message(sender=Sender.USER, text="explode"),)
        assert not state.is_loading

    async def test_upload_then_send(
        self, state: ConversationState, received: list[str], sample_csv_path
    ) -> None:
        """A staged CSV prompt is sent verbatim once the user sends it."""
        uploads = UploadController(state)
        prompt = uploads.handle_upload(
            UploadedFile(
                filename="spending.csv",
                content_type="text/csv",
                content=sample_csv_path.read_bytes(),
            )
        )

        await state.send_message(state.pending_input)

        assert received == [prompt]
        assert state.pending_input == ""
        assert state.messages[0] == Message(sender=Sender.USER, text=prompt)
        assert state.messages[1].sender is Sender.SERVER


class TestUnreachableBackend:
    async def test_connection_refused(self) -> None:
        """A refused connection is a TransportError and the user can retry."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = ChatTransport(
            config=ClientConfig(api_url="http://backend.test/chat"),
            transport=httpx.MockTransport(refuse),
        )
        state = ConversationState(transport)

        with pytest.raises(TransportError, match="Connection failed"):
            await state.send_message("hi")

        assert state.messages == (Message(sender=Sender.USER, text="hi"),)
        assert not state.is_loading
