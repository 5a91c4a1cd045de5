"""Conversation state machine for one chat session.

The session owns the message log, the pending input buffer and the loading
flag. It cycles IDLE -> AWAITING_RESPONSE -> IDLE for every sent message and
never has more than one request in flight. Renderers subscribe to be told
about every mutation instead of reading ambient globals.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from cardchat.errors import TransportError
from cardchat.models.schemas import ConversationStatus, Message, Sender
from cardchat.parsing.reply_parser import parse_reply

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def send(self, query: str) -> str: ...


Observer = Callable[["ConversationState"], None]


class ConversationState:
    """Message log, pending input and loading flag for a chat session."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self._messages: list[Message] = []
        self._status = ConversationStatus.IDLE
        self._pending_input = ""
        self._observers: list[Observer] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        """Messages in chronological order."""
        return tuple(self._messages)

    @property
    def status(self) -> ConversationStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._status is ConversationStatus.AWAITING_RESPONSE

    @property
    def pending_input(self) -> str:
        """Text waiting to be sent (typed or produced by a CSV upload)."""
        return self._pending_input

    @pending_input.setter
    def pending_input(self, text: str) -> None:
        if text == self._pending_input:
            return
        self._pending_input = text
        self._notify()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a callback run after every state change.

        Returns:
            A function that removes the callback again.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    def _append(self, sender: Sender, text: str) -> Message:
        message = Message(sender=sender, text=text)
        self._messages.append(message)
        return message

    async def send_message(self, text: str) -> Message | None:
        """Send text to the backend and record both sides of the exchange.

        The user message is logged before the request goes out. Blank text
        and calls made while a request is in flight are ignored.

        Args:
            text: The message to send.

        Returns:
            The server message appended to the log, or None if nothing was sent.

        Raises:
            TransportError: If the backend call failed. The log keeps the user
                message only and the state is back to IDLE.
        """
        if not text.strip():
            return None
        if self.is_loading:
            logger.info("Ignoring send while a response is pending")
            return None

        self._append(Sender.USER, text)
        self._status = ConversationStatus.AWAITING_RESPONSE
        self._pending_input = ""

        try:
            self._notify()
            raw = await self._transport.send(text)
        except TransportError as e:
            logger.error(f"Error fetching response: {e}")
            raise
        else:
            reply = parse_reply(raw)
            if reply.reasoning:
                logger.debug(f"Dropped {len(reply.reasoning)} characters of reasoning")
            return self._append(Sender.SERVER, reply.conclusion)
        finally:
            self._status = ConversationStatus.IDLE
            self._notify()
