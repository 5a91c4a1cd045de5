"""Conversation core for the chat client.

Responsibilities:
    - Ordered, append-only message log with a single in-flight request
    - Pending input buffer shared by typing and CSV uploads
    - Change notifications for whatever renders the conversation

Contains no UI code. The NiceGUI page only observes and calls into it.
"""

from cardchat.chat.state import ConversationState
from cardchat.chat.upload import UploadController, build_prompt

__all__ = ["ConversationState", "UploadController", "build_prompt"]
