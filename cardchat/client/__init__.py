"""Backend access for the chat client.

Wraps the recommendation service's HTTP endpoint behind a single async
send() call and loads its settings from the environment.
"""

from cardchat.client.config import ClientConfig, get_client_config
from cardchat.client.transport import ChatTransport

__all__ = ["ChatTransport", "ClientConfig", "get_client_config"]
