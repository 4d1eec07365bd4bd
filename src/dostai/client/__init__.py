"""Chat client core: conversation state and the relay connection.

Module structure:
- models.py: Message and Conversation (immutable)
- session.py: ChatSession, the explicit state object the UI renders
- relay_client.py: httpx client for the relay service
- formatting.py: timestamp and markdown helpers
- config.py: build-time constants (relay URL, timers)
"""

from .config import COPY_INDICATOR_SECONDS, ERROR_REPLY, RELAY_URL
from .models import GREETING, Conversation, Message, Sender
from .relay_client import RelayClient, RelayError
from .session import ChatSession, Relay, SubmitOutcome

__all__ = [
    "COPY_INDICATOR_SECONDS",
    "ERROR_REPLY",
    "GREETING",
    "RELAY_URL",
    "ChatSession",
    "Conversation",
    "Message",
    "Relay",
    "RelayClient",
    "RelayError",
    "Sender",
    "SubmitOutcome",
]
