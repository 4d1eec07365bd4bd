"""
Dost AI: a thin relay to a generative-language API plus a terminal chat client.

Each module hides one design decision: which provider answers prompts (llm),
how prompts travel over HTTP (relay), how conversation state evolves (client),
and how it is drawn (ui).
"""

__version__ = "0.1.0"

from .client import ChatSession, Conversation, Message, RelayClient, RelayError, Sender
from .llm import GeminiProvider, ProviderError, TextGenerator, create_text_generator
from .relay import RelaySettings, create_app

__all__ = [
    "ChatSession",
    "Conversation",
    "GeminiProvider",
    "Message",
    "ProviderError",
    "RelayClient",
    "RelayError",
    "RelaySettings",
    "Sender",
    "TextGenerator",
    "create_app",
    "create_text_generator",
]
