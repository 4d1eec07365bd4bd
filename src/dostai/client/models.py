"""Data models for the chat client.

Messages and conversations are immutable; appending to a conversation
returns a new one, leaving the original untouched.
"""

import time
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

GREETING = "Hello, and welcome to Dost AI! How can I help you today?"


class Sender(str, Enum):
    """Who wrote a message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single chat message."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Unique, monotonic id (creation time in ms)")
    text: str = Field(description="Raw message text, may contain markdown")
    sender: Sender
    timestamp: datetime = Field(default_factory=datetime.now)
    error: bool = Field(default=False, description="True for failure notices shown in place of a reply")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class Conversation(BaseModel):
    """Ordered, append-only sequence of messages. Insertion order is display order."""

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()

    @classmethod
    def seeded(cls) -> "Conversation":
        """Return a conversation holding only the bot greeting."""
        return cls().append(GREETING, Sender.BOT)

    def append(self, text: str, sender: Sender, error: bool = False) -> "Conversation":
        """Return a new conversation with one more message at the end.

        The id is the current time in milliseconds, bumped past the previous
        id when two messages land in the same millisecond.
        """
        last = self.last
        message_id = _now_ms() if last is None else max(_now_ms(), last.id + 1)
        message = Message(id=message_id, text=text, sender=sender, error=error)
        return Conversation(messages=self.messages + (message,))

    def get(self, message_id: int) -> Message:
        """Look up a message by id.

        Raises:
            KeyError: If no message has that id
        """
        for message in self.messages:
            if message.id == message_id:
                return message
        raise KeyError(message_id)

    @property
    def last(self) -> Message | None:
        return self.messages[-1] if self.messages else None

    def __len__(self) -> int:
        return len(self.messages)
