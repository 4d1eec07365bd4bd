"""Chat session state.

Hides how the conversation, the in-flight flag and the copy indicators
change over time. The UI only reads this state and re-renders when told to.

Submission is a two-phase operation:
    begin(prompt) -> pending -> resolve(text) | fail(error)

complete(prompt) runs the second phase against the relay; submit(prompt)
runs both.

Overlapping submissions are rejected: while a request is pending, begin()
returns None and no message is added.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from .config import COPY_INDICATOR_SECONDS, ERROR_REPLY
from .models import Conversation, Sender

logger = logging.getLogger("dostai.client")


class Relay(Protocol):
    """Anything that turns a prompt into reply text."""

    async def generate(self, prompt: str) -> str: ...


class SubmitOutcome(str, Enum):
    """Result of ChatSession.submit."""

    EMPTY = "empty"
    REJECTED = "rejected"
    RESOLVED = "resolved"
    FAILED = "failed"


class ChatSession:
    """Owns the conversation and the pending / copied state.

    Example:
        session = ChatSession(relay)
        session.subscribe(view.refresh)
        await session.submit("2+2?")
    """

    def __init__(
        self,
        relay: Relay,
        conversation: Conversation | None = None,
        copy_indicator_seconds: float = COPY_INDICATOR_SECONDS,
    ) -> None:
        self._relay = relay
        self._conversation = conversation if conversation is not None else Conversation.seeded()
        self._pending = False
        self._copy_indicator_seconds = copy_indicator_seconds
        self._copied: dict[int, asyncio.TimerHandle] = {}
        self._listeners: list[Callable[[], None]] = []

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    @property
    def pending(self) -> bool:
        return self._pending

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback fired after every state change."""
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in self._listeners:
            listener()

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def begin(self, prompt: str) -> str | None:
        """Start a submission.

        Returns:
            The prompt to send, or None when the prompt is blank or another
            request is still pending (nothing changes in either case)
        """
        if not prompt.strip():
            return None
        if self._pending:
            logger.debug("Submission rejected: a request is already pending")
            return None

        self._conversation = self._conversation.append(prompt, Sender.USER)
        self._pending = True
        self._changed()
        return prompt

    def resolve(self, text: str) -> None:
        """Settle the pending request with the relay's reply."""
        self._conversation = self._conversation.append(text, Sender.BOT)
        self._pending = False
        self._changed()

    def fail(self, error: BaseException) -> None:
        """Settle the pending request with a visible error message."""
        logger.warning("Relay request failed: %s", error)
        self._conversation = self._conversation.append(ERROR_REPLY, Sender.BOT, error=True)
        self._pending = False
        self._changed()

    async def submit(self, prompt: str) -> SubmitOutcome:
        """Run a full submission cycle against the relay."""
        if not prompt.strip():
            return SubmitOutcome.EMPTY

        to_send = self.begin(prompt)
        if to_send is None:
            return SubmitOutcome.REJECTED

        return await self.complete(to_send)

    async def complete(self, prompt: str) -> SubmitOutcome:
        """Send a prompt accepted by begin() and settle the pending request."""
        try:
            text = await self._relay.generate(prompt)
        except Exception as e:
            self.fail(e)
            return SubmitOutcome.FAILED

        self.resolve(text)
        return SubmitOutcome.RESOLVED

    # ------------------------------------------------------------------
    # Copy indicators
    # ------------------------------------------------------------------

    def copy(self, message_id: int) -> str:
        """Mark a message as copied and return its raw text.

        The mark clears itself after the indicator duration. Each message has
        its own timer; copying the same message again restarts it.

        Raises:
            KeyError: If no message has that id
        """
        message = self._conversation.get(message_id)

        previous = self._copied.pop(message_id, None)
        if previous is not None:
            previous.cancel()

        loop = asyncio.get_running_loop()
        self._copied[message_id] = loop.call_later(
            self._copy_indicator_seconds, self._clear_copied, message_id
        )
        self._changed()
        return message.text

    def _clear_copied(self, message_id: int) -> None:
        if self._copied.pop(message_id, None) is not None:
            self._changed()

    def is_copied(self, message_id: int) -> bool:
        return message_id in self._copied

    @property
    def copied_ids(self) -> frozenset[int]:
        return frozenset(self._copied)

    def close(self) -> None:
        """Cancel outstanding indicator timers."""
        for handle in self._copied.values():
            handle.cancel()
        self._copied.clear()
