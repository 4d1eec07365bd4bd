"""Custom Textual widgets for the chat UI.

Hides widget implementation details:
- Message bubble layout and markdown rendering
- The per-message copy affordance
- The typing indicator animation
- Input enable/disable while a request is pending
"""

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Input, Markdown, Static

from ..client.formatting import format_time, markdown_parser
from ..client.models import Message as ChatMessage
from ..client.models import Sender
from ..client.session import ChatSession
from .config import (
    ASSISTANT_NAME,
    COPIED_LABEL,
    COPY_LABEL,
    INPUT_PLACEHOLDER,
    TYPING_FRAME_SECONDS,
    TYPING_FRAMES,
    USER_LABEL,
)


class CopyButton(Static):
    """Clickable label that asks the app to copy one message."""

    class Pressed(Message):
        """Posted when the user clicks the copy label."""

        def __init__(self, message_id: int) -> None:
            super().__init__()
            self.message_id = message_id

    copied: reactive[bool] = reactive(False)

    def __init__(self, message_id: int, *args, **kwargs) -> None:
        super().__init__(COPY_LABEL, *args, **kwargs)
        self.message_id = message_id

    def watch_copied(self, copied: bool) -> None:
        self.update(COPIED_LABEL if copied else COPY_LABEL)
        self.set_class(copied, "-copied")

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Pressed(self.message_id))


class MessageBubble(Horizontal):
    """One chat message: markdown body, timestamp and copy label."""

    def __init__(self, message: ChatMessage, *args, **kwargs) -> None:
        classes = f"{message.sender.value}-message"
        if message.error:
            classes += " error-message"
        super().__init__(*args, id=f"message-{message.id}", classes=classes, **kwargs)
        self.message = message

    def compose(self):
        sender = USER_LABEL if self.message.sender is Sender.USER else ASSISTANT_NAME
        with Vertical(classes="bubble"):
            yield Markdown(
                self.message.text,
                classes="message-content",
                parser_factory=markdown_parser,
            )
            with Horizontal(classes="message-footer"):
                yield Static(
                    f"{sender} · {format_time(self.message.timestamp)}",
                    classes="message-time",
                )
                yield CopyButton(self.message.id)

    def set_copied(self, copied: bool) -> None:
        for button in self.query(CopyButton):
            button.copied = copied


class TypingIndicator(Static):
    """Animated dots shown while the relay is working."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(TYPING_FRAMES[0], *args, **kwargs)
        self._frame = 0

    def on_mount(self) -> None:
        self.display = False
        self.set_interval(TYPING_FRAME_SECONDS, self._advance)

    def _advance(self) -> None:
        if not self.display:
            return
        self._frame = (self._frame + 1) % len(TYPING_FRAMES)
        self.update(TYPING_FRAMES[self._frame])


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation view.

    Renders a ChatSession: one bubble per message in insertion order, keyed
    by message id, followed by the typing indicator while pending. Messages
    are immutable, so only ids not yet on screen are mounted.
    """

    BORDER_TITLE = "Chat"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered: set[int] = set()
        self._was_pending = False

    def sync(self, session: ChatSession) -> None:
        """Bring the view in line with the session state."""
        indicator = self.query_one(TypingIndicator)

        new_messages = [m for m in session.conversation.messages if m.id not in self._rendered]
        if new_messages:
            self._rendered.update(m.id for m in new_messages)
            self.mount_all([MessageBubble(m) for m in new_messages], before=indicator)

        for bubble in self.query(MessageBubble):
            bubble.set_copied(session.is_copied(bubble.message.id))

        indicator.display = session.pending

        if new_messages or session.pending != self._was_pending:
            self.call_after_refresh(self.scroll_end, animate=True)
        self._was_pending = session.pending

    @property
    def rendered_ids(self) -> list[int]:
        """Ids of the bubbles on screen, in display order."""
        return [bubble.message.id for bubble in self.query(MessageBubble)]


class ChatInputBar(Horizontal):
    """Single-line prompt input with a Send button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._pending = False

    def compose(self):
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="primary", disabled=True)

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._update_send_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _submit(self) -> None:
        # The text stays in the input until the app reports it was accepted
        value = self.query_one("#chat-input", Input).value
        if self._pending or not value.strip():
            return
        self.post_message(self.Submitted(value))

    def clear(self) -> None:
        """Empty the text input after a submission is accepted."""
        self.query_one("#chat-input", Input).value = ""

    def _update_send_button(self) -> None:
        text_input = self.query_one("#chat-input", Input)
        send = self.query_one("#send-btn", Button)
        send.disabled = self._pending or not text_input.value.strip()

    def set_pending(self, pending: bool) -> None:
        """Disable input and Send while a request is in flight."""
        was_pending = self._pending
        self._pending = pending
        text_input = self.query_one("#chat-input", Input)
        text_input.disabled = pending
        self._update_send_button()
        if was_pending and not pending:
            text_input.focus()

    @property
    def pending(self) -> bool:
        return self._pending

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()
