"""Main Textual chat application.

Wires a ChatSession to the widgets: the session owns all state, the app
forwards user actions to it and re-renders whenever it reports a change.
"""

import asyncio

import pyperclip
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from ..client.config import COPY_INDICATOR_SECONDS
from ..client.models import Sender
from ..client.session import ChatSession, Relay
from .config import ASSISTANT_NAME, DISCLAIMER
from .styles import APP_CSS
from .themes import DOST_INDIGO
from .widgets import ChatHistoryWidget, ChatInputBar, CopyButton, TypingIndicator


class DostChatApp(App):
    """Textual chat front-end for the relay."""

    CSS = APP_CSS
    TITLE = ASSISTANT_NAME

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
    ]

    def __init__(
        self,
        relay: Relay,
        copy_indicator_seconds: float = COPY_INDICATOR_SECONDS,
    ) -> None:
        super().__init__()
        self._session = ChatSession(relay, copy_indicator_seconds=copy_indicator_seconds)

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with ChatHistoryWidget(id="chat-history"):
            yield TypingIndicator(id="typing-indicator")
        yield ChatInputBar(id="chat-input-bar")
        yield Static(DISCLAIMER, id="disclaimer")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(DOST_INDIGO)
        self.theme = "dost-indigo"

        self._session.subscribe(self._refresh_view)
        self._refresh_view()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        self._session.close()

    def _refresh_view(self) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).sync(self._session)
        self.query_one("#chat-input-bar", ChatInputBar).set_pending(self._session.pending)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        prompt = self._session.begin(event.value)
        if prompt is None:
            # Rejected while another request is pending; keep the typed text
            return
        self.query_one("#chat-input-bar", ChatInputBar).clear()
        self._send(prompt)

    @work(group="relay")
    async def _send(self, prompt: str) -> None:
        """Send an accepted prompt as a background async worker.

        Failures are shown by the session as an error bubble.
        """
        await self._session.complete(prompt)

    def on_copy_button_pressed(self, event: CopyButton.Pressed) -> None:
        self._copy(event.message_id)

    def _copy(self, message_id: int) -> None:
        text = self._session.copy(message_id)
        try:
            pyperclip.copy(text)
            self.notify("Copied to clipboard", timeout=2)
        except pyperclip.PyperclipException:
            # No system clipboard; use the terminal's OSC 52
            self.copy_to_clipboard(text)
            self.notify("Copied (terminal)", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last bot message to clipboard."""
        for message in reversed(self._session.conversation.messages):
            if message.sender is Sender.BOT:
                self._copy(message.id)
                return
        self.notify("No response to copy", severity="warning")


async def run_chat_tui(relay: Relay) -> None:
    """Run the chat TUI until the user quits.

    Args:
        relay: Relay the session sends prompts to
    """
    app = DostChatApp(relay)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
