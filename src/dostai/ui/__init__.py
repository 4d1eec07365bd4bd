"""Terminal UI module for dostai.

Provides a Textual-based chat client for the relay service.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (message bubbles, copy label, typing indicator, input bar)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- config.py: Labels and animation timing
- app.py: Application orchestration (user interaction flow)
"""

from .app import DostChatApp, run_chat_tui
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    CopyButton,
    MessageBubble,
    TypingIndicator,
)

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "CopyButton",
    "DostChatApp",
    "MessageBubble",
    "TypingIndicator",
    "run_chat_tui",
]
