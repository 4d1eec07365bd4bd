"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: header, scrolling chat history, input bar, disclaimer, footer.
User bubbles hug the right edge, bot bubbles the left.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History
   ============================================ */
#chat-history {
    height: 1fr;
    padding: 1 2;
    background: $panel;
    scrollbar-gutter: stable;
}

/* ============================================
   Message Bubbles
   ============================================ */
MessageBubble {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;

    &.user-message {
        align-horizontal: right;
    }
}

.bubble {
    width: 80%;
    height: auto;
    padding: 0 2;
    background: $surface;
}

.user-message .bubble {
    background: $primary 70%;
    border-right: tall $primary;
}

.bot-message .bubble {
    border-left: tall $secondary;
}

.error-message .bubble {
    background: $error 15%;
    border-left: tall $error;
}

.message-content {
    height: auto;
    margin: 0;
    padding: 0;
}

.message-footer {
    height: 1;
    width: 100%;
}

.message-time {
    width: 1fr;
    color: $text-muted;
}

CopyButton {
    width: auto;
    color: $text-muted;

    &:hover {
        color: $foreground;
        text-style: bold;
    }

    &.-copied {
        color: $success;
    }
}

/* ============================================
   Typing Indicator
   ============================================ */
TypingIndicator {
    width: auto;
    height: 1;
    padding: 0 2;
    color: $secondary;
    background: $surface;
    border-left: tall $secondary;
}

/* ============================================
   Input Bar
   ============================================ */
ChatInputBar {
    height: 3;
    margin: 0 2;
    background: $panel;
}

#chat-input {
    width: 1fr;
    border: tall $border;

    &:focus {
        border: tall $primary;
    }
}

#send-btn {
    width: 10;
    min-width: 8;
    margin-left: 1;
}

#disclaimer {
    height: 1;
    width: 100%;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Markdown Content
   ============================================ */
Markdown {
    margin: 0;
    padding: 0;
}

MarkdownParagraph {
    margin: 0;
}

MarkdownFence {
    margin: 1 0;
}
"""
