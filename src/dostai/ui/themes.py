"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palette (indigo accents on a light-on-dark surface)
- Theme variables (borders, scrollbars, input cursor)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

DOST_INDIGO = Theme(
    name="dost-indigo",
    primary="#6366f1",      # Indigo 500 - user bubbles, focus
    secondary="#a5b4fc",    # Indigo 300 - bot accents
    accent="#60a5fa",       # Blue 400 - highlights
    foreground="#e0e7ff",   # Indigo 100 - text
    background="#0f1024",
    success="#4ade80",      # Green 400 - "copied" check
    warning="#fbbf24",
    error="#f87171",        # Red 400 - failed replies
    surface="#1e1b4b",      # Indigo 950 - bubbles
    panel="#161638",
    dark=True,
    variables={
        "border": "#3730a3",
        "border-blurred": "#312e81",

        "input-cursor-background": "#e0e7ff",
        "input-cursor-foreground": "#0f1024",
        "input-selection-background": "#6366f1 30%",

        "scrollbar": "#312e81",
        "scrollbar-hover": "#4338ca",
        "scrollbar-active": "#6366f1",
        "scrollbar-background": "#161638",

        "footer-key-foreground": "#a5b4fc",
        "footer-description-foreground": "#c7d2fe",

        "text-muted": "#818cf8",
        "text-disabled": "#4338ca",
    },
)
