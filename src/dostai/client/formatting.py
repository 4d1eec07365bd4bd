"""Text formatting helpers for message bubbles."""

from datetime import datetime

from markdown_it import MarkdownIt

from .config import TIMESTAMP_FORMAT


def format_time(timestamp: datetime) -> str:
    """Format a timestamp as hour:minute."""
    return timestamp.strftime(TIMESTAMP_FORMAT)


def markdown_parser() -> MarkdownIt:
    """Markdown parser that keeps single line breaks as hard breaks.

    Replies are written with raw newlines that the reader expects to see,
    so soft breaks are rendered as real line breaks.
    """
    return MarkdownIt("gfm-like", {"breaks": True})
