"""Markdown event scanner (UNO: single function)."""

from collections.abc import Iterator

from .MarkdownEvent import MarkdownEvent
from ._BlockScanner import _BlockScanner


def scan_events(content: str) -> Iterator[MarkdownEvent]:
    """Scan a chapter into structural events.

    Args:
        content: Chapter markdown

    Yields:
        START/END events for code blocks, headings, links and images and TEXT
        events for the remaining inline text, in document order. Offsets index
        into ``content``.
    """
    yield from _BlockScanner(content).scan()
