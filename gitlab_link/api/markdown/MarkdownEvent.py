"""Markdown event model (UNO: single model)."""

from dataclasses import dataclass

from .EventKind import EventKind
from .MarkdownTag import MarkdownTag


@dataclass(frozen=True)
class MarkdownEvent:
    """One structural event of a chapter.

    START/END carry the tag and the extent of the element. TEXT carries the
    fragment, which always equals ``content[start:end]``.
    """

    kind: EventKind
    start: int
    end: int
    tag: MarkdownTag | None = None
    text: str = ""

    @classmethod
    def open(cls, tag: MarkdownTag, start: int, end: int) -> "MarkdownEvent":
        return cls(kind=EventKind.START, start=start, end=end, tag=tag)

    @classmethod
    def close(cls, tag: MarkdownTag, start: int, end: int) -> "MarkdownEvent":
        return cls(kind=EventKind.END, start=start, end=end, tag=tag)
