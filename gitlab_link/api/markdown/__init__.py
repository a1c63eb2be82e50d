"""Markdown structure scanning."""

from .EventKind import EventKind
from .MarkdownEvent import MarkdownEvent
from .MarkdownTag import MarkdownTag
from .scan_events import scan_events
from .SkipZoneTracker import SkipZoneTracker

__all__ = ["EventKind", "MarkdownEvent", "MarkdownTag", "SkipZoneTracker", "scan_events"]
