"""Locate references in a markdown chapter (UNO: single function)."""

import dataclasses
from collections.abc import Iterator

from ..markdown.scan_events import scan_events
from ..markdown.SkipZoneTracker import SkipZoneTracker
from .find_references import find_references
from .RawReference import RawReference


def locate_references(content: str) -> Iterator[RawReference]:
    """Find every reference outside code blocks, headings, links and images.

    Args:
        content: Chapter markdown

    Yields:
        RawReference objects with offsets into ``content``, in source order
    """
    tracker = SkipZoneTracker()
    for event in tracker.scannable(scan_events(content)):
        for ref in find_references(event.text):
            yield dataclasses.replace(ref, start=event.start + ref.start, end=event.start + ref.end)
