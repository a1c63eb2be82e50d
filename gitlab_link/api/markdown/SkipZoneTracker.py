"""Skip-zone tracker (UNO: single class)."""

from collections.abc import Iterable, Iterator

from .EventKind import EventKind
from .MarkdownEvent import MarkdownEvent


class SkipZoneTracker:
    """Single-flag skip state over a markdown event stream.

    Entering a code block, heading, link or image sets the flag; the next exit
    of any of them clears it. Starts seen while skipping and ends seen while
    not skipping are ignored, so an inner element's exit (a link inside a
    heading) ends the skip zone early.
    """

    def __init__(self) -> None:
        self.in_skip = False

    def feed(self, event: MarkdownEvent) -> bool:
        """Update the flag and report whether ``event`` is text to scan."""
        if event.kind is EventKind.START:
            if not self.in_skip:
                self.in_skip = True
            return False
        if event.kind is EventKind.END:
            if self.in_skip:
                self.in_skip = False
            return False
        return not self.in_skip

    def scannable(self, events: Iterable[MarkdownEvent]) -> Iterator[MarkdownEvent]:
        """Yield only the TEXT events that fall outside skip zones."""
        for event in events:
            if self.feed(event):
                yield event
