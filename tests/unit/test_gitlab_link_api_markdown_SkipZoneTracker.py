"""Unit tests for gitlab_link.api.markdown.SkipZoneTracker module."""

import pytest

from gitlab_link.api.markdown import EventKind, MarkdownEvent, MarkdownTag, SkipZoneTracker

pytestmark = pytest.mark.markdown


def _text(value: str, start: int = 0) -> MarkdownEvent:
    return MarkdownEvent(kind=EventKind.TEXT, start=start, end=start + len(value), text=value)


class TestSkipZoneTracker:
    """Test SkipZoneTracker class."""

    def test_text_outside_zones_is_scannable(self):
        tracker = SkipZoneTracker()

        assert tracker.feed(_text("plain")) is True
        assert tracker.in_skip is False

    @pytest.mark.parametrize("tag", list(MarkdownTag))
    def test_every_tag_opens_a_zone(self, tag):
        tracker = SkipZoneTracker()

        assert tracker.feed(MarkdownEvent.open(tag, 0, 10)) is False
        assert tracker.feed(_text("inside")) is False
        assert tracker.feed(MarkdownEvent.close(tag, 0, 10)) is False
        assert tracker.feed(_text("after")) is True

    def test_end_outside_zone_ignored(self):
        tracker = SkipZoneTracker()

        tracker.feed(MarkdownEvent.close(MarkdownTag.LINK, 0, 1))

        assert tracker.in_skip is False

    def test_nested_exit_clears_flag_early(self):
        """Test a link inside a heading ends the zone at the link's exit."""
        events = [
            MarkdownEvent.open(MarkdownTag.HEADING, 0, 30),
            _text("before "),
            MarkdownEvent.open(MarkdownTag.LINK, 10, 20),
            _text("label"),
            MarkdownEvent.close(MarkdownTag.LINK, 10, 20),
            _text(" after"),
            MarkdownEvent.close(MarkdownTag.HEADING, 0, 30),
            _text("body"),
        ]

        scanned = [event.text for event in SkipZoneTracker().scannable(events)]

        assert scanned == [" after", "body"]
