"""Unit tests for gitlab_link.api.splice.splice_spans module."""

import pytest

from gitlab_link.api.splice import ReplacementSpan, splice_spans

pytestmark = pytest.mark.splice


class TestSpliceSpans:
    """Test splice_spans function."""

    def test_no_spans(self):
        assert splice_spans("unchanged", []) == "unchanged"

    def test_single_span(self):
        assert splice_spans("see #1 now", [ReplacementSpan("[#1](u)", 4, 6)]) == "see [#1](u) now"

    def test_multiple_spans_in_source_order(self):
        """Test longer replacements do not displace later spans."""
        content = "#1 and #2 and #3"
        spans = [
            ReplacementSpan("[#1](https://a/1)", 0, 2),
            ReplacementSpan("[#2](https://a/2)", 7, 9),
            ReplacementSpan("[#3](https://a/3)", 14, 16),
        ]

        assert splice_spans(content, spans) == "[#1](https://a/1) and [#2](https://a/2) and [#3](https://a/3)"

    def test_order_of_input_does_not_matter(self):
        content = "ab cd"
        spans = [ReplacementSpan("X", 0, 2), ReplacementSpan("YY", 3, 5)]

        assert splice_spans(content, spans) == splice_spans(content, list(reversed(spans))) == "X YY"

    def test_adjacent_spans(self):
        assert splice_spans("abcd", [ReplacementSpan("1", 0, 2), ReplacementSpan("2", 2, 4)]) == "12"

    def test_empty_span_inserts(self):
        assert splice_spans("ac", [ReplacementSpan("b", 1, 1)]) == "abc"

    def test_span_past_end_raises(self):
        with pytest.raises(ValueError):
            splice_spans("short", [ReplacementSpan("x", 3, 10)])

    def test_negative_start_raises(self):
        with pytest.raises(ValueError):
            splice_spans("short", [ReplacementSpan("x", -1, 2)])

    def test_inverted_span_raises(self):
        with pytest.raises(ValueError):
            splice_spans("short", [ReplacementSpan("x", 3, 2)])

    def test_overlapping_spans_raise(self):
        with pytest.raises(ValueError):
            splice_spans("abcdef", [ReplacementSpan("x", 0, 3), ReplacementSpan("y", 2, 4)])
