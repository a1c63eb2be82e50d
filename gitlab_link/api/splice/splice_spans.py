"""Span splicer (UNO: single function)."""

from collections.abc import Iterable

from .ReplacementSpan import ReplacementSpan


def splice_spans(content: str, spans: Iterable[ReplacementSpan]) -> str:
    """Apply replacements to ``content`` in descending start order.

    Working from the end of the string means an applied replacement never
    shifts the offsets of the spans still pending.

    Args:
        content: Original text
        spans: Non-overlapping spans within ``content``, in any order

    Returns:
        The rewritten text

    Raises:
        ValueError: If a span is out of bounds or overlaps another
    """
    limit = len(content)
    for span in sorted(spans, key=lambda s: s.start, reverse=True):
        if span.start < 0 or span.start > span.end or span.end > limit:
            raise ValueError(f"Span {span.start}:{span.end} is out of bounds or overlaps a later span")
        content = content[: span.start] + span.text + content[span.end :]
        limit = span.start
    return content
