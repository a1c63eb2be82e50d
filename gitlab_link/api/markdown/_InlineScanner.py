"""Inline markdown scanner."""

import re
import unicodedata
from collections.abc import Iterator, Sequence

from .EventKind import EventKind
from .MarkdownEvent import MarkdownEvent
from .MarkdownTag import MarkdownTag

ASCII_PUNCTUATION = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

AUTOLINK_PATTERN = re.compile(r"<[A-Za-z][A-Za-z0-9+.\-]{1,31}:[^\s<>]*>")
EMAIL_AUTOLINK_PATTERN = re.compile(
    r"<[A-Za-z0-9.!#$%&'*+/=?^_`{|}~\-]+@[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?)*>"
)
OPEN_TAG = r"<[A-Za-z][A-Za-z0-9\-]*(?:\s+[A-Za-z_:][A-Za-z0-9_.:\-]*(?:\s*=\s*(?:[^\s\"'=<>`]+|'[^']*'|\"[^\"]*\"))?)*\s*/?>"
CLOSE_TAG = r"</[A-Za-z][A-Za-z0-9\-]*\s*>"
INLINE_HTML_PATTERN = re.compile(rf"{OPEN_TAG}|{CLOSE_TAG}|<!--.*?-->", re.DOTALL)
CHARACTER_REFERENCE_PATTERN = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]*);")
SPACE_PATTERN = re.compile(r"\s*")
DESTINATION_PATTERN = re.compile(r"<(?:[^<>\n\\]|\\.)*>|(?:[^\s()\\]|\\.|\((?:[^\s()\\]|\\.)*\))+")
TITLE_PATTERN = re.compile(r"""\"(?:[^"\\]|\\.)*\"|'(?:[^'\\]|\\.)*'|\((?:[^()\\]|\\.)*\)""", re.DOTALL)

Gaps = Sequence[tuple[int, int]]


def normalize_label(label: str) -> str:
    """Normalize a link label for reference matching (case and whitespace insensitive)."""
    return " ".join(label.split()).casefold()


def _is_punctuation(char: str) -> bool:
    return char in ASCII_PUNCTUATION or unicodedata.category(char).startswith("P")


class _InlineScanner:
    """Emit TEXT and LINK/IMAGE events for the inline content of one block.

    Code spans, inline HTML, character references, footnote references,
    backslash escapes and paired ``_`` emphasis delimiters produce no text.
    ``gaps`` are ranges inside the block (line breaks plus container prefixes)
    that never become text.
    """

    def __init__(self, content: str, definitions: frozenset[str]):
        self.content = content
        self.definitions = definitions

    def scan(self, start: int, end: int, gaps: Gaps = ()) -> Iterator[MarkdownEvent]:
        delimiters = self._paired_underscores(start, end)
        yield from self._scan(start, end, gaps, delimiters)

    def _scan(self, start: int, end: int, gaps: Gaps, delimiters: frozenset[int]) -> Iterator[MarkdownEvent]:
        content = self.content
        text_start = start
        i = start
        while i < end:
            char = content[i]

            if char == "\\" and i + 1 < end and (content[i + 1] in ASCII_PUNCTUATION or content[i + 1] == "\n"):
                yield from self._text(text_start, i, gaps)
                i = text_start = i + 2
                continue

            if char == "`":
                close = self._code_span_end(i, end)
                if close is None:
                    i = self._run_end(i, end, "`")
                    continue
                yield from self._text(text_start, i, gaps)
                i = text_start = close
                continue

            if char == "_" and i in delimiters:
                yield from self._text(text_start, i, gaps)
                i = text_start = self._run_end(i, end, "_")
                continue

            if char == "!" and i + 1 < end and content[i + 1] == "[":
                link = self._link_at(i + 1, end)
                if link is not None:
                    label_start, label_end, link_end = link
                    yield from self._text(text_start, i, gaps)
                    yield MarkdownEvent.open(MarkdownTag.IMAGE, i, link_end)
                    yield from self._scan(label_start, label_end, gaps, delimiters)
                    yield MarkdownEvent.close(MarkdownTag.IMAGE, i, link_end)
                    i = text_start = link_end
                    continue

            if char == "[":
                if i + 1 < end and content[i + 1] == "^":
                    close = content.find("]", i + 2, end)
                    if close > i + 2:
                        yield from self._text(text_start, i, gaps)
                        i = text_start = close + 1
                        continue
                link = self._link_at(i, end)
                if link is not None:
                    label_start, label_end, link_end = link
                    yield from self._text(text_start, i, gaps)
                    yield MarkdownEvent.open(MarkdownTag.LINK, i, link_end)
                    yield from self._scan(label_start, label_end, gaps, delimiters)
                    yield MarkdownEvent.close(MarkdownTag.LINK, i, link_end)
                    i = text_start = link_end
                    continue

            if char == "<":
                match = AUTOLINK_PATTERN.match(content, i, end) or EMAIL_AUTOLINK_PATTERN.match(content, i, end)
                if match:
                    yield from self._text(text_start, i, gaps)
                    yield MarkdownEvent.open(MarkdownTag.LINK, i, match.end())
                    yield from self._text(i + 1, match.end() - 1, gaps)
                    yield MarkdownEvent.close(MarkdownTag.LINK, i, match.end())
                    i = text_start = match.end()
                    continue
                match = INLINE_HTML_PATTERN.match(content, i, end)
                if match:
                    yield from self._text(text_start, i, gaps)
                    i = text_start = match.end()
                    continue

            if char == "&":
                match = CHARACTER_REFERENCE_PATTERN.match(content, i, end)
                if match:
                    yield from self._text(text_start, i, gaps)
                    i = text_start = match.end()
                    continue

            i += 1

        yield from self._text(text_start, end, gaps)

    def _text(self, start: int, end: int, gaps: Gaps) -> Iterator[MarkdownEvent]:
        pos = start
        for gap_start, gap_end in gaps:
            if gap_end <= pos:
                continue
            if gap_start >= end:
                break
            if gap_start > pos:
                yield self._text_event(pos, gap_start)
            pos = max(pos, gap_end)
        if pos < end:
            yield self._text_event(pos, end)

    def _text_event(self, start: int, end: int) -> MarkdownEvent:
        return MarkdownEvent(kind=EventKind.TEXT, start=start, end=end, text=self.content[start:end])

    def _run_end(self, i: int, end: int, char: str) -> int:
        while i < end and self.content[i] == char:
            i += 1
        return i

    def _code_span_end(self, i: int, end: int) -> int | None:
        """Return the index after the backtick run closing the code span opened at ``i``."""
        run_end = self._run_end(i, end, "`")
        width = run_end - i
        j = run_end
        while True:
            j = self.content.find("`", j, end)
            if j == -1:
                return None
            k = self._run_end(j, end, "`")
            if k - j == width:
                return k
            j = k

    def _link_at(self, i: int, end: int) -> tuple[int, int, int] | None:
        """Parse a link whose label opens at ``i``.

        Returns:
            (label_start, label_end, link_end) or None when ``[`` starts no link
        """
        content = self.content
        label_end = self._bracket_end(i, end)
        if label_end is None:
            return None
        after = label_end + 1

        if after < end and content[after] == "(":
            close = self._inline_link_end(after, end)
            if close is not None:
                return i + 1, label_end, close + 1

        if after < end and content[after] == "[":
            ref_end = content.find("]", after + 1, end)
            if ref_end != -1:
                ref = content[after + 1 : ref_end] or content[i + 1 : label_end]
                if normalize_label(ref) in self.definitions:
                    return i + 1, label_end, ref_end + 1

        if normalize_label(content[i + 1 : label_end]) in self.definitions:
            return i + 1, label_end, after
        return None

    def _bracket_end(self, i: int, end: int) -> int | None:
        content = self.content
        depth = 0
        j = i
        while j < end:
            char = content[j]
            if char == "\\":
                j += 2
                continue
            if char == "`":
                close = self._code_span_end(j, end)
                j = close if close is not None else self._run_end(j, end, "`")
                continue
            if char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
                if depth == 0:
                    return j
            j += 1
        return None

    def _inline_link_end(self, i: int, end: int) -> int | None:
        """Index of the ``)`` closing ``(destination "title")`` opened at ``i``.

        Returns None when the parenthesis does not hold a destination followed
        by an optional quoted title.
        """
        content = self.content
        j = SPACE_PATTERN.match(content, i + 1, end).end()
        destination = DESTINATION_PATTERN.match(content, j, end)
        if destination:
            j = destination.end()
            k = SPACE_PATTERN.match(content, j, end).end()
            if k > j:
                title = TITLE_PATTERN.match(content, k, end)
                if title:
                    k = SPACE_PATTERN.match(content, title.end(), end).end()
            j = k
        if j < end and content[j] == ")":
            return j
        return None

    def _paired_underscores(self, start: int, end: int) -> frozenset[int]:
        """Positions of ``_`` runs that open or close emphasis in ``[start, end)``."""
        content = self.content
        openers: list[tuple[int, int]] = []
        paired: set[int] = set()
        i = start
        while i < end:
            if content[i] == "\\":
                i += 2
                continue
            if content[i] != "_":
                i += 1
                continue
            run_end = self._run_end(i, end, "_")
            before = content[i - 1] if i > start else " "
            after = content[run_end] if run_end < end else " "
            left_flanking = not after.isspace() and (
                not _is_punctuation(after) or before.isspace() or _is_punctuation(before)
            )
            right_flanking = not before.isspace() and (
                not _is_punctuation(before) or after.isspace() or _is_punctuation(after)
            )
            can_open = left_flanking and (not right_flanking or _is_punctuation(before))
            can_close = right_flanking and (not left_flanking or _is_punctuation(after))
            if can_close and openers:
                opener_start, opener_end = openers.pop()
                paired.update(range(opener_start, opener_end))
                paired.update(range(i, run_end))
            elif can_open:
                openers.append((i, run_end))
            i = run_end
        return frozenset(paired)
