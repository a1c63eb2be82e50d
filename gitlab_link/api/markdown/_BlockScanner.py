"""Block-level markdown scanner."""

import dataclasses
import re
from collections.abc import Generator, Iterator

from .MarkdownEvent import MarkdownEvent
from .MarkdownTag import MarkdownTag
from ._InlineScanner import CLOSE_TAG, OPEN_TAG, _InlineScanner, normalize_label

LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)?")

# Block quote markers, list item markers and task list markers
CONTAINER_PATTERN = re.compile(
    r"(?:[ ]{0,3}>[ ]?|[ ]{0,3}(?:[-+*]|[0-9]{1,9}[.)])(?:[ \t]+|$)(?:\[[ xX]\](?=[ \t]))?)*"
)
QUOTE_PATTERN = re.compile(r"(?:[ ]{0,3}>[ ]?)*")
LIST_MARKER_PATTERN = re.compile(r"(?:[-+*]|[0-9]{1,9}[.)])(?:[ \t]|$)")

FENCE_OPEN_PATTERN = re.compile(r"(`{3,}|~{3,})(.*)$")
FENCE_CLOSE_PATTERN = re.compile(r"(`{3,}|~{3,})[ \t]*$")
ATX_PATTERN = re.compile(r"#{1,6}(?:[ \t]+|$)")
ATX_CLOSING_PATTERN = re.compile(r"(?:^|[ \t]+)#+$")
SETEXT_PATTERN = re.compile(r"(?:=+|-+)[ \t]*$")
THEMATIC_BREAK_PATTERN = re.compile(r"(?:(?:\*[ \t]*){3,}|(?:-[ \t]*){3,}|(?:_[ \t]*){3,})$")
DEFINITION_PATTERN = re.compile(r"\[((?!\^)[^\]]+)\]:[ \t]*\S")
FOOTNOTE_DEFINITION_PATTERN = re.compile(r"\[\^[^\]]+\]:[ \t]*")

BLOCK_TAGS = (
    "address|article|aside|base|basefont|blockquote|body|caption|center|col|colgroup|dd|details|dialog|dir|div|dl|"
    "dt|fieldset|figcaption|figure|footer|form|frame|frameset|h1|h2|h3|h4|h5|h6|head|header|hr|html|iframe|legend|"
    "li|link|main|menu|menuitem|nav|noframes|ol|optgroup|option|p|param|search|section|summary|table|tbody|td|"
    "tfoot|th|thead|title|tr|track|ul"
)
# (start, end) pairs; an end of None closes the block at the next blank line
HTML_BLOCK_RULES: tuple[tuple[re.Pattern, re.Pattern | None], ...] = (
    (re.compile(r"<(?:script|pre|style|textarea)(?:[\s>]|$)", re.I), re.compile(r"</(?:script|pre|style|textarea)>", re.I)),
    (re.compile(r"<!--"), re.compile(r"-->")),
    (re.compile(r"<\?"), re.compile(r"\?>")),
    (re.compile(r"<![A-Za-z]"), re.compile(r">")),
    (re.compile(r"<!\[CDATA\["), re.compile(r"\]\]>")),
    (re.compile(rf"</?(?:{BLOCK_TAGS})(?:[\s/>]|$)", re.I), None),
)
COMPLETE_TAG_PATTERN = re.compile(rf"(?:{OPEN_TAG}|{CLOSE_TAG})[ \t]*$")


@dataclasses.dataclass(frozen=True)
class _Line:
    start: int  # first character of the line
    end: int  # end of the line body, before the line break
    body_start: int  # first character after container prefixes
    indent: int  # columns of whitespace before text_start
    text_start: int  # first non-blank character after container prefixes
    has_list_marker: bool


def _indent_width(text: str) -> int:
    width = 0
    for char in text:
        if char == " ":
            width += 1
        elif char == "\t":
            width += 4 - width % 4
        else:
            break
    return width


class _BlockScanner:
    """Split a chapter into blocks and emit structural events in document order.

    Fenced and indented code blocks become CODE_BLOCK zones, ATX and setext
    headings become HEADING zones. Paragraph and heading content is handed to
    the inline scanner. HTML blocks, link reference definitions, thematic
    breaks and container markers produce no text.
    """

    def __init__(self, content: str):
        self.content = content
        self.lines = list(self._split_lines())
        definitions = frozenset(
            normalize_label(match.group(1))
            for line in self.lines
            if (match := DEFINITION_PATTERN.match(content, line.text_start, line.end))
        )
        self.inline = _InlineScanner(content, definitions)
        self.paragraph: list[_Line] = []
        self.list_indent = 0

    def _split_lines(self) -> Iterator[_Line]:
        content = self.content
        pos = 0
        while pos < len(content):
            match = LINE_PATTERN.match(content, pos)
            body = match.group(0).rstrip("\r\n")
            end = pos + len(body)
            prefix = CONTAINER_PATTERN.match(body).group(0)
            rest = body[len(prefix) :]
            stripped = rest.lstrip(" \t")
            yield _Line(
                start=pos,
                end=end,
                body_start=pos + len(prefix),
                indent=_indent_width(rest),
                text_start=end - len(stripped),
                has_list_marker=LIST_MARKER_PATTERN.search(prefix) is not None,
            )
            pos = match.end()

    def scan(self) -> Iterator[MarkdownEvent]:
        content = self.content
        index = 0
        while index < len(self.lines):
            line = self.lines[index]
            blank = line.text_start == line.end

            if blank:
                yield from self._flush_paragraph()
                index += 1
                continue

            if line.has_list_marker:
                self.list_indent = line.text_start - line.start
            elif line.start == line.body_start and line.indent == 0 and not self.paragraph:
                self.list_indent = 0

            if self._code_indent(line) >= 4:
                if self.paragraph:
                    self.paragraph.append(line)
                    index += 1
                else:
                    index = yield from self._indented_code(index)
                continue

            text = content[line.text_start : line.end]

            fence = FENCE_OPEN_PATTERN.match(text)
            if fence and not (fence.group(1)[0] == "`" and "`" in fence.group(2)):
                yield from self._flush_paragraph()
                index = yield from self._fenced_code(index, fence.group(1))
                continue

            if ATX_PATTERN.match(text):
                yield from self._flush_paragraph()
                yield from self._atx_heading(line)
                index += 1
                continue

            if self.paragraph and SETEXT_PATTERN.match(text):
                yield from self._setext_heading(line)
                index += 1
                continue

            if THEMATIC_BREAK_PATTERN.match(text):
                yield from self._flush_paragraph()
                index += 1
                continue

            is_html, html_end = self._html_block_rule(text)
            if is_html:
                yield from self._flush_paragraph()
                index = self._skip_html_block(index, html_end)
                continue

            footnote = FOOTNOTE_DEFINITION_PATTERN.match(text)
            if footnote:
                yield from self._flush_paragraph()
                if footnote.end() < len(text):
                    self.paragraph.append(dataclasses.replace(line, text_start=line.text_start + footnote.end()))
                index += 1
                continue

            if not self.paragraph and DEFINITION_PATTERN.match(text):
                index += 1
                continue

            self.paragraph.append(line)
            index += 1

        yield from self._flush_paragraph()

    def _code_indent(self, line: _Line) -> int:
        """Indentation relative to the enclosing list item's content column."""
        if line.body_start == line.start:
            return line.indent - self.list_indent
        return line.indent

    def _flush_paragraph(self) -> Iterator[MarkdownEvent]:
        if not self.paragraph:
            return
        lines, self.paragraph = self.paragraph, []
        yield from self._inline(lines)

    def _inline(self, lines: list[_Line]) -> Iterator[MarkdownEvent]:
        gaps = [(before.end, after.text_start) for before, after in zip(lines, lines[1:])]
        yield from self.inline.scan(lines[0].text_start, lines[-1].end, gaps)

    def _atx_heading(self, line: _Line) -> Iterator[MarkdownEvent]:
        content = self.content
        marker = ATX_PATTERN.match(content, line.text_start, line.end)
        start = marker.end()
        heading = content[start : line.end].rstrip(" \t")
        closing = ATX_CLOSING_PATTERN.search(heading)
        if closing:
            heading = heading[: closing.start()]
        yield MarkdownEvent.open(MarkdownTag.HEADING, line.text_start, line.end)
        if heading:
            yield from self.inline.scan(start, start + len(heading))
        yield MarkdownEvent.close(MarkdownTag.HEADING, line.text_start, line.end)

    def _setext_heading(self, underline: _Line) -> Iterator[MarkdownEvent]:
        lines, self.paragraph = self.paragraph, []
        start = lines[0].text_start
        yield MarkdownEvent.open(MarkdownTag.HEADING, start, underline.end)
        yield from self._inline(lines)
        yield MarkdownEvent.close(MarkdownTag.HEADING, start, underline.end)

    def _fenced_code(self, index: int, fence: str) -> Generator[MarkdownEvent, None, int]:
        content = self.content
        opening = self.lines[index]
        base_indent = self.list_indent
        quote_depth = content[opening.start : opening.body_start].count(">")
        item_indent = base_indent if opening.has_list_marker or not quote_depth else 0
        yield MarkdownEvent.open(MarkdownTag.CODE_BLOCK, opening.text_start, opening.end)

        index += 1
        end = len(content)
        while index < len(self.lines):
            line = self.lines[index]
            body = content[line.start : line.end]
            quote = QUOTE_PATTERN.match(body).group(0)
            rest = body[len(quote) :]
            stripped = rest.lstrip(" \t")
            # A line outside the enclosing quote or list item ends the block unconsumed
            if quote.count(">") < quote_depth or (stripped and len(quote) + _indent_width(rest) < item_indent):
                end = self.lines[index - 1].end
                break
            closing = FENCE_CLOSE_PATTERN.match(stripped)
            index += 1
            if (
                closing
                and closing.group(1)[0] == fence[0]
                and len(closing.group(1)) >= len(fence)
                and _indent_width(rest) <= base_indent + 3
            ):
                end = line.end
                break
        yield MarkdownEvent.close(MarkdownTag.CODE_BLOCK, opening.text_start, end)
        return index

    def _indented_code(self, index: int) -> Generator[MarkdownEvent, None, int]:
        first = self.lines[index]
        last = first
        index += 1
        while index < len(self.lines):
            line = self.lines[index]
            if line.text_start != line.end and self._code_indent(line) < 4:
                break
            if line.text_start != line.end:
                last = line
            index += 1
        yield MarkdownEvent.open(MarkdownTag.CODE_BLOCK, first.start, last.end)
        yield MarkdownEvent.close(MarkdownTag.CODE_BLOCK, first.start, last.end)
        return index

    def _html_block_rule(self, text: str) -> tuple[bool, re.Pattern | None]:
        """Return whether ``text`` opens an HTML block, and the pattern that ends it."""
        for start, end in HTML_BLOCK_RULES:
            if start.match(text):
                return True, end
        if not self.paragraph and COMPLETE_TAG_PATTERN.match(text):
            return True, None
        return False, None

    def _skip_html_block(self, index: int, end: re.Pattern | None) -> int:
        content = self.content
        while index < len(self.lines):
            line = self.lines[index]
            if end is None:
                if line.text_start == line.end:
                    return index
            elif end.search(content, line.start, line.end):
                return index + 1
            index += 1
        return index
