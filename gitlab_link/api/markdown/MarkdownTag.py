"""Markdown structure tags that delimit skip zones."""

from enum import Enum


class MarkdownTag(str, Enum):
    CODE_BLOCK = "code_block"
    HEADING = "heading"
    LINK = "link"
    IMAGE = "image"
