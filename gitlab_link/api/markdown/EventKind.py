"""Markdown event kind enum."""

from enum import Enum


class EventKind(str, Enum):
    START = "start"
    END = "end"
    TEXT = "text"
