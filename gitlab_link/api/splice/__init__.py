"""Offset-safe text splicing."""

from .ReplacementSpan import ReplacementSpan
from .splice_spans import splice_spans

__all__ = ["ReplacementSpan", "splice_spans"]
