"""Replacement span model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReplacementSpan:
    """Replace ``content[start:end]`` with ``text``."""

    text: str
    start: int
    end: int
