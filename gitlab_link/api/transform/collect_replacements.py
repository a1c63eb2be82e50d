"""Collect replacement spans for a chapter (UNO: single function)."""

from ..config.GitlabConfig import GitlabConfig
from ..reference.locate_references import locate_references
from ..reference.resolve_reference import resolve_reference
from ..splice.ReplacementSpan import ReplacementSpan


def collect_replacements(content: str, config: GitlabConfig) -> list[ReplacementSpan]:
    """Resolve every reference in ``content`` into a replacement span, in source order."""
    return [
        ReplacementSpan(text=resolve_reference(ref, config).to_markdown(), start=ref.start, end=ref.end)
        for ref in locate_references(content)
    ]
