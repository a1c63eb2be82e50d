"""Chapter transform (UNO: single function)."""

from ..config.GitlabConfig import GitlabConfig
from ..splice.splice_spans import splice_spans
from .collect_replacements import collect_replacements


def transform(content: str, config: GitlabConfig) -> str:
    """Rewrite GitLab references in a chapter into markdown links.

    Text inside code blocks, headings, links and images is left alone, so the
    output of a transform is a fixed point of further transforms.

    Args:
        content: Chapter markdown
        config: Resolved run configuration

    Returns:
        The chapter with every reference replaced by ``[label](url)``
    """
    return splice_spans(content, collect_replacements(content, config))
