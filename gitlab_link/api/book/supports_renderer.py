"""Renderer support check."""

from ...constants import SUPPORTED_RENDERERS


def supports_renderer(renderer: str) -> bool:
    """Links only make sense for HTML output."""
    return renderer in SUPPORTED_RENDERERS
