"""Chapter transform."""

from .collect_replacements import collect_replacements
from .transform import transform

__all__ = ["collect_replacements", "transform"]
