"""mdBook preprocessor protocol."""

from .for_each_chapter import for_each_chapter
from .parse_preprocessor_input import parse_preprocessor_input
from .PreprocessorContext import PreprocessorContext
from .run_preprocessor import run_preprocessor
from .supports_renderer import supports_renderer

__all__ = [
    "PreprocessorContext",
    "for_each_chapter",
    "parse_preprocessor_input",
    "run_preprocessor",
    "supports_renderer",
]
