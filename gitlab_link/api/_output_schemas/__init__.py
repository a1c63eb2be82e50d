"""Output schemas for API commands."""

from . import reference, transform
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "reference", "register_output_schema", "transform"]
