"""Output schemas for transform commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class TransformRenderOutput(BaseOutputSchema):
    """Output schema for transform render command."""
    path: str = Field(..., description="Path to the source markdown file")
    replacements: int = Field(..., description="Number of references replaced with links")
    written: bool = Field(..., description="Whether the file was rewritten in place")
    content: str = Field(..., description="Transformed markdown, empty string when written in place")


register_output_schema("transform", "render", TransformRenderOutput)
