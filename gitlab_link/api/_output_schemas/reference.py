"""Output schemas for reference commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ReferenceCheckOutput(BaseOutputSchema):
    """Output schema for reference check command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - path: str - the scanned markdown file
    - config: dict[str, str] - resolved server_url, current_project and current_namespace
    - references: list[dict] - one entry per linkified reference, in document order
    - count: int - number of references
    """
    path: str = Field(..., description="Path to the scanned markdown file")
    config: dict[str, str] = Field(..., description="Resolved GitLab configuration")
    references: list[dict[str, Any]] = Field(
        ..., description="References with kind, text, line, column, start, end, label and url"
    )
    count: int = Field(..., description="Number of references found")


register_output_schema("reference", "check", ReferenceCheckOutput)
