"""Shared errors/warnings fields for the check and render outputs."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Fields every gitlab-link command output carries.

    ``errors`` holds config or file failures that made the command fail, and
    ``warnings`` holds notes such as an unset ``server_url``.
    """

    errors: list[str] = Field(default_factory=list, description="Config or file errors, empty on success")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notes such as an unset server_url")
