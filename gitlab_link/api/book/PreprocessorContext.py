"""mdBook preprocessor context."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...constants import PREPROCESSOR_NAME


class PreprocessorContext(BaseModel):
    """The context object mdBook sends ahead of the book.

    Only ``config`` and ``renderer`` are used; other fields are kept as sent.
    """

    model_config = ConfigDict(extra="allow")

    root: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str = ""

    def preprocessor_table(self, name: str = PREPROCESSOR_NAME) -> dict[str, Any]:
        """Return ``config.preprocessor.<name>``, or an empty dict."""
        preprocessors = self.config.get("preprocessor")
        if not isinstance(preprocessors, dict):
            return {}
        table = preprocessors.get(name)
        return table if isinstance(table, dict) else {}
