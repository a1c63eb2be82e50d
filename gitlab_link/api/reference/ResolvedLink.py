"""Resolved link model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedLink:
    """A reference turned into a markdown link."""

    label: str
    url: str

    def to_markdown(self) -> str:
        return f"[{self.label}]({self.url})"
