"""Raw reference model (UNO: single model)."""

from dataclasses import dataclass

from .ReferenceKind import ReferenceKind


@dataclass(frozen=True)
class RawReference:
    """A classified reference match.

    ``start``/``end`` are relative to the scanned fragment unless the reference
    came from locate_references(), which shifts them into chapter offsets.
    For PROJECT references ``path`` holds ``group[/subgroup]/project`` and
    ``namespace``/``project``/``ref_id`` are None.
    """

    kind: ReferenceKind
    text: str
    start: int
    end: int
    namespace: str | None = None
    project: str | None = None
    ref_id: str | None = None
    path: str | None = None
