"""Reference matching and resolution."""

from .find_references import find_references
from .locate_references import locate_references
from .RawReference import RawReference
from .ReferenceKind import ReferenceKind
from .resolve_reference import resolve_reference
from .ResolvedLink import ResolvedLink

__all__ = [
    "RawReference",
    "ReferenceKind",
    "ResolvedLink",
    "find_references",
    "locate_references",
    "resolve_reference",
]
