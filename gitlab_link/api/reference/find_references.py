"""Reference matcher (UNO: single function)."""

from collections.abc import Iterator

from ...utils.get_logger import get_logger
from .RawReference import RawReference
from .REFERENCE_PATTERN import REFERENCE_PATTERN
from .ReferenceKind import ReferenceKind

logger = get_logger("reference")


def find_references(text: str) -> Iterator[RawReference]:
    """Extract references from a plain-text fragment.

    Args:
        text: Fragment outside any code block, heading, link or image

    Yields:
        RawReference objects in source order, offsets relative to ``text``
    """
    for match in REFERENCE_PATTERN.finditer(text):
        logger.debug(
            "capture: ns: %r, project: %r, issue: %r, merge_request: %r, project_ref: %r in %r",
            match.group("namespace") or "",
            match.group("project") or "",
            match.group("issue") or "",
            match.group("merge_request") or "",
            match.group("project_ref") or "",
            match.group(0),
        )

        if match.group("project_ref") is not None:
            yield RawReference(
                kind=ReferenceKind.PROJECT,
                text=match.group(0),
                start=match.start(),
                end=match.end(),
                path=match.group("project_ref"),
            )
            continue

        if match.group("issue") is not None:
            kind, ref_id = ReferenceKind.ISSUE, match.group("issue")
        else:
            kind, ref_id = ReferenceKind.MERGE_REQUEST, match.group("merge_request")

        yield RawReference(
            kind=kind,
            text=match.group(0),
            start=match.start(),
            end=match.end(),
            namespace=match.group("namespace"),
            project=match.group("project"),
            ref_id=ref_id,
        )
