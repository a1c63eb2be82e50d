"""Visit every chapter of an mdBook book (UNO: single function)."""

from collections.abc import Callable
from typing import Any

Chapter = dict[str, Any]


def for_each_chapter(book: dict[str, Any], visit: Callable[[Chapter], None]) -> int:
    """Call ``visit`` on every chapter, parents before their sub-items.

    Separators and part titles are skipped. Both the ``sections`` (mdBook 0.4)
    and ``items`` (mdBook 0.5) layouts are accepted.

    Args:
        book: Book JSON object
        visit: Callback receiving the chapter object; may modify it in place

    Returns:
        Number of chapters visited
    """
    items = book.get("sections", book.get("items", []))
    return _visit_items(items, visit)


def _visit_items(items: list[Any], visit: Callable[[Chapter], None]) -> int:
    count = 0
    for item in items:
        if not isinstance(item, dict):
            continue
        chapter = item.get("Chapter")
        if not isinstance(chapter, dict):
            continue
        visit(chapter)
        count += 1 + _visit_items(chapter.get("sub_items", []), visit)
    return count
