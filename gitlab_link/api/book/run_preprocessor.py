"""Run the preprocessor over a book (UNO: single function)."""

from collections.abc import Mapping
from typing import Any

from ...utils.get_logger import get_logger
from ..config.resolve_config import resolve_config
from ..transform.transform import transform
from .for_each_chapter import for_each_chapter
from .PreprocessorContext import PreprocessorContext

logger = get_logger("book")


def run_preprocessor(context: PreprocessorContext, book: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Transform the content of every chapter in ``book``.

    Configuration is resolved once from ``env`` and the book's
    ``[preprocessor.gitlab-link]`` table and shared by all chapters.

    Args:
        context: Preprocessor context sent by mdBook
        book: Book JSON object, modified in place
        env: Environment mapping consulted for CI_* overrides

    Returns:
        The same book object
    """
    config = resolve_config(env, context.preprocessor_table())
    logger.debug("Resolved config: %s", config.model_dump())
    if not config.server_url:
        logger.warning("No GitLab server URL configured; generated links will be relative")

    def visit(chapter: dict[str, Any]) -> None:
        content = chapter.get("content")
        if isinstance(content, str):
            chapter["content"] = transform(content, config)

    count = for_each_chapter(book, visit)
    logger.info("Processed %d chapter(s) for renderer %r", count, context.renderer)
    return book
