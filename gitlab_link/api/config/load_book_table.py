"""Read the gitlab-link preprocessor table from a book.toml file."""

import tomllib
from pathlib import Path
from typing import Any

from ...constants import PREPROCESSOR_NAME


def load_book_table(book_path: Path) -> dict[str, Any]:
    """Load ``[preprocessor.gitlab-link]`` from a book.toml.

    Args:
        book_path: Path to book.toml

    Returns:
        The preprocessor table, or an empty dict when the book has none

    Raises:
        ValueError: If the file cannot be read or is not valid TOML
    """
    try:
        with book_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except OSError as e:
        raise ValueError(f"Cannot read book config {book_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in book config {book_path}: {e}") from e

    preprocessors = raw.get("preprocessor", {})
    table = preprocessors.get(PREPROCESSOR_NAME, {}) if isinstance(preprocessors, dict) else {}
    return table if isinstance(table, dict) else {}
