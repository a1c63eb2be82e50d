"""Load the run configuration for CLI commands."""

import os
from collections.abc import Mapping
from pathlib import Path

from .GitlabConfig import GitlabConfig
from .load_book_table import load_book_table
from .resolve_config import resolve_config


def load_config(book_path: Path | None = None, env: Mapping[str, str] | None = None) -> GitlabConfig:
    """Resolve configuration from the process environment and an optional book.toml.

    Raises:
        ValueError: If ``book_path`` cannot be read or parsed
    """
    table = load_book_table(book_path) if book_path is not None else {}
    return resolve_config(os.environ if env is None else env, table)
