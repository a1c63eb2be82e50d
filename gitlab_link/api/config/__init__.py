"""Config API module."""

from .GitlabConfig import GitlabConfig
from .load_book_table import load_book_table
from .load_config import load_config
from .resolve_config import resolve_config

__all__ = ["GitlabConfig", "load_book_table", "load_config", "resolve_config"]
