"""Command result shared by ``check`` and ``render``."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to the CLI.

    ``announce`` is printed before any work runs. Iterating
    ``progress_callback(self)`` scans or rewrites the chapter, yielding
    (fraction, message) pairs, and fills in ``result`` (the one-line summary),
    ``output`` (the schema-shaped dict) and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
