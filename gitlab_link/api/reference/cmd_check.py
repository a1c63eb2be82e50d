"""Reference check command - list the references a markdown file would linkify."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.reference import ReferenceCheckOutput
from ..config.load_config import load_config
from ..StageResult import StageResult
from .locate_references import locate_references
from .resolve_reference import resolve_reference


def _line_and_column(content: str, offset: int) -> tuple[int, int]:
    """1-based line and column of ``offset``."""
    line_start = content.rfind("\n", 0, offset) + 1
    return content.count("\n", 0, offset) + 1, offset - line_start + 1


def cmd_check(path: str, book: str | None = None) -> StageResult:
    """Report every GitLab reference in a markdown file with its resolved link.

    Args:
        path: Markdown file to scan
        book: Optional book.toml supplying the ``[preprocessor.gitlab-link]`` table
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.result = message
        result_obj.output = ReferenceCheckOutput(
            errors=[message],
            warnings=[],
            path=path,
            config={},
            references=[],
            count=0,
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Resolving configuration...")
        try:
            config = load_config(Path(book) if book else None)
        except ValueError as e:
            _fail(result_obj, str(e))
            yield (1.0, "Complete")
            return

        yield (0.3, "Reading markdown...")
        try:
            with Path(path).open(encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            _fail(result_obj, f"Failed to read {path}: {e}")
            yield (1.0, "Complete")
            return

        yield (0.6, "Scanning for references...")
        references = []
        for ref in locate_references(content):
            link = resolve_reference(ref, config)
            line, column = _line_and_column(content, ref.start)
            references.append(
                {
                    "kind": ref.kind.value,
                    "text": ref.text,
                    "line": line,
                    "column": column,
                    "start": ref.start,
                    "end": ref.end,
                    "label": link.label,
                    "url": link.url,
                }
            )

        warnings = []
        if references and not config.server_url:
            warnings.append("No GitLab server URL configured; links will be relative")

        result_obj.result = f"Found {len(references)} reference(s) in {path}"
        result_obj.output = ReferenceCheckOutput(
            errors=[],
            warnings=warnings,
            path=path,
            config=config.model_dump(),
            references=references,
            count=len(references),
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Checking references in {path}...",
        progress_callback=do_work,
    )
