"""Transform render command - linkify the GitLab references in a markdown file."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.transform import TransformRenderOutput
from ..config.load_config import load_config
from ..splice.splice_spans import splice_spans
from ..StageResult import StageResult
from .collect_replacements import collect_replacements


def cmd_render(path: str, book: str | None = None, write: bool = False) -> StageResult:
    """Render a markdown file with references replaced by links.

    Args:
        path: Markdown file to transform
        book: Optional book.toml supplying the ``[preprocessor.gitlab-link]`` table
        write: Rewrite the file in place instead of returning the content
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.result = message
        result_obj.output = TransformRenderOutput(
            errors=[message],
            warnings=[],
            path=path,
            replacements=0,
            written=False,
            content="",
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

        source = Path(path)
        yield (0.3, "Reading markdown...")
        try:
            with source.open(encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            _fail(result_obj, f"Failed to read {path}: {e}")
            yield (1.0, "Complete")
            return

        yield (0.6, "Replacing references...")
        spans = collect_replacements(content, config)
        rendered = splice_spans(content, spans)

        warnings = []
        if spans and not config.server_url:
            warnings.append("No GitLab server URL configured; links will be relative")

        written = False
        if write and rendered != content:
            yield (0.8, "Writing file...")
            try:
                with source.open("w", encoding="utf-8", newline="") as handle:
                    handle.write(rendered)
            except OSError as e:
                _fail(result_obj, f"Failed to write {path}: {e}")
                yield (1.0, "Complete")
                return
            written = True

        result_obj.result = f"Replaced {len(spans)} reference(s) in {path}"
        result_obj.output = TransformRenderOutput(
            errors=[],
            warnings=warnings,
            path=path,
            replacements=len(spans),
            written=written,
            content="" if write else rendered,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Rendering {path}...",
        progress_callback=do_work,
    )
