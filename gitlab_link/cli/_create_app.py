"""Create the main Typer CLI app."""

import sys

import typer

from gitlab_link.api.book.supports_renderer import supports_renderer
from gitlab_link.api.reference.cmd_check import cmd_check
from gitlab_link.api.transform.cmd_render import cmd_render
from gitlab_link.cli._handle_stage_result import handle_stage_result
from gitlab_link.cli._run_preprocessor import _run_preprocessor


def _print_content(output: dict) -> None:
    sys.stdout.write(output["content"])


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="mdBook preprocessor that turns GitLab references into links",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        """Without a command, read [context, book] JSON from stdin and write the book to stdout."""
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        if ctx.obj is None:
            ctx.obj = {}
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            if sys.stdin.isatty():
                typer.echo(ctx.get_help(), err=True)
                raise typer.Exit()
            _run_preprocessor(sys.stdin, sys.stdout)

    @app.command(name="supports")
    def supports_cmd(renderer: str = typer.Argument(..., help="mdBook renderer name")) -> None:
        """Exit 0 if the renderer is supported, 1 otherwise."""
        raise typer.Exit(0 if supports_renderer(renderer) else 1)

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Markdown file to scan"),
        book: str | None = typer.Option(None, "--book", "-b", help="book.toml with a [preprocessor.gitlab-link] table"),
    ) -> None:
        """List the GitLab references in a markdown file and their links."""
        handle_stage_result(cmd_check)(path=path, book=book)

    @app.command(name="render")
    def render_cmd(
        path: str = typer.Argument(..., help="Markdown file to transform"),
        book: str | None = typer.Option(None, "--book", "-b", help="book.toml with a [preprocessor.gitlab-link] table"),
        write: bool = typer.Option(False, "--write", "-w", help="Rewrite the file in place"),
    ) -> None:
        """Print a markdown file with GitLab references replaced by links."""
        handle_stage_result(cmd_render, result_printer=None if write else _print_content)(
            path=path,
            book=book,
            write=write,
        )

    return app
