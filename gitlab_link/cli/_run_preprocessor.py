"""Run the mdBook preprocessor over stdin/stdout."""

import json
import os
from typing import TextIO

import typer

from gitlab_link.api.book.parse_preprocessor_input import parse_preprocessor_input
from gitlab_link.api.book.run_preprocessor import run_preprocessor


def _run_preprocessor(stdin: TextIO, stdout: TextIO) -> None:
    """Read ``[context, book]`` from ``stdin`` and write the transformed book to ``stdout``.

    Invalid input is reported on stderr and exits with status 1.
    """
    try:
        context, book = parse_preprocessor_input(stdin.read())
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    run_preprocessor(context, book, os.environ)
    stdout.write(json.dumps(book))
    stdout.flush()
