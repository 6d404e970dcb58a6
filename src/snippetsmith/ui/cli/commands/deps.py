"""Implementation of the `snippetsmith deps` command."""

from __future__ import annotations

from pathlib import Path

import typer

from snippetsmith.core.config import SnippetConfig
from snippetsmith.core.exceptions import SnippetError
from snippetsmith.documents import find_dependencies

from .._options import CodeRootOption, DocumentArgument
from ..state import debug_enabled, emit_error


def deps(
    document: DocumentArgument,
    code_root: CodeRootOption = Path("."),
) -> None:
    """Print the source files DOCUMENT depends on, one per line."""
    config = SnippetConfig(code_root=code_root)
    try:
        dependencies = find_dependencies(document, config.code_root)
    except SnippetError as exc:
        if debug_enabled():
            raise
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    for dependency in dependencies:
        typer.echo(str(dependency))
