"""Implementation of the `snippetsmith inject` command."""

from __future__ import annotations

from pathlib import Path

import typer

from snippetsmith.core.config import SnippetConfig
from snippetsmith.core.exceptions import SnippetError, exception_hint
from snippetsmith.documents import default_output_path, process_document

from .._options import CodeRootOption, DocumentArgument, OutputPathOption
from ..diagnostics import CliEmitter
from ..state import debug_enabled, emit_error, get_cli_state


def inject(
    document: DocumentArgument,
    output: OutputPathOption = None,
    code_root: CodeRootOption = Path("."),
) -> None:
    """Expand every snippet command of DOCUMENT into a fenced code block."""
    config = SnippetConfig(code_root=code_root)
    target = output or default_output_path(document)
    if target.resolve() == document:
        raise typer.BadParameter(
            "Output would overwrite the input document; pass --output explicitly."
        )

    try:
        report = process_document(
            document,
            target,
            config.code_root,
            languages=config.languages,
            emitter=CliEmitter(),
        )
    except SnippetError as exc:
        if debug_enabled():
            raise
        emit_error(exception_hint(exc) or str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    state = get_cli_state()
    summary = f"Inserted {report.inserted} snippet(s) into {report.output_path}"
    if report.skipped:
        summary += f" ({report.skipped} command(s) left unprocessed)"
    state.console.print(summary, highlight=False, soft_wrap=True)
