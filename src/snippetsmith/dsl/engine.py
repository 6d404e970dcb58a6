"""Entry points turning command lines into fenced code blocks.

Commands::

    insert_code(<file>:<start>-<end>)[options]<visuals>{highlights}
    rev_insert_code(<file>:<BlockID>)[options]<visuals>{highlights}

A missing source file or block identifier leaves the command line untouched
so one stale annotation does not break the whole document. Malformed
commands raise :class:`~snippetsmith.core.exceptions.SnippetParseError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from pathlib import Path

from ..core.diagnostics import DiagnosticEmitter, LoggingEmitter
from ..core.exceptions import SnippetNotFoundError
from .addressing import command_kind, parse_command, parse_target_filename, resolve_range
from .extraction import CodeBlock, detect_language, read_code_block
from .model import Highlights, VisualModifications
from .options import RenderOptions, parse_render_options
from .renderer import render_block, wrap_with_fence
from .selectors import read_highlights, read_visuals


_log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CodeInsertion:
    """Everything needed to render one resolved command."""

    block: CodeBlock
    language: str
    highlights: Highlights
    visuals: VisualModifications
    options: RenderOptions

    def render(self) -> str:
        return render_block(
            self.block,
            language=self.language,
            highlights=self.highlights,
            visuals=self.visuals,
            options=self.options,
        )

    def to_fence(self) -> str:
        return wrap_with_fence(self.render(), self.language)


def contains_command(line: str) -> bool:
    """Return whether ``line`` starts with a snippet command keyword."""
    return command_kind(line) is not None


def build_insertion(
    line: str,
    code_root: str | Path = ".",
    *,
    languages: Mapping[str, str] | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> CodeInsertion:
    """Parse, resolve and extract a command without rendering it.

    The whole command is parsed before its source file is opened, so a
    malformed command raises :class:`SnippetParseError` even when the file or
    block it names is missing.
    """
    command = parse_command(line)
    suffixes = command.suffixes
    options = parse_render_options(suffixes.options, emitter=emitter)
    highlights = read_highlights(suffixes.highlight)
    visuals = read_visuals(suffixes.visual, emitter=emitter)

    line_range = resolve_range(command, code_root)
    block = read_code_block(command.source_path(code_root), line_range)
    return CodeInsertion(
        block=block,
        language=detect_language(command.filename, languages),
        highlights=highlights.to_absolute(line_range),
        visuals=visuals.to_absolute(line_range),
        options=options,
    )


def transform_line(
    line: str,
    code_root: str | Path = ".",
    *,
    languages: Mapping[str, str] | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Replace a command line with the fenced snippet it describes.

    Lines without a command are returned unchanged, and so are commands whose
    source file or block cannot be found.
    """
    kind = command_kind(line)
    if kind is None:
        return line
    emitter = emitter or LoggingEmitter(logger_obj=_log)

    try:
        insertion = build_insertion(line, code_root, languages=languages, emitter=emitter)
    except SnippetNotFoundError as exc:
        emitter.warning(f"Could not process {kind.value} line: {line}", exc)
        emitter.event("snippet_skipped", {"line": line, "reason": str(exc)})
        return line

    emitter.event(
        "snippet_inserted",
        {
            "source": parse_target_filename(line),
            "start": insertion.block.line_range.start,
            "end": insertion.block.line_range.end,
        },
    )
    return insertion.to_fence()


def extract_dependency_path(line: str, code_root: str | Path = ".") -> Path | None:
    """Return the source file a command line depends on, or ``None``."""
    if not contains_command(line):
        return None
    return Path(code_root) / parse_target_filename(line)


__all__ = [
    "CodeInsertion",
    "build_insertion",
    "contains_command",
    "extract_dependency_path",
    "transform_line",
]
