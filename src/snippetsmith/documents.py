"""Host document processing: inject snippets, list dependencies, name outputs."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from pathlib import Path

from .core.diagnostics import DiagnosticEmitter, LoggingEmitter
from .core.exceptions import DocumentError
from .dsl.engine import contains_command, extract_dependency_path, transform_line


_log = logging.getLogger(__name__)

RAW_MARKER = "_raw"
DEFAULT_OUTPUT_NAME = "index.html"


@dataclass(slots=True)
class ProcessingReport:
    """Summary of one document pass."""

    input_path: Path
    output_path: Path
    lines: int = 0
    commands: int = 0
    skipped: int = 0

    @property
    def inserted(self) -> int:
        return self.commands - self.skipped


def read_document_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Could not read document '{path}'.") from exc


def process_document(
    input_path: str | Path,
    output_path: str | Path,
    code_root: str | Path = ".",
    *,
    languages: Mapping[str, str] | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> ProcessingReport:
    """Rewrite ``input_path`` into ``output_path`` with every command expanded."""
    source = Path(input_path)
    target = Path(output_path)
    emitter = emitter or LoggingEmitter(logger_obj=_log)
    report = ProcessingReport(input_path=source, output_path=target)

    output: list[str] = []
    for line in read_document_lines(source):
        report.lines += 1
        if not contains_command(line):
            output.append(line)
            continue
        report.commands += 1
        transformed = transform_line(line, code_root, languages=languages, emitter=emitter)
        if transformed == line:
            report.skipped += 1
        output.append(transformed)

    try:
        target.write_text("\n".join(output), encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Could not write output file '{target}'.") from exc

    _log.debug(
        "Processed %s: %d commands, %d kept unprocessed", source, report.commands, report.skipped
    )
    return report


def find_dependencies(input_path: str | Path, code_root: str | Path = ".") -> list[Path]:
    """List the source files referenced by a document, in order of first use."""
    dependencies: list[Path] = []
    for line in read_document_lines(Path(input_path)):
        dependency = extract_dependency_path(line, code_root)
        if dependency is not None and dependency not in dependencies:
            dependencies.append(dependency)
    return dependencies


def default_output_path(input_path: str | Path) -> Path:
    """Infer the output file: drop ``_raw`` from the name, else use ``index.html``."""
    source = Path(input_path)
    if RAW_MARKER in source.name:
        return source.with_name(source.name.replace(RAW_MARKER, ""))
    return source.with_name(DEFAULT_OUTPUT_NAME)


__all__ = [
    "ProcessingReport",
    "default_output_path",
    "find_dependencies",
    "process_document",
    "read_document_lines",
]
