"""Reading line windows out of source files."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path, PurePath

from ..core.config import DEFAULT_LANGUAGES
from ..core.exceptions import SnippetNotFoundError
from .model import LineRange


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Raw lines extracted from a source file, without line terminators."""

    line_range: LineRange
    lines: tuple[str, ...]

    @property
    def last_line(self) -> int:
        """Number of the last line actually read (files may end early)."""
        return self.line_range.start + len(self.lines) - 1

    def numbered(self) -> Iterator[tuple[int, str]]:
        return enumerate(self.lines, start=self.line_range.start)


def read_code_block(path: Path, line_range: LineRange) -> CodeBlock:
    """Read the lines of ``path`` that fall inside ``line_range``."""
    lines: list[str] = []
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            for line_number, line in enumerate(handle, start=1):
                if line_number > line_range.end:
                    break
                if line_number >= line_range.start:
                    lines.append(line.rstrip("\r\n"))
    except OSError as exc:
        raise SnippetNotFoundError(f"Could not open source file '{path}'.") from exc
    except UnicodeDecodeError as exc:
        raise SnippetNotFoundError(f"Could not decode source file '{path}'.") from exc
    return CodeBlock(line_range, tuple(lines))


def detect_language(filename: str | PurePath, languages: Mapping[str, str] | None = None) -> str:
    """Derive the fence language tag from a file extension."""
    table = DEFAULT_LANGUAGES if languages is None else languages
    extension = PurePath(filename).suffix.lstrip(".")
    return table.get(extension.lower(), extension)


__all__ = ["CodeBlock", "detect_language", "read_code_block"]
