"""Command recognition and range resolution for ``insert_code`` commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from pathlib import Path
import re

from ..core.exceptions import SnippetNotFoundError, SnippetParseError
from .model import LineRange
from .selectors import CommandSuffixes, parse_number, parse_span, split_suffixes


_log = logging.getLogger(__name__)


class CommandKind(Enum):
    """Supported commands, keyed by their keyword."""

    MARKER_REFERENCE = "rev_insert_code"
    DIRECT_RANGE = "insert_code"


COMMAND_PATTERN = re.compile(
    r"""
    ^(?P<keyword>rev_insert_code|insert_code)
    \(
    (?P<target>[^()]*)
    \)
    (?P<suffix>.*)$
    """,
    re.VERBOSE,
)
MARKER_PATTERN = re.compile(r"code_block\((?P<block_id>[^:()]*):(?P<span>[^()]*)\)")


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed ``insert_code`` or ``rev_insert_code`` line."""

    kind: CommandKind
    filename: str
    line_range: LineRange | None = None
    block_id: str | None = None
    suffixes: CommandSuffixes = CommandSuffixes()

    def source_path(self, code_root: str | Path = ".") -> Path:
        return Path(code_root) / self.filename


def command_kind(line: str) -> CommandKind | None:
    """Identify the command a host line starts with, if any."""
    for kind in CommandKind:
        if line.startswith(kind.value):
            return kind
    return None


def _match_command(line: str) -> tuple[CommandKind, str, str, str]:
    match = COMMAND_PATTERN.match(line.rstrip("\r\n"))
    if match is None:
        raise SnippetParseError(f"Line does not hold a well-formed snippet command: {line!r}")
    filename, separator, address = match.group("target").rpartition(":")
    if not separator or not filename.strip():
        raise SnippetParseError(f"Command target must be '<file>:<range or id>': {line!r}")
    kind = CommandKind(match.group("keyword"))
    return kind, filename.strip(), address.strip(), match.group("suffix")


def parse_target_filename(line: str) -> str:
    """Return the filename named by a command, ignoring its suffixes."""
    _, filename, _, _ = _match_command(line)
    return filename


def _parse_direct_range(address: str) -> LineRange:
    if "-" in address:
        start, end = parse_span(address)
        return LineRange(start, end)
    line = parse_number(address)
    return LineRange(line, line)


def parse_command(line: str) -> Command:
    """Parse a command line into an immutable :class:`Command`."""
    kind, filename, address, suffix = _match_command(line)
    suffixes = split_suffixes(suffix)

    if kind is CommandKind.DIRECT_RANGE:
        return Command(kind, filename, line_range=_parse_direct_range(address), suffixes=suffixes)

    if not address:
        raise SnippetParseError(f"Missing block identifier: {line!r}")
    return Command(kind, filename, block_id=address, suffixes=suffixes)


def find_marker_range(path: Path, block_id: str) -> LineRange:
    """Scan ``path`` for ``code_block(<block_id>:a-b)`` and return its absolute range.

    Bounds count from the marker line, so ``1`` is the line right below it.
    The first matching marker wins.
    """
    try:
        handle = path.open(encoding="utf-8")
    except OSError as exc:
        raise SnippetNotFoundError(f"Could not open source file '{path}'.") from exc

    with handle:
        try:
            for line_number, line in enumerate(handle, start=1):
                for match in MARKER_PATTERN.finditer(line):
                    if match.group("block_id").strip() != block_id:
                        continue
                    start, end = parse_span(match.group("span"), "marker range")
                    _log.debug("Found block '%s' on line %d of %s", block_id, line_number, path)
                    return LineRange(line_number + start, line_number + end)
        except UnicodeDecodeError as exc:
            raise SnippetNotFoundError(f"Could not decode source file '{path}'.") from exc

    raise SnippetNotFoundError(f"No block '{block_id}' found in '{path}'.")


def resolve_range(command: Command, code_root: str | Path = ".") -> LineRange:
    """Turn a command into the absolute line range it refers to."""
    match command.kind:
        case CommandKind.DIRECT_RANGE:
            assert command.line_range is not None
            return command.line_range
        case CommandKind.MARKER_REFERENCE:
            assert command.block_id is not None
            return find_marker_range(command.source_path(code_root), command.block_id)


__all__ = [
    "COMMAND_PATTERN",
    "MARKER_PATTERN",
    "Command",
    "CommandKind",
    "command_kind",
    "find_marker_range",
    "parse_command",
    "parse_target_filename",
    "resolve_range",
]
