"""Parser for the highlight (``{...}``) and visual (``<...>``) selector suffixes.

A selector body is a comma separated list of blocks::

    4            single line
    1-2          inclusive line range
    2:3-13|17-17 character ranges on one line (braces around the list are allowed)

Visual blocks may start with ``d`` (replace with an ellipsis comment), ``h``
(hide, keeping an empty line) or ``r`` (remove). A leading ``r`` in front of
the opening bracket makes every line number relative to the first line of the
resolved code block.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import logging
import re

from ..core.diagnostics import DiagnosticEmitter, LoggingEmitter
from ..core.exceptions import SnippetParseError
from .model import (
    AddressingMode,
    CharRange,
    Highlights,
    LineNumber,
    LineRange,
    SelectorItem,
    VisualKind,
    VisualModification,
    VisualModifications,
)


_log = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"\s*(\d+)\s*")
SPAN_PATTERN = re.compile(r"\s*(\d+)\s*-\s*(\d+)\s*")

_CLOSERS = {"{": "}", "<": ">", "[": "]"}
_RELATIVE_PREFIX = "r"


@dataclass(frozen=True, slots=True)
class SelectorSource:
    """Raw selector body together with its addressing mode."""

    body: str
    mode: AddressingMode = AddressingMode.ABSOLUTE


@dataclass(frozen=True, slots=True)
class CommandSuffixes:
    """Suffixes appended after the closing parenthesis of a command."""

    highlight: SelectorSource | None = None
    visual: SelectorSource | None = None
    options: str | None = None


def split_suffixes(text: str) -> CommandSuffixes:
    """Split ``[...]``, ``{...}``/``r{...}`` and ``<...>``/``r<...>`` suffixes.

    Suffixes may appear in any order, each at most once. Whitespace between
    them is ignored; anything else is a parse error.
    """
    found: dict[str, SelectorSource] = {}
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        if char.isspace():
            index += 1
            continue

        mode = AddressingMode.ABSOLUTE
        if char == _RELATIVE_PREFIX and index + 1 < length and text[index + 1] in "{<":
            mode = AddressingMode.RELATIVE
            index += 1
            char = text[index]

        closer = _CLOSERS.get(char)
        if closer is None:
            raise SnippetParseError(f"Unexpected text after command: {text[index:]!r}")
        if char in found:
            raise SnippetParseError(f"Suffix '{char}{closer}' given more than once: {text!r}")

        end = _find_closer(text, index, char, closer)
        found[char] = SelectorSource(text[index + 1 : end], mode)
        index = end + 1

    options = found.get("[")
    return CommandSuffixes(
        highlight=found.get("{"),
        visual=found.get("<"),
        options=options.body if options is not None else None,
    )


def _find_closer(text: str, start: int, opener: str, closer: str) -> int:
    depth = 0
    for position in range(start, len(text)):
        char = text[position]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return position
    raise SnippetParseError(f"Unbalanced '{opener}' in selector suffix: {text[start:]!r}")


def parse_number(token: str, what: str = "line number") -> int:
    """Parse a non-negative decimal integer or raise :class:`SnippetParseError`."""
    match = NUMBER_PATTERN.fullmatch(token)
    if match is None:
        raise SnippetParseError(f"Could not parse {what} from {token!r}.")
    return int(match.group(1))


def parse_span(token: str, what: str = "line range") -> tuple[int, int]:
    """Parse ``start-end`` into a pair of integers."""
    match = SPAN_PATTERN.fullmatch(token)
    if match is None:
        raise SnippetParseError(f"Could not parse {what} from {token!r}.")
    return int(match.group(1)), int(match.group(2))


def _iter_blocks(body: str) -> Iterator[str]:
    if not body.strip():
        return
    depth = 0
    current: list[str] = []
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        if char == "," and depth == 0:
            yield "".join(current).strip()
            current = []
            continue
        current.append(char)
    yield "".join(current).strip()


def _is_char_block(block: str) -> bool:
    colon = block.find(":")
    if colon == -1:
        return False
    dash = block.find("-")
    return dash == -1 or colon < dash


def _read_block(block: str) -> list[SelectorItem]:
    if not block:
        raise SnippetParseError("Empty block in selector.")

    if _is_char_block(block):
        line_token, _, spans = block.partition(":")
        line = parse_number(line_token)
        spans = spans.strip()
        if spans.startswith("{") and spans.endswith("}"):
            spans = spans[1:-1]
        items: list[SelectorItem] = []
        for span in spans.split("|"):
            start, end = parse_span(span, "character range")
            items.append(CharRange(line, start, end))
        return items

    if "-" in block:
        start, end = parse_span(block)
        return [LineRange(start, end)]

    return [LineNumber(parse_number(block))]


def parse_block(
    block: str,
    mode: AddressingMode = AddressingMode.ABSOLUTE,
    base: LineRange | None = None,
) -> list[SelectorItem]:
    """Parse one comma-delimited block into selector items."""
    return [mode.resolve(item, base) for item in _read_block(block)]


def read_highlights(source: SelectorSource | None) -> Highlights:
    """Parse a highlight selector, keeping line numbers as written."""
    if source is None:
        return Highlights()
    items: list[SelectorItem] = []
    for block in _iter_blocks(source.body):
        items.extend(_read_block(block))
    return Highlights(tuple(items), source.mode)


def parse_highlights(source: SelectorSource | None, base: LineRange | None = None) -> Highlights:
    """Build the highlight selector of a command against its code block."""
    return read_highlights(source).to_absolute(base)


def read_visuals(
    source: SelectorSource | None, *, emitter: DiagnosticEmitter | None = None
) -> VisualModifications:
    """Parse a visual selector, keeping line numbers as written."""
    if source is None:
        return VisualModifications()
    emitter = emitter or LoggingEmitter(logger_obj=_log)

    modifications: list[VisualModification] = []
    for block in _iter_blocks(source.body):
        kind = _visual_kind(block[:1])
        if kind is None:
            emitter.warning(
                f"No visual modification type set for block '{block}', defaulting to hiding lines."
            )
            kind = VisualKind.HIDE
        else:
            block = block[1:].strip()
        for item in _read_block(block):
            modifications.append(VisualModification(item, kind))
    return VisualModifications(tuple(modifications), source.mode)


def parse_visuals(
    source: SelectorSource | None,
    base: LineRange | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> VisualModifications:
    """Build the visual modification list of a command against its code block."""
    return read_visuals(source, emitter=emitter).to_absolute(base)


def _visual_kind(prefix: str) -> VisualKind | None:
    for kind in VisualKind:
        if kind.value == prefix:
            return kind
    return None


__all__ = [
    "NUMBER_PATTERN",
    "SPAN_PATTERN",
    "CommandSuffixes",
    "SelectorSource",
    "parse_block",
    "parse_highlights",
    "parse_number",
    "parse_span",
    "parse_visuals",
    "read_highlights",
    "read_visuals",
    "split_suffixes",
]
