"""Rendering pipeline turning an extracted block into annotated text.

Every line goes through three stages, in this order:

1. visual modifications (first matching entry wins),
2. highlights (character spans wrapped in backticks, or a ``*`` line marker),
3. generation options (comment hiding and indentation shift).
"""

from __future__ import annotations

from ..core.exceptions import SnippetRangeError
from .extraction import CodeBlock
from .languages import CommentSyntax, comment_syntax
from .model import (
    CharRange,
    Highlights,
    LineNumber,
    LineRange,
    VisualKind,
    VisualModification,
    VisualModifications,
)
from .options import DEFAULT_OPTIONS, RenderOptions


HIGHLIGHT_MARKER = "*"
SPAN_MARKER = "`"
ELLIPSIS = " ..."


def leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def insert_at(text: str, position: int, insert: str) -> str:
    """Insert ``insert`` before index ``position`` (appending past the end)."""
    if position >= len(text):
        return text + insert
    return text[:position] + insert + text[position:]


def _ellipsis_line(line: str, syntax: CommentSyntax) -> str:
    return leading_whitespace(line) + syntax.comment(ELLIPSIS)


def apply_visual(
    modification: VisualModification,
    line: str,
    line_number: int,
    block: CodeBlock,
    syntax: CommentSyntax,
) -> str | None:
    """Apply one visual modification; ``None`` drops the line from the output."""
    kind = modification.kind
    match modification.item:
        case CharRange(start=start, end=end):
            if end > len(line):
                raise SnippetRangeError(
                    f"Visual range {start}-{end} ends after line {line_number} "
                    f"({len(line)} characters)."
                )
            head, tail = line[: start - 1], line[end:]
            if not syntax.has_block_comments:
                # A line comment would swallow the tail; the ellipsis goes last.
                spliced = head + tail
                if kind is VisualKind.ELLIPSIS:
                    return f"{spliced.rstrip()} {syntax.comment(ELLIPSIS)}"
                return spliced
            placeholder = f"{ELLIPSIS} " if kind is VisualKind.ELLIPSIS else ""
            return head + syntax.inline(placeholder) + tail
        case LineNumber():
            if kind is VisualKind.ELLIPSIS:
                return _ellipsis_line(line, syntax)
        case LineRange(end=end):
            if kind is VisualKind.ELLIPSIS:
                if line_number != min(end, block.last_line):
                    return None
                return _ellipsis_line(line, syntax)

    if kind is VisualKind.HIDE:
        return ""
    return None


def apply_highlight(highlights: Highlights, line: str, line_number: int) -> tuple[str, str]:
    """Return the ``(marker, text)`` pair for a line that survived the visual stage."""
    spans = highlights.char_ranges(line_number)
    if spans:
        # Right to left so earlier columns stay valid.
        for span in sorted(spans, key=lambda item: item.start, reverse=True):
            line = insert_at(line, span.end, SPAN_MARKER)
            line = insert_at(line, span.start - 1, SPAN_MARKER)
        return "", line

    if highlights.marks_line(line_number):
        return HIGHLIGHT_MARKER, line.removeprefix(" ")

    return "", line


def shift_indent(line: str, delta: int) -> str:
    """Add ``delta`` spaces of indentation, or remove up to ``-delta`` of them."""
    if delta > 0:
        return " " * delta + line if line else line
    if delta < 0:
        width = len(line) - len(line.lstrip(" "))
        return line[min(width, -delta) :]
    return line


def render_lines(
    block: CodeBlock,
    *,
    language: str = "",
    highlights: Highlights | None = None,
    visuals: VisualModifications | None = None,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> list[str]:
    """Render ``block`` line by line, in file order."""
    syntax = comment_syntax(language)
    highlights = highlights or Highlights()
    visuals = visuals or VisualModifications()

    rendered: list[str] = []
    for line_number, raw in block.numbered():
        modification = visuals.first_match(line_number)
        if modification is None:
            if options.hide_comments and syntax.is_comment(raw):
                continue
            line = raw
        else:
            line = apply_visual(modification, raw, line_number, block, syntax)
            if line is None:
                continue

        marker, line = apply_highlight(highlights, line, line_number)
        rendered.append(marker + shift_indent(line, options.indent))
    return rendered


def render_block(
    block: CodeBlock,
    *,
    language: str = "",
    highlights: Highlights | None = None,
    visuals: VisualModifications | None = None,
    options: RenderOptions = DEFAULT_OPTIONS,
) -> str:
    """Render ``block`` to text with a line break after every line."""
    lines = render_lines(
        block,
        language=language,
        highlights=highlights,
        visuals=visuals,
        options=options,
    )
    return "".join(f"{line}\n" for line in lines)


def wrap_with_fence(text: str, language: str) -> str:
    return f"```{language}\n{text}```"


__all__ = [
    "apply_highlight",
    "apply_visual",
    "insert_at",
    "render_block",
    "render_lines",
    "shift_indent",
    "wrap_with_fence",
]
