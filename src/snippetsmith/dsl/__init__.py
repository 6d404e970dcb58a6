"""The snippet DSL: command parsing, range resolution and rendering."""

from __future__ import annotations

from .addressing import Command, CommandKind, find_marker_range, parse_command, resolve_range
from .engine import (
    CodeInsertion,
    build_insertion,
    contains_command,
    extract_dependency_path,
    transform_line,
)
from .extraction import CodeBlock, detect_language, read_code_block
from .model import (
    AddressingMode,
    CharRange,
    Highlights,
    LineNumber,
    LineRange,
    VisualKind,
    VisualModification,
    VisualModifications,
)
from .options import RenderOptions, parse_render_options
from .renderer import render_block
from .selectors import (
    parse_highlights,
    parse_visuals,
    read_highlights,
    read_visuals,
    split_suffixes,
)


__all__ = [
    "AddressingMode",
    "CharRange",
    "CodeBlock",
    "CodeInsertion",
    "Command",
    "CommandKind",
    "Highlights",
    "LineNumber",
    "LineRange",
    "RenderOptions",
    "VisualKind",
    "VisualModification",
    "VisualModifications",
    "build_insertion",
    "contains_command",
    "detect_language",
    "extract_dependency_path",
    "find_marker_range",
    "parse_command",
    "parse_highlights",
    "parse_render_options",
    "parse_visuals",
    "read_code_block",
    "read_highlights",
    "read_visuals",
    "render_block",
    "resolve_range",
    "split_suffixes",
    "transform_line",
]
