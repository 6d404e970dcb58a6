"""Core building blocks shared by the DSL engine and its front-ends."""

from __future__ import annotations

from .config import SnippetConfig
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    DocumentError,
    SnippetError,
    SnippetNotFoundError,
    SnippetParseError,
    SnippetRangeError,
)


__all__ = [
    "DiagnosticEmitter",
    "DocumentError",
    "LoggingEmitter",
    "NullEmitter",
    "SnippetConfig",
    "SnippetError",
    "SnippetNotFoundError",
    "SnippetParseError",
    "SnippetRangeError",
]
