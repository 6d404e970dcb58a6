"""Exception hierarchy for the snippet injection pipeline."""

from __future__ import annotations


class SnippetError(RuntimeError):
    """Base exception for snippet injection failures."""


class SnippetParseError(SnippetError, ValueError):
    """Raised when a command, selector, option list or marker is malformed."""


class SnippetRangeError(SnippetError, IndexError):
    """Raised when a visual character range reaches past the end of its line."""


class SnippetNotFoundError(SnippetError, LookupError):
    """Raised when a source file or a marker identifier cannot be located."""


class DocumentError(SnippetError):
    """Raised when a host document cannot be read or written."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "DocumentError",
    "SnippetError",
    "SnippetNotFoundError",
    "SnippetParseError",
    "SnippetRangeError",
    "exception_hint",
    "exception_messages",
]
