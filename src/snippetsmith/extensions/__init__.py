"""Python-Markdown integration for snippet commands."""

from __future__ import annotations

from .snippets import SnippetExtension, makeExtension


__all__ = ["SnippetExtension", "makeExtension"]
