"""SnippetSmith: inject annotated source-code snippets into documents."""

from __future__ import annotations

from .core.config import SnippetConfig
from .core.exceptions import (
    DocumentError,
    SnippetError,
    SnippetNotFoundError,
    SnippetParseError,
    SnippetRangeError,
)
from .documents import default_output_path, find_dependencies, process_document
from .dsl.engine import contains_command, extract_dependency_path, transform_line
from .extensions import SnippetExtension
from .version import get_version


__version__ = get_version()

__all__ = [
    "DocumentError",
    "SnippetConfig",
    "SnippetError",
    "SnippetExtension",
    "SnippetNotFoundError",
    "SnippetParseError",
    "SnippetRangeError",
    "__version__",
    "contains_command",
    "default_output_path",
    "extract_dependency_path",
    "find_dependencies",
    "get_version",
    "process_document",
    "transform_line",
]
