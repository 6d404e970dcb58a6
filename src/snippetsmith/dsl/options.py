"""Generation options given in the ``[key=value,...]`` command suffix."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from ..core.diagnostics import DiagnosticEmitter, LoggingEmitter
from ..core.exceptions import SnippetParseError


_log = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")
_TRUE_VALUES = frozenset({"1", "t", "true"})
_FALSE_VALUES = frozenset({"0", "f", "false"})


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Post-processing applied to every rendered line."""

    indent: int = 0
    hide_comments: bool = False


DEFAULT_OPTIONS = RenderOptions()


def _parse_bool(value: str, key: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise SnippetParseError(f"Could not parse boolean option '{key}={value}'.")


def _parse_int(value: str, key: str) -> int:
    token = value.strip()
    if not _INTEGER.fullmatch(token):
        raise SnippetParseError(f"Could not parse integer option '{key}={value}'.")
    return int(token)


def parse_render_options(
    text: str | None, *, emitter: DiagnosticEmitter | None = None
) -> RenderOptions:
    """Parse ``indent=<int>`` and ``comments=<bool>`` pairs.

    ``comments`` states whether comments are kept, so ``comments=false`` hides
    them. Unknown keys are reported and ignored; malformed values raise
    :class:`SnippetParseError`.
    """
    if text is None:
        return DEFAULT_OPTIONS

    indent = 0
    hide_comments = False
    for chunk in text.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        key, separator, value = chunk.partition("=")
        if not separator:
            raise SnippetParseError(f"Option '{chunk}' is missing a value.")
        key = key.strip().lower()

        if key == "comments":
            hide_comments = not _parse_bool(value, key)
        elif key == "indent":
            indent = _parse_int(value, key)
        else:
            (emitter or LoggingEmitter(logger_obj=_log)).warning(
                f"Did not understand option key: {key}"
            )

    return RenderOptions(indent=indent, hide_comments=hide_comments)


__all__ = ["DEFAULT_OPTIONS", "RenderOptions", "parse_render_options"]
