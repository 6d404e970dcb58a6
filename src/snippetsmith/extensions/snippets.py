"""Markdown extension expanding ``insert_code`` commands into fenced code blocks."""

from __future__ import annotations

import re
from typing import Any

from markdown import Markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from ..core.config import SnippetConfig
from ..core.diagnostics import DiagnosticEmitter
from ..dsl.engine import contains_command, transform_line


class _SnippetPreprocessor(Preprocessor):
    """Replace command lines before block parsing runs."""

    _FENCE_RE = re.compile(r"^\s{0,3}(`{3,}|~{3,})(.*)$")

    def __init__(
        self,
        md: Markdown,
        config: SnippetConfig,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        super().__init__(md)
        self._config = config
        self._emitter = emitter

    def run(self, lines: list[str]) -> list[str]:
        result: list[str] = []
        in_fence = False
        fence_char: str | None = None
        fence_len = 0

        for line in lines:
            if self._config.skip_fences:
                fence_match = self._FENCE_RE.match(line)
                if fence_match:
                    fence_token = fence_match.group(1)
                    if not in_fence:
                        in_fence = True
                        fence_char = fence_token[0]
                        fence_len = len(fence_token)
                    elif fence_token[0] == fence_char and len(fence_token) >= fence_len:
                        in_fence = False
                        fence_char = None
                        fence_len = 0
                    result.append(line)
                    continue

                if in_fence:
                    result.append(line)
                    continue

            if not contains_command(line):
                result.append(line)
                continue

            transformed = transform_line(
                line,
                self._config.code_root,
                languages=self._config.languages,
                emitter=self._emitter,
            )
            result.extend(transformed.split("\n"))

        return result


class SnippetExtension(Extension):
    """Register the snippet preprocessor on the Markdown pipeline."""

    def __init__(self, *, emitter: DiagnosticEmitter | None = None, **kwargs: Any) -> None:
        self.emitter = emitter
        self.config = {
            "code_root": [".", "Directory that command filenames are relative to."],
            "languages": [{}, "Extra extension to fence language mappings."],
            "skip_fences": [True, "Leave commands inside fenced code blocks untouched."],
        }
        super().__init__(**kwargs)

    def settings(self) -> SnippetConfig:
        """Validate the extension options into a :class:`SnippetConfig`."""
        defaults = SnippetConfig()
        return SnippetConfig(
            code_root=self.getConfig("code_root"),
            languages={**defaults.languages, **(self.getConfig("languages") or {})},
            skip_fences=self.getConfig("skip_fences"),
        )

    def extendMarkdown(self, md: Markdown) -> None:  # noqa: N802 - markdown hook
        processor = _SnippetPreprocessor(md, self.settings(), self.emitter)
        # Ahead of fenced_code (25) so the generated fences get parsed.
        md.preprocessors.register(processor, "snippetsmith_snippets", 28)


def makeExtension(**kwargs: Any) -> SnippetExtension:  # noqa: N802 - markdown hook
    """Entry point exposed to Python-Markdown."""
    return SnippetExtension(**kwargs)


__all__ = ["SnippetExtension", "makeExtension"]
