"""Comment syntax used when splicing placeholders into extracted code."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommentSyntax:
    """Line and block comment delimiters of a language."""

    line: str
    block_open: str = ""
    block_close: str = ""

    @property
    def has_block_comments(self) -> bool:
        return bool(self.block_open)

    def comment(self, text: str) -> str:
        return f"{self.line}{text}"

    def inline(self, text: str) -> str:
        return f"{self.block_open}{text}{self.block_close}"

    def is_comment(self, line: str) -> bool:
        """Return whether ``line`` holds nothing but a comment."""
        stripped = line.lstrip()
        if not stripped:
            return False
        if stripped.startswith(self.line):
            return True
        return self.has_block_comments and stripped.startswith(self.block_open)


C_STYLE = CommentSyntax("//", "/*", "*/")
HASH_STYLE = CommentSyntax("#")
DASH_STYLE = CommentSyntax("--", "/*", "*/")

_SYNTAX_BY_LANGUAGE: dict[str, CommentSyntax] = {
    "python": HASH_STYLE,
    "py": HASH_STYLE,
    "sh": HASH_STYLE,
    "bash": HASH_STYLE,
    "zsh": HASH_STYLE,
    "rb": HASH_STYLE,
    "ruby": HASH_STYLE,
    "pl": HASH_STYLE,
    "r": HASH_STYLE,
    "yaml": HASH_STYLE,
    "yml": HASH_STYLE,
    "toml": HASH_STYLE,
    "cmake": HASH_STYLE,
    "sql": DASH_STYLE,
    "lua": CommentSyntax("--", "--[[", "]]"),
    "hs": CommentSyntax("--", "{-", "-}"),
}


def comment_syntax(language: str) -> CommentSyntax:
    """Return the comment syntax for a fence language tag (C style by default)."""
    return _SYNTAX_BY_LANGUAGE.get(language.lower(), C_STYLE)


__all__ = ["C_STYLE", "DASH_STYLE", "HASH_STYLE", "CommentSyntax", "comment_syntax"]
