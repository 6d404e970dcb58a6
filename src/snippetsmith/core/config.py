"""Configuration model for snippet injection.

SnippetConfig

`code_root` (`Path`)
: Directory prepended to every filename referenced by an `insert_code` or
  `rev_insert_code` command. Defaults to the current working directory.

`languages` (`dict[str, str]`)
: Mapping from file extension (without the leading dot) to the language tag
  written after the opening fence. Extensions missing from the table are used
  verbatim, so `foo.cpp` yields a `cpp` fence.

`skip_fences` (`bool`)
: Leave command-looking lines untouched when they already sit inside a fenced
  code block. Only honoured by the Markdown extension; plain document
  processing transforms every matching line.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_LANGUAGES: dict[str, str] = {"py": "python"}


class SnippetConfig(BaseModel):
    """Settings shared by the document processor, CLI and Markdown extension."""

    model_config = ConfigDict(extra="forbid")

    code_root: Path = Path(".")
    languages: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_LANGUAGES))
    skip_fences: bool = True

    @field_validator("languages")
    @classmethod
    def normalise_extensions(cls, value: dict[str, str]) -> dict[str, str]:
        """Store extensions lower-cased and without their leading dot."""
        return {key.lstrip(".").lower(): tag for key, tag in value.items()}


__all__ = ["DEFAULT_LANGUAGES", "SnippetConfig"]
