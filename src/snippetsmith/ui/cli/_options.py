"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"

DocumentArgument = Annotated[
    Path,
    typer.Argument(
        metavar="DOCUMENT",
        help="Host document holding insert_code / rev_insert_code command lines.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

CodeRootOption = Annotated[
    Path,
    typer.Option(
        "--code-root",
        help="Root folder that command filenames are relative to.",
        file_okay=False,
        dir_okay=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

OutputPathOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output file (defaults to the input name without '_raw', else index.html).",
        dir_okay=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]


__all__ = ["CodeRootOption", "DocumentArgument", "OutputPathOption"]
