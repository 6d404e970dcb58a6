"""CLI command implementations exposed via `snippetsmith.ui.cli`."""

from __future__ import annotations

from .deps import deps
from .inject import inject


__all__ = ["deps", "inject"]
