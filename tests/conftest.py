from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest


YAK_SOURCE = """template <typename T>
T shaveTheYak(T t) {
  return t;
}

int main(/* int argc, char *argv[] */) {
  return shaveTheYak(42);
}
"""

MARKED_SOURCE = """// code_block(BarID:1-2)
void barFunc {
}

// code_block(FooID:1-4)
template <typename T>
T shaveTheYak(T t) {
  return t;
}
"""


class RecordingEmitter:
    """Diagnostic emitter keeping everything it receives."""

    debug_enabled = False

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.errors.append(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


@pytest.fixture
def code_root(tmp_path: Path) -> Path:
    (tmp_path / "foo.cpp").write_text(YAK_SOURCE, encoding="utf-8")
    (tmp_path / "marked.cpp").write_text(MARKED_SOURCE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def yak_lines() -> list[str]:
    return YAK_SOURCE.splitlines()
