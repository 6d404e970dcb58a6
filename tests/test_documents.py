from __future__ import annotations

from pathlib import Path

import pytest

from snippetsmith.core.exceptions import DocumentError, SnippetParseError
from snippetsmith.documents import default_output_path, find_dependencies, process_document


def _write_document(path: Path, *lines: str) -> Path:
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_process_document_replaces_commands(code_root: Path, tmp_path: Path, emitter) -> None:
    document = _write_document(
        tmp_path / "index_raw.html",
        "<textarea id='source'>",
        "insert_code(foo.cpp:3-4)",
        "rev_insert_code(foo.cpp:Missing)",
        "</textarea>",
    )
    output = tmp_path / "index.html"

    report = process_document(document, output, code_root, emitter=emitter)

    assert output.read_text(encoding="utf-8") == "\n".join(
        [
            "<textarea id='source'>",
            "```cpp\n  return t;\n}\n```",
            "rev_insert_code(foo.cpp:Missing)",
            "</textarea>",
        ]
    )
    assert report.lines == 4
    assert report.commands == 2
    assert report.skipped == 1
    assert report.inserted == 1
    assert len(emitter.warnings) == 1


def test_process_document_stops_on_parse_errors(code_root: Path, tmp_path: Path) -> None:
    document = _write_document(tmp_path / "doc.md", "insert_code(foo.cpp:x-4)")

    with pytest.raises(SnippetParseError):
        process_document(document, tmp_path / "out.md", code_root)


def test_process_missing_document(tmp_path: Path) -> None:
    with pytest.raises(DocumentError):
        process_document(tmp_path / "absent.html", tmp_path / "out.html")


def test_find_dependencies_in_order_without_duplicates(tmp_path: Path) -> None:
    document = _write_document(
        tmp_path / "slides.html",
        "insert_code(b.cpp:1-2)",
        "text",
        "rev_insert_code(a.py:Block)",
        "insert_code(b.cpp:5-9)",
    )

    assert find_dependencies(document, "code") == [Path("code/b.cpp"), Path("code/a.py")]


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("slides/index_raw.html", "slides/index.html"),
        ("talk_raw.md", "talk.md"),
        ("slides/talk.html", "slides/index.html"),
    ],
)
def test_default_output_path(source: str, expected: str) -> None:
    assert default_output_path(source) == Path(expected)
