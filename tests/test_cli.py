from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from snippetsmith.ui.cli import app
import snippetsmith.ui.cli.state as cli_state


def _reset_state() -> None:
    cli_state.set_cli_state(verbosity=0, debug=False)


def test_inject_writes_default_output(code_root: Path) -> None:
    _reset_state()
    document = code_root / "index_raw.html"
    document.write_text("<h1>Demo</h1>\ninsert_code(foo.cpp:1-2){1}", encoding="utf-8")

    result = CliRunner().invoke(app, ["inject", str(document), "--code-root", str(code_root)])

    assert result.exit_code == 0, result.output
    output = code_root / "index.html"
    assert output.read_text(encoding="utf-8") == (
        "<h1>Demo</h1>\n```cpp\n*template <typename T>\nT shaveTheYak(T t) {\n```"
    )
    assert "Inserted 1 snippet(s)" in result.output


def test_inject_explicit_output(code_root: Path) -> None:
    _reset_state()
    document = code_root / "talk.md"
    document.write_text("insert_code(foo.cpp:4-4)", encoding="utf-8")
    target = code_root / "out" / "talk.md"
    target.parent.mkdir()

    result = CliRunner().invoke(
        app,
        ["inject", str(document), "--output", str(target), "--code-root", str(code_root)],
    )

    assert result.exit_code == 0, result.output
    assert target.read_text(encoding="utf-8") == "```cpp\n}\n```"


def test_inject_reports_unprocessed_commands(code_root: Path) -> None:
    _reset_state()
    document = code_root / "slides_raw.html"
    document.write_text("rev_insert_code(foo.cpp:Missing)", encoding="utf-8")

    result = CliRunner().invoke(app, ["inject", str(document), "--code-root", str(code_root)])

    assert result.exit_code == 0, result.output
    assert "1 command(s) left unprocessed" in result.output
    assert (code_root / "slides.html").read_text(encoding="utf-8") == (
        "rev_insert_code(foo.cpp:Missing)"
    )


def test_inject_fails_on_malformed_command(code_root: Path) -> None:
    _reset_state()
    document = code_root / "bad_raw.html"
    document.write_text("insert_code(foo.cpp:1-4){oops}", encoding="utf-8")

    result = CliRunner().invoke(app, ["inject", str(document), "--code-root", str(code_root)])

    assert result.exit_code == 1
    assert "error" in result.output


def test_inject_refuses_to_overwrite_input(code_root: Path) -> None:
    _reset_state()
    document = code_root / "index.html"
    document.write_text("insert_code(foo.cpp:1-2)", encoding="utf-8")

    result = CliRunner().invoke(app, ["inject", str(document), "--code-root", str(code_root)])

    assert result.exit_code != 0
    assert document.read_text(encoding="utf-8") == "insert_code(foo.cpp:1-2)"


def test_deps_lists_dependencies(tmp_path: Path) -> None:
    _reset_state()
    document = tmp_path / "index_raw.html"
    document.write_text(
        "insert_code(a.cpp:1-2)\nrev_insert_code(b.py:ID)\ninsert_code(a.cpp:3-4)",
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, ["deps", str(document), "--code-root", "code"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        str(Path("code") / "a.cpp"),
        str(Path("code") / "b.py"),
    ]
