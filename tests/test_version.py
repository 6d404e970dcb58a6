from typer.testing import CliRunner

import snippetsmith
from snippetsmith.ui.cli import app


def test_get_version_matches_public_api() -> None:
    assert snippetsmith.get_version() == snippetsmith.__version__
    assert isinstance(snippetsmith.__version__, str)


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.stdout
    assert result.stdout.strip() == snippetsmith.get_version()
