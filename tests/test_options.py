from __future__ import annotations

import pytest

from snippetsmith.core.exceptions import SnippetParseError
from snippetsmith.dsl.options import RenderOptions, parse_render_options


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (None, RenderOptions()),
        ("", RenderOptions()),
        ("comments=true", RenderOptions()),
        ("comments=True", RenderOptions()),
        ("indent=2", RenderOptions(indent=2)),
        ("indent=-2", RenderOptions(indent=-2)),
        ("indent=2,comments=false", RenderOptions(indent=2, hide_comments=True)),
        (" Indent = 4 , COMMENTS = 0 ", RenderOptions(indent=4, hide_comments=True)),
    ],
)
def test_parse_render_options(text: str | None, expected: RenderOptions) -> None:
    assert parse_render_options(text) == expected


def test_unknown_keys_are_reported_and_ignored(emitter) -> None:
    options = parse_render_options("key=value,key2=bar", emitter=emitter)

    assert options == RenderOptions()
    assert emitter.warnings == [
        "Did not understand option key: key",
        "Did not understand option key: key2",
    ]


@pytest.mark.parametrize("text", ["indent=two", "indent=", "comments=maybe", "indent"])
def test_malformed_values_are_fatal(text: str) -> None:
    with pytest.raises(SnippetParseError):
        parse_render_options(text)
