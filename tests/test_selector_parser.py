from __future__ import annotations

import pytest

from snippetsmith.core.exceptions import SnippetParseError
from snippetsmith.dsl.model import (
    AddressingMode,
    CharRange,
    LineNumber,
    LineRange,
    VisualKind,
    VisualModification,
)
from snippetsmith.dsl.selectors import (
    SelectorSource,
    parse_block,
    parse_highlights,
    parse_visuals,
    read_highlights,
    read_visuals,
    split_suffixes,
)


def test_split_suffixes_in_any_order() -> None:
    suffixes = split_suffixes("r{1-2}[indent=2]<d3>")

    assert suffixes.highlight == SelectorSource("1-2", AddressingMode.RELATIVE)
    assert suffixes.visual == SelectorSource("d3", AddressingMode.ABSOLUTE)
    assert suffixes.options == "indent=2"


def test_split_suffixes_keeps_nested_character_braces() -> None:
    suffixes = split_suffixes("{1,2:{3-13|17-17},3}")

    assert suffixes.highlight is not None
    assert suffixes.highlight.body == "1,2:{3-13|17-17},3"
    assert suffixes.visual is None
    assert suffixes.options is None


def test_split_suffixes_empty() -> None:
    suffixes = split_suffixes("")

    assert suffixes.highlight is None
    assert suffixes.visual is None
    assert suffixes.options is None


@pytest.mark.parametrize("suffix", ["{1}{2}", "{1", "<2-3", "trailing words", "x{1}"])
def test_split_suffixes_rejects_malformed_text(suffix: str) -> None:
    with pytest.raises(SnippetParseError):
        split_suffixes(suffix)


def test_parse_highlights_preserves_order() -> None:
    highlights = parse_highlights(SelectorSource("4,1-2"))

    assert highlights.items == (LineNumber(4), LineRange(1, 2))
    assert highlights.marks_line(1)
    assert highlights.marks_line(2)
    assert not highlights.marks_line(3)
    assert highlights.marks_line(4)


def test_parse_character_ranges_with_and_without_braces() -> None:
    braced = parse_block("2:{3-13|17-17}")
    bare = parse_block("2:3-13|17-17")

    assert braced == [CharRange(2, 3, 13), CharRange(2, 17, 17)]
    assert bare == braced


def test_relative_addressing_offsets_from_block_start() -> None:
    base = LineRange(10, 20)
    source = SelectorSource("1,2-3,4:5-6", AddressingMode.RELATIVE)

    highlights = parse_highlights(source, base)

    assert highlights.items == (LineNumber(10), LineRange(11, 12), CharRange(13, 5, 6))


@pytest.mark.parametrize("value", [1, 3, 7])
def test_relative_matches_equivalent_absolute(value: int) -> None:
    base = LineRange(5, 12)
    relative = parse_highlights(SelectorSource(str(value), AddressingMode.RELATIVE), base)
    absolute = parse_highlights(SelectorSource(str(base.start + value - 1)), base)

    assert relative == absolute


def test_relative_addressing_requires_block() -> None:
    with pytest.raises(SnippetParseError):
        parse_highlights(SelectorSource("2", AddressingMode.RELATIVE))


@pytest.mark.parametrize(
    "body", ["1-x", "a", "1,,2", "2:3", "2:x-4", "5-3", "0", "0-2", "0:1-2"]
)
def test_malformed_blocks_fail_the_whole_selector(body: str) -> None:
    with pytest.raises(SnippetParseError):
        parse_highlights(SelectorSource(body))


def test_parse_visuals_reads_modification_kinds(emitter) -> None:
    visuals = parse_visuals(SelectorSource("d2-3,h5,r7,1:2-4"), emitter=emitter)

    assert visuals.items == (
        VisualModification(LineRange(2, 3), VisualKind.ELLIPSIS),
        VisualModification(LineNumber(5), VisualKind.HIDE),
        VisualModification(LineNumber(7), VisualKind.REMOVE),
        VisualModification(CharRange(1, 2, 4), VisualKind.HIDE),
    )
    assert len(emitter.warnings) == 1
    assert "defaulting to hiding" in emitter.warnings[0]


def test_visual_first_match_wins() -> None:
    visuals = parse_visuals(SelectorSource("r3,d2-4"))

    first = visuals.first_match(3)
    assert first is not None
    assert first.kind is VisualKind.REMOVE
    second = visuals.first_match(4)
    assert second is not None
    assert second.kind is VisualKind.ELLIPSIS
    assert visuals.first_match(9) is None


def test_relative_visuals() -> None:
    visuals = parse_visuals(
        SelectorSource("d2-3", AddressingMode.RELATIVE),
        LineRange(6, 9),
    )

    assert visuals.items == (VisualModification(LineRange(7, 8), VisualKind.ELLIPSIS),)


def test_read_highlights_defers_relative_mapping() -> None:
    unresolved = read_highlights(SelectorSource("2,1:3-4", AddressingMode.RELATIVE))

    assert unresolved.items == (LineNumber(2), CharRange(1, 3, 4))
    assert unresolved.to_absolute(LineRange(10, 12)).items == (
        LineNumber(11),
        CharRange(10, 3, 4),
    )


def test_read_visuals_keeps_absolute_selectors_as_is() -> None:
    visuals = read_visuals(SelectorSource("d2-3"))

    assert visuals.to_absolute(None) is visuals
