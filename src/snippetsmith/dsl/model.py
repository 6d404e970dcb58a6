"""Typed selector items and visual modifications used by the snippet DSL."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.exceptions import SnippetParseError


@dataclass(frozen=True, slots=True)
class LineNumber:
    """A single 1-based line."""

    line: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise SnippetParseError(f"Line number {self.line} is out of range; lines start at 1.")

    def contains(self, line: int) -> bool:
        return line == self.line


@dataclass(frozen=True, slots=True)
class LineRange:
    """An inclusive, 1-based span of lines."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            msg = f"Line range {self.start}-{self.end} is out of range; lines start at 1."
            raise SnippetParseError(msg)
        if self.start > self.end:
            msg = f"Line range {self.start}-{self.end} ends before it starts."
            raise SnippetParseError(msg)

    def contains(self, line: int) -> bool:
        return self.start <= line <= self.end

    def __len__(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True, slots=True)
class CharRange:
    """Inclusive, 1-based columns ``start..end`` on a single line."""

    line: int
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.line < 1 or self.start < 1 or self.start > self.end:
            msg = f"Character range {self.start}-{self.end} on line {self.line} is invalid."
            raise SnippetParseError(msg)

    def contains(self, line: int) -> bool:
        return line == self.line


SelectorItem = LineNumber | LineRange | CharRange


class AddressingMode(Enum):
    """How selector line numbers are interpreted."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"

    def to_absolute(self, value: int, base: LineRange | None) -> int:
        """Map a selector line number onto a file line number."""
        if self is AddressingMode.ABSOLUTE:
            return value
        if base is None:
            raise SnippetParseError("Relative selectors need a resolved code block.")
        # Relative line 1 is the first line of the block.
        return base.start + value - 1

    def resolve(self, item: SelectorItem, base: LineRange | None) -> SelectorItem:
        """Return ``item`` with its line numbers mapped onto file line numbers."""
        if self is AddressingMode.ABSOLUTE:
            return item
        match item:
            case LineNumber(line=line):
                return LineNumber(self.to_absolute(line, base))
            case LineRange(start=start, end=end):
                return LineRange(self.to_absolute(start, base), self.to_absolute(end, base))
            case CharRange(line=line, start=start, end=end):
                return CharRange(self.to_absolute(line, base), start, end)


class VisualKind(Enum):
    """Visual modification applied to the lines matched by a selector item."""

    ELLIPSIS = "d"
    HIDE = "h"
    REMOVE = "r"


@dataclass(frozen=True, slots=True)
class VisualModification:
    """A selector item paired with the edit applied to the lines it matches."""

    item: SelectorItem
    kind: VisualKind


@dataclass(frozen=True, slots=True)
class Highlights:
    """Ordered highlight selector.

    Items keep the line numbers written in the command until
    :meth:`to_absolute` maps them onto the resolved code block.
    """

    items: tuple[SelectorItem, ...] = ()
    mode: AddressingMode = AddressingMode.ABSOLUTE

    def __bool__(self) -> bool:
        return bool(self.items)

    def to_absolute(self, base: LineRange | None) -> Highlights:
        if self.mode is AddressingMode.ABSOLUTE:
            return self
        return Highlights(tuple(self.mode.resolve(item, base) for item in self.items))

    def char_ranges(self, line: int) -> list[CharRange]:
        """Return the character ranges declared for ``line`` in selector order."""
        ranges: list[CharRange] = []
        for item in self.items:
            match item:
                case CharRange():
                    if item.contains(line):
                        ranges.append(item)
                case LineNumber() | LineRange():
                    pass
        return ranges

    def marks_line(self, line: int) -> bool:
        """Return whether a whole-line item selects ``line``."""
        for item in self.items:
            match item:
                case LineNumber() | LineRange():
                    if item.contains(line):
                        return True
                case CharRange():
                    pass
        return False


@dataclass(frozen=True, slots=True)
class VisualModifications:
    """Ordered visual selector; the first matching entry wins."""

    items: tuple[VisualModification, ...] = ()
    mode: AddressingMode = AddressingMode.ABSOLUTE

    def __bool__(self) -> bool:
        return bool(self.items)

    def to_absolute(self, base: LineRange | None) -> VisualModifications:
        if self.mode is AddressingMode.ABSOLUTE:
            return self
        return VisualModifications(
            tuple(
                VisualModification(self.mode.resolve(modification.item, base), modification.kind)
                for modification in self.items
            )
        )

    def first_match(self, line: int) -> VisualModification | None:
        for modification in self.items:
            if modification.item.contains(line):
                return modification
        return None


__all__ = [
    "AddressingMode",
    "CharRange",
    "Highlights",
    "LineNumber",
    "LineRange",
    "SelectorItem",
    "VisualKind",
    "VisualModification",
    "VisualModifications",
]
