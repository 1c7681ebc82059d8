"""Terminal colours and a small text table for the findings report."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from .statistics import Statistics

COLOR_RED = "\x1b[91m"
COLOR_GREEN = "\x1b[32m"
COLOR_BLUE = "\x1b[94m"
COLOR_GRAY = "\x1b[90m"
COLOR_YELLOW = "\x1b[33m"
COLOR_WHITE = "\x1b[37m"

_ANSI = re.compile(r"\x1b\[[0-9;]*m")
_DIVIDER = "\u2500"


class Align(IntEnum):
    DEFAULT = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3


@dataclass(frozen=True)
class CellData:
    """What a cell shows before it is coloured."""

    text: str = ""
    color: str = ""
    align: Align = Align.DEFAULT
    span: int = 0


@dataclass(frozen=True)
class Cell:
    text: str = ""
    span: int = 0
    align: Align = Align.DEFAULT


def _visible_len(text: str) -> int:
    return len(_ANSI.sub("", text))


def _pad(text: str, width: int, align: Align) -> str:
    extra = max(width - _visible_len(text), 0)
    if align == Align.RIGHT:
        return " " * extra + text
    if align == Align.CENTER:
        left = extra // 2
        return " " * left + text + " " * (extra - left)
    return text + " " * extra


def _placed(row: Iterable[Cell]) -> Iterator[tuple[int, int, Cell]]:
    """Yield each cell with its first column and the number of columns it spans."""
    column = 0
    for cell in row:
        span = max(cell.span, 1)
        yield column, span, cell
        column += span


def _span_width(widths: list[int], start: int, span: int) -> int:
    return sum(widths[start : start + span]) + 3 * (span - 1)


@dataclass
class Table:
    """A table with an optional header row, body rows and an optional footer row."""

    header: list[Cell] = field(default_factory=list)
    body: list[list[Cell]] = field(default_factory=list)
    footer: list[Cell] = field(default_factory=list)

    def _rows(self) -> list[list[Cell]]:
        return [row for row in (self.header, *self.body, self.footer) if row]

    def _widths(self) -> list[int]:
        rows = self._rows()
        columns = max((sum(max(c.span, 1) for c in row) for row in rows), default=0)
        widths = [0] * columns
        for row in rows:
            for start, span, cell in _placed(row):
                if span == 1:
                    widths[start] = max(widths[start], _visible_len(cell.text))
        for row in rows:
            for start, span, cell in _placed(row):
                if span > 1:
                    missing = _visible_len(cell.text) - _span_width(widths, start, span)
                    if missing > 0:
                        widths[start + span - 1] += missing
        return widths

    @staticmethod
    def _line(row: list[Cell], widths: list[int]) -> str:
        parts = []
        last = 0
        for start, span, cell in _placed(row):
            width = _span_width(widths, start, span)
            parts.append(" " + _pad(cell.text, width, cell.align) + " ")
            last = start + span
        parts.extend(" " * (w + 2) for w in widths[last:])
        return " ".join(parts)

    def render(self) -> str:
        """The table as text, one line per row, sections separated by dividers."""
        widths = self._widths()
        if not widths:
            return ""
        sections = []
        if self.header:
            sections.append([self._line(self.header, widths)])
        if self.body:
            sections.append([self._line(row, widths) for row in self.body])
        if self.footer:
            sections.append([self._line(self.footer, widths)])
        divider = " ".join(_DIVIDER * (w + 2) for w in widths)
        lines: list[str] = []
        for section in sections:
            if lines:
                lines.append(divider)
            lines.extend(section)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def _cell(data: CellData) -> Cell:
    color = data.color or COLOR_BLUE
    return Cell(text=color + data.text, span=data.span, align=data.align)


def _header_cell(data: CellData) -> Cell:
    return _cell(CellData(text=data.text, color=COLOR_GRAY, align=Align.CENTER, span=data.span))


def create_header(titles: Iterable[str]) -> list[Cell]:
    return [_header_cell(CellData(text=title)) for title in titles]


def create_footer(statistics: Statistics, columns_count: int) -> list[Cell]:
    text = (
        f"Total Passed Rules: {statistics.passed} out of "
        f"{statistics.failed + statistics.passed}"
    )
    return [_cell(CellData(text=text, color=COLOR_WHITE, align=Align.LEFT, span=columns_count))]


def create_body_row(cells_data: Iterable[CellData]) -> list[Cell]:
    return [_cell(data) for data in cells_data]