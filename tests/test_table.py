import re

from chainbench.statistics import Statistics
from chainbench.table import (
    COLOR_BLUE,
    COLOR_GRAY,
    COLOR_RED,
    COLOR_WHITE,
    Align,
    Cell,
    CellData,
    Table,
    create_body_row,
    create_footer,
    create_header,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text):
    return _ANSI.sub("", text)


def test_cell_colors_are_ansi_prefixes():
    row = create_body_row([CellData(text="x", color=COLOR_RED), CellData(text="y")])
    assert row[0].text == "\x1b[91mx"
    assert row[1].text == "\x1b[94my"


def test_create_header_uses_gray_centered_cells():
    header = create_header(["ID", "Name"])
    assert header == [
        Cell(text=COLOR_GRAY + "ID", align=Align.CENTER),
        Cell(text=COLOR_GRAY + "Name", align=Align.CENTER),
    ]


def test_create_body_row_defaults_to_blue():
    row = create_body_row([CellData(text="1.1.3"), CellData(text="Failed", color=COLOR_RED)])
    assert row[0].text == COLOR_BLUE + "1.1.3"
    assert row[1].text == COLOR_RED + "Failed"


def test_create_footer_reports_passed_out_of_decided():
    s = Statistics(passed=2, failed=1, unknown=4, total=7)
    footer = create_footer(s, 4)
    assert len(footer) == 1
    assert footer[0].text == COLOR_WHITE + "Total Passed Rules: 2 out of 3"
    assert footer[0].span == 4
    assert footer[0].align == Align.LEFT


def test_render_contains_all_texts_and_aligned_lines():
    table = Table(
        header=create_header(["ID", "Name", "Result", "Reason"]),
        body=[
            create_body_row([CellData(text="1.1.3"), CellData(text="A"), CellData(text="Passed"), CellData()]),
            create_body_row([CellData(text="1.1.10"), CellData(text="Longer name"), CellData(text="Failed"), CellData(text="why")]),
        ],
        footer=create_footer(Statistics(passed=1, failed=1, total=2), 4),
    )
    text = table.render()
    plain = _plain(text)
    for word in ["ID", "Name", "1.1.10", "Longer name", "why", "Total Passed Rules: 1 out of 2"]:
        assert word in plain
    widths = {len(line) for line in plain.splitlines()}
    assert len(widths) == 1


def test_render_widens_for_long_spanning_cell():
    footer = create_footer(Statistics(), 2)
    table = Table(header=create_header(["a", "b"]), footer=footer)
    lines = _plain(table.render()).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert "Total Passed Rules: 0 out of 0" in lines[-1]


def test_render_of_empty_table_is_empty():
    assert Table().render() == ""


def test_short_rows_are_padded():
    table = Table(header=create_header(["x", "y", "z"]), body=[create_body_row([CellData(text="only")])])
    lines = _plain(str(table)).splitlines()
    assert len({len(line) for line in lines}) == 1
    assert "only" in lines[-1]