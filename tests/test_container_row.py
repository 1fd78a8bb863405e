from container_browser.container_row    import ContainerRow
from container_browser.defs             import (RUNNING_GLYPH, STOPPED_GLYPH, STYLE_HIGHLIGHT, STYLE_RUNNING,
                                                STYLE_STOPPED, STYLE_NORMAL)
from container_browser.table_header     import TableHeader

from conftest import make_container


def _row(_container, _width=100):
    header = TableHeader()
    header.set_width(_width)
    row = ContainerRow(_container, header)
    row.set_width(_width)
    return row


def test_fields_follow_header_order():
    row = _row(make_container(7, "api", _image="python:3.12", _status="Exited (0)", _state="exited"))

    assert list(row.fields) == ["", "CONTAINER", "IMAGE", "COMMAND", "STATUS", "PORTS", "NAMES"]
    assert row.field("") == STOPPED_GLYPH
    assert row.field("CONTAINER") == "000000000007"
    assert row.field("IMAGE") == "python:3.12"
    assert row.field("STATUS") == "Exited (0)"
    assert row.field("NAMES") == "api"
    assert row.field("UNKNOWN") == ""
    assert row.id == make_container(7).id


def test_highlight_toggles_flag_only():
    row = _row(make_container(1))
    fields = dict(row.fields)

    row.highlight(True)
    assert row.highlighted
    row.highlight(False)
    assert not row.highlighted
    assert row.fields == fields


def test_buffer_styles():
    row = _row(make_container(1))
    row.set_y(4)

    plain = row.buffer()
    assert plain.cells[(0, 4)].ch == RUNNING_GLYPH
    assert plain.cells[(0, 4)].style == STYLE_RUNNING
    assert plain.cells[(3, 4)].style == STYLE_NORMAL

    row.highlight(True)
    lit = row.buffer()
    assert all(lit.cells[(x, 4)].style == STYLE_HIGHLIGHT for x in range(100))


def test_stopped_indicator_style():
    row = _row(make_container(1, _state="exited"))

    assert row.buffer().cells[(0, 0)].style == STYLE_STOPPED


def test_long_values_are_clipped_to_column():
    row = _row(make_container(1, "a-really-long-container-name-that-does-not-fit"), _width=60)

    x, w = row.header.column_layout()[-1]
    line = row.buffer().line(0)

    assert len(line) <= x + w
