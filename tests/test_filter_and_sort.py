from container_browser.container_row    import ContainerRow
from container_browser.defs             import SortMode, SORT_ROTATION
from container_browser.filter_and_sort  import FilterAndSort
from container_browser.table_header     import TableHeader

from conftest import make_container


def _rows(*_containers):
    header = TableHeader()
    return [ContainerRow(c, header) for c in _containers]


def _names(_rows):
    return [r.field("NAMES") for r in _rows]


def test_empty_pattern_keeps_every_row():
    rows = _rows(make_container(1, "db"), make_container(2, "web"), make_container(3, "cache"))

    assert FilterAndSort.apply(rows, "") == rows


def test_filter_keeps_matching_rows_in_order():
    rows = _rows(make_container(1, "web-a"), make_container(2, "db"), make_container(3, "my-web"))

    filtered = FilterAndSort.apply(rows, "web")

    assert _names(filtered) == ["web-a", "my-web"]
    assert all("web" in n for n in _names(filtered))


def test_filter_is_case_sensitive():
    rows = _rows(make_container(1, "Web"), make_container(2, "web"))

    assert _names(FilterAndSort.apply(rows, "web")) == ["web"]


def test_filter_without_match_is_empty():
    rows = _rows(make_container(1, "db"))

    assert FilterAndSort.apply(rows, "nope") == []


def test_filter_does_not_touch_input():
    rows = _rows(make_container(1, "db"), make_container(2, "web"))
    before = list(rows)

    FilterAndSort.apply(rows, "web")

    assert rows == before


def test_no_sort_is_identity():
    rows = _rows(make_container(3, "c"), make_container(1, "a"), make_container(2, "b"))

    assert FilterAndSort.sort(rows, SortMode.NO_SORT) == rows


def test_sort_by_name():
    rows = _rows(make_container(1, "zeta"), make_container(2, "alpha"), make_container(3, "mid"))

    assert _names(FilterAndSort.sort(rows, SortMode.BY_NAME)) == ["alpha", "mid", "zeta"]


def test_sort_by_id_uses_short_id():
    rows = _rows(make_container(30), make_container(4), make_container(100))

    ids = [r.field("CONTAINER") for r in FilterAndSort.sort(rows, SortMode.BY_ID)]

    assert ids == ["000000000004", "000000000030", "000000000100"]


def test_sort_is_stable_for_equal_keys():
    rows = _rows(make_container(1, "c", _image="redis"),
                 make_container(2, "a", _image="nginx"),
                 make_container(3, "b", _image="redis"),
                 make_container(4, "d", _image="nginx"))

    once  = FilterAndSort.sort(rows, SortMode.BY_IMAGE)
    twice = FilterAndSort.sort(once, SortMode.BY_IMAGE)

    assert _names(once) == ["a", "d", "c", "b"]
    assert twice == once


def test_rotation_cycles_through_four_modes():
    mode = SortMode.BY_ID
    seen = []
    for _ in range(4):
        mode = FilterAndSort.rotate(mode)
        seen.append(mode)

    assert seen == [SortMode.BY_IMAGE, SortMode.BY_STATUS, SortMode.BY_NAME, SortMode.BY_ID]


def test_rotation_never_yields_no_sort():
    for mode in SortMode:
        assert FilterAndSort.rotate(mode) is not SortMode.NO_SORT


def test_rotation_from_no_sort_enters_cycle():
    assert FilterAndSort.rotate(SortMode.NO_SORT) is SORT_ROTATION[0]
