import pytest

from container_browser.viewport import Window, next_window, visible_slice


@pytest.mark.parametrize("selected", [0, 3, 7, 50])
def test_everything_fits(selected):
    assert next_window(Window(2, 5), selected, 8, 10) == Window(0, 8)


def test_negative_height_shows_nothing():
    assert next_window(Window(0, 10), 5, 100, -1) == Window(0, 0)


def test_snap_to_start():
    assert next_window(Window(40, 50), 0, 100, 10) == Window(0, 10)


def test_snap_to_end():
    assert next_window(Window(0, 10), 99, 100, 10) == Window(90, 100)


def test_single_step_down():
    assert next_window(Window(5, 15), 15, 100, 10) == Window(6, 16)


def test_single_step_up():
    assert next_window(Window(6, 16), 6, 100, 10) == Window(5, 15)


def test_selection_inside_window_keeps_window():
    assert next_window(Window(5, 15), 9, 100, 10) == Window(5, 15)


def test_jump_down_ends_window_at_selection():
    assert next_window(Window(0, 10), 40, 100, 10) == Window(30, 40)


def test_jump_down_then_next_render_scrolls_selection_into_view():
    window = next_window(Window(0, 10), 40, 100, 10)

    assert next_window(window, 40, 100, 10) == Window(31, 41)


def test_selection_above_window_retreats_by_one():
    assert next_window(Window(50, 60), 20, 100, 10) == Window(49, 59)


def test_stale_window_is_clamped_after_rows_disappear():
    window = next_window(Window(90, 100), 30, 40, 10)

    assert 0 <= window.start <= window.end <= 40
    assert len(window) == 10


def test_window_grows_from_full_fit():
    # --- Previous render had everything on screen, now there are more rows than room
    window = next_window(Window(0, 5), 2, 30, 10)

    assert window == Window(0, 10)


def test_scrolling_down_one_by_one_keeps_selection_visible():
    window = Window()
    for selected in range(100):
        window = next_window(window, selected, 100, 10)
        assert window.start <= selected < window.end
        assert len(window) == 10


def test_visible_slice():
    rows = list(range(20))

    assert visible_slice(rows, Window(3, 6)) == [3, 4, 5]
