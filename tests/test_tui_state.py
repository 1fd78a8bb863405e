from container_browser.tui_state        import Cursor, TUITheme
from container_browser.widget_registry  import WidgetRegistry


def test_cursor_stays_in_bounds():
    cursor = Cursor()

    assert cursor.move(-1, 10) == 0
    assert cursor.move(25, 10) == 10
    assert cursor.move(-3, 10) == 7


def test_cursor_home_end_reset():
    cursor = Cursor(4)

    cursor.end(12)
    assert cursor.position() == 12
    cursor.home()
    assert cursor.position() == 0
    cursor.end(-1)
    assert cursor.position() == 0
    cursor.move(3, 5)
    cursor.reset()
    assert cursor.position() == 0


def test_theme_attr_for_unknown_style():
    theme = TUITheme(header=7)

    assert theme.attr("header") == 7
    assert theme.attr("no-such-style") == 0


def test_registry():
    registry = WidgetRegistry()
    first, second = object(), object()

    registry.register("containers", first)
    registry.register("containers", second)
    registry.register("images", first)

    assert registry.get("containers") is second
    assert sorted(registry.sources()) == ["containers", "images"]

    registry.unregister("images")
    registry.unregister("images")
    assert registry.get("images") is None
