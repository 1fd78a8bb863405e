"""
Filename:       containers_browser.py
Author:         jole
Created:        19.10.2026

Description:    Holds class definitions for ContainersBrowser along with attributes and methods.

Notes:
    - Three parties touch the widget: the main loop rendering it, the same loop handling keys, and a background
      thread reloading the containers. The widget's lock orders them.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses
import logging
import sys
import threading

from typing     import Optional

# --- Project defined
from .containers_widget import ContainersWidget, EmptyCollectionError
from .defs              import (CONTAINER_SOURCE, NAVIGATION_KEYS, ENTER_KEYS, DEFAULT_REFRESH_SECONDS,
                                WIDGET_HEADER_HEIGHT, TABLE_HEADER_HEIGHT, HELPBAR_HEIGHT)
from .docker_api        import DockerDaemon, DataFetchFailedError
from .draw_tui          import DrawTUI
from .log_setup         import get_logger, curses_owns_stdout
from .tui_state         import Cursor, TUITheme
from .widget_registry   import WidgetRegistry
# --- END OF Import section --------------------------------------------------------------------------------------------



class ContainersBrowser:
    """
    ContainersBrowser keeps everything together!

    Application execution steps:
        - Load the containers from the Docker daemon.
        - Display them in a ContainersWidget, re-rendered periodically and after every key.
        - Reload the containers in the background every refresh interval.
        - Run the loop, catching users input and act appropriately.
    """

    def __init__(self,
                 _daemon:           DockerDaemon,
                 *,
                 _show_all:         bool                        = False,
                 _initial_filter:   Optional[str]               = None,
                 _refresh:          float                       = DEFAULT_REFRESH_SECONDS,
                 _logger:           Optional[logging.Logger]    = None
                 ) -> None:

        self.daemon                 = _daemon
        self.logger                 = _logger or get_logger()
        self.refresh                = _refresh
        self.cursor                 = Cursor()
        self.registry               = WidgetRegistry()
        self.theme: TUITheme        = TUITheme()
        self.draw: DrawTUI          = DrawTUI()

        # --- Shown in the help bar instead of the key help, cleared on the next key
        self.message: str           = ""

        self.widget = ContainersWidget(self.daemon,
                                       self.cursor,
                                       _y           = 0,
                                       _registry    = self.registry,
                                       _show_all    = _show_all,
                                       _logger      = self.logger)
        if _initial_filter:
            self.widget.filter(_initial_filter)

        self._stop = threading.Event()
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def _refresh_loop(self) -> None:
        """
        Background thread: reloads the containers every self.refresh seconds until told to stop.
        """

        while not self._stop.wait(self.refresh):
            try:
                self.widget.remount()
            except DataFetchFailedError as e:
                self.logger.warning(f"ContainersBrowser._refresh_loop(): refresh failed: {e}")
    # --- END OF _refresh_loop() ---------------------------------------------------------------------------------------



    def _layout(self, _stdscr) -> None:
        """
        Fits the widget to the current terminal size. The rows get what is left after the title line, the table
        header and the help bar.
        """

        max_y, max_x = _stdscr.getmaxyx()
        rows_height = max_y - WIDGET_HEADER_HEIGHT - TABLE_HEADER_HEIGHT - HELPBAR_HEIGHT
        self.widget.resize(0, 0, max(0, max_x - 1), rows_height)
    # --- END OF _layout() ---------------------------------------------------------------------------------------------



    def _get_input(self, _stdscr, _prompt: str, _initial: str = "") -> Optional[str]:
        """
        Get editable input from the user on the bottom line, with an initial value pre-filled.

        :param _stdscr:  Where to print
        :param _prompt:  Prompt shown before the text
        :param _initial: Initial text to prefill (e.g., current filter)

        :return:        The entered text, or None if the user hit [ESC]
        """
        curses.curs_set(1)
        _stdscr.timeout(-1)

        buffer: list[str]   = list(_initial)
        cursor: int         = len(buffer)
        result: Optional[str] = None

        while True:
            max_y, max_x    = _stdscr.getmaxyx()
            visible_width   = max_x - 1
            text_space      = max(5, visible_width - len(_prompt))

            # --- Keep the cursor visible by scrolling the text, not the prompt
            scroll          = max(0, cursor - text_space + 1)
            line            = (_prompt + "".join(buffer)[scroll:scroll + text_space])[:visible_width]

            _stdscr.move(max_y - 1, 0)
            _stdscr.clrtoeol()
            _stdscr.addnstr(max_y - 1, 0, line, visible_width, self.theme.reversed | self.theme.filtered)
            _stdscr.move(max_y - 1, max(0, min(len(_prompt) + cursor - scroll, visible_width - 1)))

            ch = _stdscr.getch()
            match ch:
                case 10 | 13 | curses.KEY_ENTER:
                    result = "".join(buffer).strip()
                    break

                case 27:
                    break

                case 8 | 127 | curses.KEY_BACKSPACE:
                    if cursor > 0:
                        cursor -= 1
                        buffer.pop(cursor)

                case curses.KEY_DC:
                    if cursor < len(buffer):
                        buffer.pop(cursor)

                case curses.KEY_LEFT:
                    cursor = max(0, cursor - 1)
                case curses.KEY_RIGHT:
                    cursor = min(len(buffer), cursor + 1)

                case curses.KEY_HOME:
                    cursor = 0
                case curses.KEY_END:
                    cursor = len(buffer)

                # Printable ASCII
                case c if 32 <= c <= 126:
                    buffer.insert(cursor, chr(c))
                    cursor += 1

                # Ignore everything else
                case _:
                    pass

        curses.curs_set(0)
        return result
    # --- END OF _get_input() ------------------------------------------------------------------------------------------



    def _navigate(self, _key: int) -> None:
        """
        Moves the cursor for the navigation keys: up/down arrows, page up/down, home/end. The cursor never goes past
        the last row the filter lets through.

        :param _key:    The curses.KEY_xxx to handle

        :return:        None
        """

        last = max(0, self.widget.filtered_count() - 1)
        page = max(1, self.widget.height)

        match _key:
            case curses.KEY_UP:
                self.cursor.move(-1, last)
            case curses.KEY_DOWN:
                self.cursor.move(1, last)
            case curses.KEY_NPAGE:
                self.cursor.move(page, last)
            case curses.KEY_PPAGE:
                self.cursor.move(-page, last)
            case curses.KEY_HOME:
                self.cursor.home()
            case curses.KEY_END:
                self.cursor.end(last)
            case _:
                pass
    # --- END OF _navigate() -------------------------------------------------------------------------------------------



    def _inspect_selected(self, _stdscr) -> None:
        """
        Enter key: inspects the selected container of whichever widget shows containers.
        """

        widget = self.registry.get(CONTAINER_SOURCE)
        if widget is None:
            return
        try:
            details = widget.dispatch(self.daemon.inspect)
        except EmptyCollectionError as e:
            self.message = str(e)
            return
        except DataFetchFailedError as e:
            self.logger.warning(f"ContainersBrowser._inspect_selected(): {e}")
            self.message = f"Inspect failed: {e}"
            return
        self.draw.show_details(_stdscr, self.theme, details)
    # --- END OF _inspect_selected() -----------------------------------------------------------------------------------



    def _reload(self) -> None:
        try:
            self.widget.remount()
        except DataFetchFailedError as e:
            self.logger.warning(f"ContainersBrowser._reload(): {e}")
            self.message = f"Refresh failed: {e}"
    # --- END OF _reload() ---------------------------------------------------------------------------------------------



    def _curses_main(self, _stdscr) -> None:
        """
        This constitutes the main loop of the application. getch() times out once a second so the screen is
        re-rendered even when no key is hit, picking up the background refreshes.
        """

        self.theme = TUITheme.init_theme()
        _stdscr.keypad(True)

        quit: bool = False
        while not quit:
            self._layout(_stdscr)

            buf = self.widget.render()
            self.draw.clear_screen(_stdscr)
            self.draw.draw_buffer(_stdscr, buf, self.theme)
            self.draw.draw_helpbar(_stdscr,
                                   self.theme,
                                   self.widget.selected_index,
                                   self.widget.filtered_count(),
                                   self.message)
            _stdscr.refresh()

            _stdscr.timeout(1000)
            key = _stdscr.getch()
            if key == -1:
                continue
            self.message = ""

            match key:
                case key if key in NAVIGATION_KEYS:
                    self._navigate(key)

                case key if key in ENTER_KEYS:
                    self._inspect_selected(_stdscr)

                # --- Rotate the sort column
                case c if c in (curses.KEY_F1, ord('s')):
                    self.widget.sort()

                # --- Apply user filter, prefilled with the current one
                case c if c == ord('/'):
                    new_filter = self._get_input(_stdscr, "/ ", _initial = self.widget.filter_pattern)
                    if new_filter is not None:
                        self.widget.filter(new_filter)
                        self.cursor.reset()

                # --- Clear the filter
                case c if c == ord('C'):
                    self.widget.filter("")
                    self.cursor.reset()

                # --- Show all / running containers
                case c if c == ord('%'):
                    self.widget.toggle_show_all()
                    self.cursor.reset()
                    self._reload()

                case c if c in (curses.KEY_F5, ord('r')):
                    self._reload()

                # --- Show help
                case c if c == ord('?'):
                    self.draw.show_help(_stdscr, self.theme)

                # --- Quit the script and return to terminal
                case c if c in (ord('q'), ord('Q')):
                    quit = True

                case curses.KEY_RESIZE:
                    pass

                # --- Any other key we'll just pass
                case _:
                    pass
            # --- END OF match key -------------------------------------------------------------------------------------
        # --- END OF while not quit ------------------------------------------------------------------------------------
    # --- END OF _curses_main() ----------------------------------------------------------------------------------------



    def run(self) -> int:
        """
        Starting point for the application.

        :return: Exit status for the shell
        """

        try:
            self.widget.mount()
        except DataFetchFailedError as e:
            print(e, file = sys.stderr)
            if e.errors:
                print("Errors:", file = sys.stderr)
                for line in e.errors:
                    print(f"  - {line}", file = sys.stderr)
            return 1

        refresher: Optional[threading.Thread] = None
        if self.refresh > 0:
            refresher = threading.Thread(target = self._refresh_loop, name = "container-refresh", daemon = True)
            refresher.start()

        try:
            with curses_owns_stdout(self.logger):
                curses.wrapper(self._curses_main)
        finally:
            self._stop.set()
            if refresher is not None:
                refresher.join(timeout = 1)
        return 0
    # --- END OF run() -------------------------------------------------------------------------------------------------

# --- END OF class ContainersBrowser -----------------------------------------------------------------------------------
