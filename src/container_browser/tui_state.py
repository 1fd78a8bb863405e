"""
Filename:       tui_state.py
Author:         jole
Created:        19.10.2026
Description:    State shared between the input handling and the drawing: the selection cursor and the colour theme.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses
import threading

from dataclasses import dataclass
# --- END OF Import section --------------------------------------------------------------------------------------------



class Cursor:
    """
        Keeps tabs on the selected position in the list. The input path moves it, the widgets only read it. Both
    happen on different threads, so every access goes through a lock.
    """

    def __init__(self, _position: int = 0) -> None:
        self._position  = max(0, _position)
        self._lock      = threading.Lock()
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def position(self) -> int:
        with self._lock:
            return self._position



    def move(self, _delta: int, _max_index: int) -> int:
        """
        Moves the cursor _delta rows, staying inside [0, _max_index].

        :return:    The new position
        """
        with self._lock:
            self._position = max(0, min(self._position + _delta, _max_index))
            return self._position
    # --- END OF move() ------------------------------------------------------------------------------------------------



    def home(self) -> None:
        with self._lock:
            self._position = 0



    def end(self, _max_index: int) -> None:
        with self._lock:
            self._position = max(0, _max_index)



    def reset(self) -> None:
        self.home()

# --- END OF class Cursor ----------------------------------------------------------------------------------------------



@dataclass()
class TUITheme:
    title:      int = 0
    header:     int = 0
    help_bar:   int = 0
    highlight:  int = curses.A_REVERSE
    running:    int = 0
    stopped:    int = 0
    none:       int = 0
    filtered:   int = 0
    reversed:   int = curses.A_REVERSE

    def attr(self, _style: str) -> int:
        """
        The curses attribute for one of the defs.STYLE_* names, 0 for unknown styles.
        """
        return getattr(self, _style, 0)

    @staticmethod
    def init_theme() -> "TUITheme":

        if not curses.has_colors():
            return TUITheme(title = curses.A_BOLD, header = curses.A_BOLD | curses.A_UNDERLINE)

        curses.start_color()
        curses.use_default_colors()
        curses.curs_set(0)

        curses.init_pair(1, curses.COLOR_YELLOW, -1)                # title
        curses.init_pair(2, curses.COLOR_CYAN, -1)                  # header
        curses.init_pair(3, curses.COLOR_BLACK, curses.COLOR_WHITE) # help bar
        curses.init_pair(4, curses.COLOR_GREEN, -1)                 # running
        curses.init_pair(5, curses.COLOR_RED, -1)                   # not running
        curses.init_pair(6, curses.COLOR_WHITE, -1)                 # none
        curses.init_pair(7, curses.COLOR_CYAN, -1)                  # active filter
        curses.init_pair(8, curses.COLOR_BLACK, curses.COLOR_CYAN)  # selected row

        return TUITheme(
            title       = curses.A_BOLD | curses.color_pair(1),
            header      = curses.A_BOLD | curses.color_pair(2),
            help_bar    = curses.color_pair(3),
            highlight   = curses.color_pair(8),
            running     = curses.color_pair(4),
            stopped     = curses.color_pair(5),
            none        = curses.color_pair(6),
            filtered    = curses.A_BOLD | curses.color_pair(7)
            )
    # --- END OF init_theme() ------------------------------------------------------------------------------------------
# --- END OF class TUITheme --------------------------------------------------------------------------------------------
