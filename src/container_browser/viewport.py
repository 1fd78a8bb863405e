"""
Filename:       viewport.py
Author:         jole
Created:        19.10.2026

Description:    Works out which slice of the (filtered and sorted) rows fits on screen.

Notes:
    - Single steps move the window by one row, so the list does not jump around while the user scrolls. Only
      larger moves of the selection reposition the window.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from dataclasses    import dataclass
from typing         import List, Sequence, TypeVar
# --- END OF Import section --------------------------------------------------------------------------------------------



T = TypeVar("T")



@dataclass(frozen=True)
class Window:
    start:  int = 0
    end:    int = 0     # exclusive

    def __len__(self) -> int:
        return self.end - self.start
# --- END OF class Window ----------------------------------------------------------------------------------------------



def next_window(_prev: Window, _selected: int, _total: int, _height: int) -> Window:
    """
    Computes the window to show given the one shown last time and the selection.

    :param _prev:       Window from the previous render
    :param _selected:   Index of the selected row in the filtered and sorted rows
    :param _total:      Number of filtered and sorted rows
    :param _height:     Number of rows the screen has room for

    :return:            The new window, 0 <= start <= end <= _total
    """

    # --- No screen
    if _height < 0:
        return Window(0, 0)

    # --- Everything fits
    if _total <= _height:
        return Window(0, _total)

    # --- The previous window may stem from another height or row count
    last_start  = _total - _height
    start       = max(0, min(_prev.start, last_start))
    end         = start + _height

    if _selected <= 0:                      # at the start
        start = 0
    elif _selected >= _total - 1:           # at the end
        start = last_start
    elif _selected == end:                  # scroll down by one
        start += 1
    elif _selected <= start:                # scroll up by one
        start -= 1
    elif _selected > end:                   # jump, the window ends at the selection
        start = _selected - _height

    start = max(0, min(start, last_start))
    return Window(start, start + _height)
# --- END OF next_window() ---------------------------------------------------------------------------------------------



def visible_slice(_rows: Sequence[T], _window: Window) -> List[T]:
    return list(_rows[_window.start:_window.end])
# --- END OF visible_slice() -------------------------------------------------------------------------------------------
