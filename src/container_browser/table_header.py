"""
Filename:       table_header.py
Author:         jole
Created:        19.10.2026

Description:    Column headers of the container table, and the title line shown above it.

Notes:
    - Titles are stored bare. The active-sort marker is derived from the active sort mode every time the header is
      drawn, so drawing twice never stacks markers.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from dataclasses    import dataclass
from typing         import List, Optional, Sequence, Tuple

# --- Project defined
from .buffer        import Buffer
from .defs          import (SortMode, DOWN_ARROW, DEFAULT_COLUMN_SPACING, STYLE_HEADER, STYLE_TITLE, STYLE_FILTER,
                            TABLE_HEADER_HEIGHT, WIDGET_HEADER_HEIGHT)
# --- END OF Import section --------------------------------------------------------------------------------------------



@dataclass(frozen=True)
class ColumnHeader:
    title:          str
    sort_mode:      SortMode        = SortMode.NO_SORT
    fixed_width:    Optional[int]   = None
# --- END OF class ColumnHeader ----------------------------------------------------------------------------------------



CONTAINER_TABLE_HEADERS: Tuple[ColumnHeader, ...] = (ColumnHeader("",          SortMode.NO_SORT,   2),
                                                     ColumnHeader("CONTAINER", SortMode.BY_ID,     12),
                                                     ColumnHeader("IMAGE",     SortMode.BY_IMAGE),
                                                     ColumnHeader("COMMAND",   SortMode.NO_SORT),
                                                     ColumnHeader("STATUS",    SortMode.BY_STATUS, 18),
                                                     ColumnHeader("PORTS",     SortMode.NO_SORT),
                                                     ColumnHeader("NAMES",     SortMode.BY_NAME)
                                                     )



def display_title(_column: ColumnHeader, _active: SortMode) -> str:
    """
    The title as shown on screen: marked if the column drives the active sort. NO_SORT marks no column.
    """
    if _active is not SortMode.NO_SORT and _column.sort_mode is _active:
        return DOWN_ARROW + _column.title
    return _column.title
# --- END OF display_title() -------------------------------------------------------------------------------------------



class TableHeader:
    """
    Holds the column definitions and the geometry of the table. The same instance is shared by every row, the rows
    use column_layout() so their cells line up under the titles.
    """

    def __init__(self,
                 _columns:          Sequence[ColumnHeader]  = CONTAINER_TABLE_HEADERS,
                 _column_spacing:   int                     = DEFAULT_COLUMN_SPACING
                 ) -> None:
        self.columns: Tuple[ColumnHeader, ...]  = tuple(_columns)
        self.column_spacing                     = _column_spacing
        self.x: int                             = 0
        self.y: int                             = 0
        self.width: int                         = 0
        self.height: int                        = TABLE_HEADER_HEIGHT
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def set_x(self, _x: int) -> None:
        self.x = _x

    def set_y(self, _y: int) -> None:
        self.y = _y

    def set_width(self, _width: int) -> None:
        self.width = max(0, _width)



    def titles(self) -> List[str]:
        return [c.title for c in self.columns]



    def display_titles(self, _active: SortMode) -> List[str]:
        return [display_title(c, _active) for c in self.columns]



    def column_layout(self) -> List[Tuple[int, int]]:
        """
        Computes (x, width) for every column. Fixed-width columns get their width, the rest of the line is shared
        evenly between the other columns. Columns that fall outside the available width get width 0.

        :return:    One (x, width) pair per column, x is absolute
        """

        count       = len(self.columns)
        spacing     = self.column_spacing * max(0, count - 1)
        fixed       = sum(c.fixed_width for c in self.columns if c.fixed_width is not None)
        n_flexible  = sum(1 for c in self.columns if c.fixed_width is None)
        flexible    = max(0, self.width - fixed - spacing) // n_flexible if n_flexible else 0

        layout: List[Tuple[int, int]] = []
        x       = self.x
        right   = self.x + self.width
        for c in self.columns:
            w = c.fixed_width if c.fixed_width is not None else flexible
            w = max(0, min(w, right - x))
            layout.append((x, w))
            x += w + self.column_spacing
        return layout
    # --- END OF column_layout() ---------------------------------------------------------------------------------------



    def buffer(self, _active: SortMode) -> Buffer:
        buf = Buffer()
        for (x, w), title in zip(self.column_layout(), self.display_titles(_active)):
            buf.set_text(x, self.y, title, STYLE_HEADER, _max_width = w)
        return buf
    # --- END OF buffer() ----------------------------------------------------------------------------------------------

# --- END OF class TableHeader -----------------------------------------------------------------------------------------



def widget_header(_title: str, _count: int, _caption: str, _x: int, _y: int, _width: int) -> Tuple[Buffer, int]:
    """
    Draws the title line above the table, e.g. "Containers: 12 | Container name filter: web".

    :param _caption:    Extra text shown after the count, empty for none

    :return:            The buffer, and the number of lines it takes
    """

    buf     = Buffer()
    text    = f"{_title}: {_count}"
    used    = buf.set_text(_x, _y, text, STYLE_TITLE, _max_width = _width)
    if _caption:
        buf.set_text(_x + used, _y, _caption, STYLE_FILTER, _max_width = _width - used)
    return buf, WIDGET_HEADER_HEIGHT
# --- END OF widget_header() -------------------------------------------------------------------------------------------
