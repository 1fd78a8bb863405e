"""
Filename:       container_row.py
Author:         jole
Created:        19.10.2026

Description:    One line of the container table.

Notes:
    - The display strings are computed once, when the row is created. A new list of containers means new rows.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing         import Dict, List

# --- Project defined
from .buffer        import Buffer
from .defs          import (SHORT_ID_LENGTH, RUNNING_GLYPH, STOPPED_GLYPH, STYLE_NORMAL, STYLE_HIGHLIGHT,
                            STYLE_RUNNING, STYLE_STOPPED)
from .docker_api    import Container
from .table_header  import TableHeader
# --- END OF Import section --------------------------------------------------------------------------------------------



class ContainerRow:

    def __init__(self, _container: Container, _header: TableHeader) -> None:
        self.container              = _container
        self.header                 = _header
        self.highlighted: bool      = False

        values = [RUNNING_GLYPH if _container.running else STOPPED_GLYPH,
                  _container.id[:SHORT_ID_LENGTH],
                  _container.image,
                  _container.command,
                  _container.status,
                  _container.ports,
                  _container.name]

        # --- Column title -> display string, in header order
        self.fields: Dict[str, str] = dict(zip(_header.titles(), values))

        self.x: int         = 0
        self.y: int         = 0
        self.width: int     = 0
        self.height: int    = 1
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @property
    def id(self) -> str:
        return self.container.id



    def field(self, _title: str) -> str:
        return self.fields.get(_title, "")



    def highlight(self, _on: bool) -> None:
        self.highlighted = _on



    def set_x(self, _x: int) -> None:
        self.x = _x

    def set_y(self, _y: int) -> None:
        self.y = _y

    def set_width(self, _width: int) -> None:
        self.width = max(0, _width)



    def buffer(self) -> Buffer:
        """
        Draws the row at (self.x, self.y). Cells line up under the header titles, a highlighted row is painted
        in the highlight style over its full width.
        """

        buf     = Buffer()
        style   = STYLE_HIGHLIGHT if self.highlighted else STYLE_NORMAL
        if self.highlighted:
            buf.fill(self.x, self.y, self.width, style)

        values: List[str] = [self.fields.get(t, "") for t in self.header.titles()]
        for i, ((x, w), value) in enumerate(zip(self.header.column_layout(), values)):
            cell_style = style
            if i == 0 and not self.highlighted:
                cell_style = STYLE_RUNNING if self.container.running else STYLE_STOPPED
            buf.set_text(x, self.y, value, cell_style, _max_width = w)
        return buf
    # --- END OF buffer() ----------------------------------------------------------------------------------------------

# --- END OF class ContainerRow ----------------------------------------------------------------------------------------
