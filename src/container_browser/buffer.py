"""
Filename:       buffer.py
Author:         jole
Created:        19.10.2026

Description:    A sparse cell grid. Widgets draw into their own Buffer, the buffers are merged into one, and DrawTUI
                paints the result onto the curses screen.

Notes:
    - Cells carry a logical style name (see defs.STYLE_*), not a curses attribute, so buffers can be built and
      inspected without a terminal.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from dataclasses    import dataclass
from typing         import Dict, Iterator, List, Optional, Tuple

# --- Project defined
from .defs          import STYLE_NORMAL
# --- END OF Import section --------------------------------------------------------------------------------------------



@dataclass(frozen=True)
class Cell:
    ch:     str = " "
    style:  str = STYLE_NORMAL
# --- END OF class Cell ------------------------------------------------------------------------------------------------



class Buffer:
    """
    Cells addressed by absolute (x, y) screen co-ordinates. Later writes and merges overwrite earlier cells.
    """

    def __init__(self) -> None:
        self.cells: Dict[Tuple[int, int], Cell] = {}
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def __len__(self) -> int:
        return len(self.cells)



    def set_cell(self, _x: int, _y: int, _cell: Cell) -> None:
        if _x < 0 or _y < 0:
            return
        self.cells[(_x, _y)] = _cell
    # --- END OF set_cell() --------------------------------------------------------------------------------------------



    def set_text(self, _x: int, _y: int, _text: str, _style: str = STYLE_NORMAL, _max_width: Optional[int] = None) -> int:
        """
        Writes _text one character per cell starting at (_x, _y), clipping to _max_width cells if given.

        :return:    Number of cells written
        """

        text = _text if _max_width is None else _text[:max(0, _max_width)]
        for i, ch in enumerate(text):
            self.set_cell(_x + i, _y, Cell(ch, _style))
        return len(text)
    # --- END OF set_text() --------------------------------------------------------------------------------------------



    def fill(self, _x: int, _y: int, _width: int, _style: str = STYLE_NORMAL) -> None:
        for i in range(max(0, _width)):
            self.set_cell(_x + i, _y, Cell(" ", _style))
    # --- END OF fill() ------------------------------------------------------------------------------------------------



    def merge(self, _other: "Buffer") -> None:
        self.cells.update(_other.cells)
    # --- END OF merge() -----------------------------------------------------------------------------------------------



    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """
        :return:    (min_x, min_y, max_x, max_y) of the written cells, inclusive, or None for an empty buffer
        """

        if not self.cells:
            return None
        xs = [x for x, _ in self.cells]
        ys = [y for _, y in self.cells]
        return min(xs), min(ys), max(xs), max(ys)
    # --- END OF bounds() ----------------------------------------------------------------------------------------------



    def line(self, _y: int) -> str:
        """
        The text on row _y, from column 0 up to the last written cell. Unwritten cells read as spaces.
        """

        xs = [x for x, y in self.cells if y == _y]
        if not xs:
            return ""
        return "".join(self.cells.get((x, _y), Cell()).ch for x in range(max(xs) + 1))
    # --- END OF line() ------------------------------------------------------------------------------------------------



    def runs(self) -> Iterator[Tuple[int, int, str, str]]:
        """
        Yields (y, x, text, style) for every horizontal run of adjacent cells sharing one style, top to bottom.
        Painting runs instead of single cells keeps the number of curses calls down.
        """

        by_row: Dict[int, List[int]] = {}
        for x, y in self.cells:
            by_row.setdefault(y, []).append(x)

        for y in sorted(by_row):
            run_x, run_style, chars = -1, "", []
            for x in sorted(by_row[y]):
                cell = self.cells[(x, y)]
                if chars and x == run_x + len(chars) and cell.style == run_style:
                    chars.append(cell.ch)
                    continue
                if chars:
                    yield y, run_x, "".join(chars), run_style
                run_x, run_style, chars = x, cell.style, [cell.ch]
            if chars:
                yield y, run_x, "".join(chars), run_style
    # --- END OF runs() ------------------------------------------------------------------------------------------------

# --- END OF class Buffer ----------------------------------------------------------------------------------------------
