"""
Filename:       filter_and_sort.py
Author:         jole
Created:        19.10.2026

Description:    Narrowing and ordering of the container rows.

Notes:
    - The name filter is a literal, case-sensitive substring match. Docker container names are case-sensitive.
    - Sorting is stable, rows with equal keys keep their relative order between renders.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from __future__ import annotations
from typing import List, Sequence

# --- Project defined
from .container_row import ContainerRow
from .defs          import SortMode, SORT_ROTATION, SORT_FIELD, FILTER_FIELD
# --- END OF Import section --------------------------------------------------------------------------------------------



class FilterAndSort:
    """
    Single place for:
      - narrowing the rows with the name filter
      - sorting the rows by the active sort mode
      - rotating to the next sort mode
    """

    @staticmethod
    def apply(_rows: Sequence[ContainerRow], _pattern: str = "") -> List[ContainerRow]:
        """
        Keeps the rows whose name contains _pattern, in their current order. An empty pattern keeps everything.
        The input is never modified.
        """
        if not _pattern:
            return list(_rows)
        return [r for r in _rows if _pattern in r.field(FILTER_FIELD)]
    # --- END OF apply() -----------------------------------------------------------------------------------------------



    @staticmethod
    def sort(_rows: Sequence[ContainerRow], _mode: SortMode) -> List[ContainerRow]:
        """
        Stable sort on the column bound to _mode, plain string order. NO_SORT leaves the order as it is.
        """
        if _mode is SortMode.NO_SORT:
            return list(_rows)
        title = SORT_FIELD[_mode]
        return sorted(_rows, key = lambda r: r.field(title))
    # --- END OF sort() ------------------------------------------------------------------------------------------------



    @staticmethod
    def rotate(_mode: SortMode) -> SortMode:
        """
        BY_ID -> BY_IMAGE -> BY_STATUS -> BY_NAME -> BY_ID. From NO_SORT the rotation starts at BY_ID.
        """
        if _mode not in SORT_ROTATION:
            return SORT_ROTATION[0]
        return SORT_ROTATION[(SORT_ROTATION.index(_mode) + 1) % len(SORT_ROTATION)]
    # --- END OF rotate() ----------------------------------------------------------------------------------------------

# --- END OF class FilterAndSort ---------------------------------------------------------------------------------------
