"""
Filename:       containers_widget.py
Author:         jole
Created:        19.10.2026

Description:    The container list: a sortable, filterable table that only draws the rows fitting on screen.

Notes:
    - One lock guards all of the widget state. Every public method holds it for its whole duration, so a render
      never sees a half updated list.
    - The selected index refers to the filtered and sorted rows, the ones the user actually sees.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import threading

from typing import Callable, List, Optional, Protocol, Sequence, TypeVar

# --- Project defined
from .buffer            import Buffer
from .container_row     import ContainerRow
from .defs              import SortMode, CONTAINER_SOURCE
from .docker_api        import Container, ContainerFilter
from .filter_and_sort   import FilterAndSort
from .log_setup         import get_logger
from .table_header      import TableHeader, widget_header
from .tui_state         import Cursor
from .viewport          import Window, next_window, visible_slice
from .widget_registry   import WidgetRegistry
# --- END OF Import section --------------------------------------------------------------------------------------------



T = TypeVar("T")



class EmptyCollectionError(Exception):
    """
    Raised when an action is dispatched while there are no containers to act on.
    """
# --- END OF class EmptyCollectionError --------------------------------------------------------------------------------



class ContainerProvider(Protocol):
    def containers(self, _filters: Sequence[ContainerFilter], _sort_mode: SortMode) -> List[Container]: ...
# --- END OF class ContainerProvider -----------------------------------------------------------------------------------



class ContainersWidget:
    """
    Shows the containers of a ContainerProvider.

    Lifecycle: created unmounted, mount() loads the containers, unmount() stops rendering them. Sorting, filtering and
    the selection are applied every time render() is called.
    """

    def __init__(self,
                 _daemon:       ContainerProvider,
                 _cursor:       Cursor,
                 *,
                 _x:            int                         = 0,
                 _y:            int                         = 0,
                 _width:        int                         = 0,
                 _height:       int                         = 0,
                 _registry:     Optional[WidgetRegistry]    = None,
                 _sort_mode:    SortMode                    = SortMode.BY_ID,
                 _show_all:     bool                        = False,
                 _logger:       Optional[logging.Logger]    = None
                 ) -> None:

        self.daemon                         = _daemon
        self.cursor                         = _cursor
        self.logger                         = _logger or get_logger()
        self.header: TableHeader            = TableHeader()

        # --- self.containers holds every row of the last mount, the filter only narrows what is drawn
        self.containers: List[ContainerRow] = []
        self._show_all                      = _show_all
        self._sort_mode                     = _sort_mode
        self._filter_pattern: str           = ""
        self._mounted: bool                 = False
        self._selected_index: int           = 0
        self.window: Window                 = Window()

        self.x, self.y                      = _x, _y
        self.width, self.height             = _width, _height

        # --- Reentrant so an action run by dispatch() can query this widget from the same thread
        self._lock                          = threading.RLock()

        if _registry is not None:
            _registry.register(CONTAINER_SOURCE, self)
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @property
    def name(self) -> str:
        return "ContainersWidget"

    @property
    def mounted(self) -> bool:
        with self._lock:
            return self._mounted

    @property
    def sort_mode(self) -> SortMode:
        with self._lock:
            return self._sort_mode

    @property
    def filter_pattern(self) -> str:
        with self._lock:
            return self._filter_pattern

    @property
    def show_all(self) -> bool:
        with self._lock:
            return self._show_all

    @property
    def selected_index(self) -> int:
        """
        Index of the highlighted row in the filtered and sorted rows, as clamped by the last render.
        """
        with self._lock:
            return self._selected_index



    def mount(self) -> None:
        """
        Loads the containers from the daemon, unless already mounted. Errors from the daemon propagate, and the
        widget stays unmounted.
        """
        with self._lock:
            self._mount()
    # --- END OF mount() -----------------------------------------------------------------------------------------------



    def remount(self) -> None:
        """
        Reloads the containers, whether mounted or not, without letting a render in between. If the daemon fails
        the previous rows stay on screen and the error propagates.
        """
        with self._lock:
            was_mounted     = self._mounted
            self._mounted   = False
            try:
                self._mount()
            except Exception:
                self._mounted = was_mounted
                raise
    # --- END OF remount() ---------------------------------------------------------------------------------------------



    def unmount(self) -> None:
        """
        Stops rendering. The rows are kept until the next mount replaces them.
        """
        with self._lock:
            self._mounted = False
    # --- END OF unmount() ---------------------------------------------------------------------------------------------



    def render(self) -> Buffer:
        """
        Composes the title line, the table header and the visible rows into one buffer.

        :return:    The buffer, empty when not mounted
        """

        with self._lock:
            buf = Buffer()
            if not self._mounted:
                return buf

            y = self.y
            self._sort_rows()

            caption = f" | Container name filter: {self._filter_pattern}" if self._filter_pattern else ""
            title_buf, title_height = widget_header("Containers", self._row_count(), caption,
                                                    self.x, y, self.width)
            buf.merge(title_buf)
            y += title_height

            self.header.set_y(y)
            buf.merge(self.header.buffer(self._sort_mode))
            y += self.header.height

            rows = self._apply_filters()
            self._highlight_selected_row(rows)
            for row in self._visible_rows(rows):
                row.set_y(y)
                y += row.height
                buf.merge(row.buffer())
            return buf
    # --- END OF render() ----------------------------------------------------------------------------------------------



    def filter(self, _pattern: str) -> None:
        """
        Sets the name filter, applied from the next render on.
        """
        with self._lock:
            self._filter_pattern = _pattern or ""
            self.logger.debug(f"ContainersWidget.filter(): pattern='{self._filter_pattern}'")
    # --- END OF filter() ----------------------------------------------------------------------------------------------



    def sort(self) -> None:
        """
        Rotates to the next sort mode: container -> image -> status -> name -> container
        """
        with self._lock:
            self._sort_mode = FilterAndSort.rotate(self._sort_mode)
            self.logger.debug(f"ContainersWidget.sort(): now sorting {self._sort_mode.name}")
    # --- END OF sort() ------------------------------------------------------------------------------------------------



    def toggle_show_all(self) -> None:
        """
        Switches between showing all containers and only running ones. Takes effect on the next mount.
        """
        with self._lock:
            self._show_all  = not self._show_all
            self._mounted   = False
    # --- END OF toggle_show_all() -------------------------------------------------------------------------------------



    def dispatch(self, _action: Callable[[str], T]) -> T:
        """
        Runs _action with the id of the selected container.

        :return:                        Whatever _action returns
        :raises EmptyCollectionError:   If the filtered view shows no container, either because none are loaded or
                                        because the filter hides them all. _action is not called.
        """

        with self._lock:
            rows = self._apply_filters()
            if not rows:
                if self.containers:
                    raise EmptyCollectionError(f"No container matches the filter '{self._filter_pattern}'")
                raise EmptyCollectionError("The container list is empty")
            index = max(0, min(self._selected_index, len(rows) - 1))
            return _action(rows[index].id)
    # --- END OF dispatch() --------------------------------------------------------------------------------------------



    def resize(self, _x: int, _y: int, _width: int, _height: int) -> None:
        with self._lock:
            self.x, self.y          = _x, _y
            self.width, self.height = _width, _height
            self._align()
    # --- END OF resize() ----------------------------------------------------------------------------------------------



    def row_count(self) -> int:
        """
        Number of containers loaded, the filter is not taken into account.
        """
        with self._lock:
            return self._row_count()



    def filtered_count(self) -> int:
        """
        Number of containers the current filter lets through.
        """
        with self._lock:
            return len(self._apply_filters())



    def _row_count(self) -> int:
        return len(self.containers)



    def _mount(self) -> None:
        if self._mounted:
            return

        filters = [ContainerFilter.UNFILTERED if self._show_all else ContainerFilter.RUNNING]
        containers = self.daemon.containers(filters, self._sort_mode)

        self.containers = [ContainerRow(c, self.header) for c in containers]
        self._mounted   = True
        self._align()
        self.logger.info(f"ContainersWidget: mounted {len(self.containers)} containers (show all: {self._show_all})")
    # --- END OF _mount() ----------------------------------------------------------------------------------------------



    def _align(self) -> None:
        self.header.set_x(self.x)
        self.header.set_width(self.width)
        for row in self.containers:
            row.set_x(self.x)
            row.set_width(self.width)
    # --- END OF _align() ----------------------------------------------------------------------------------------------



    def _apply_filters(self) -> List[ContainerRow]:
        return FilterAndSort.apply(self.containers, self._filter_pattern)



    def _sort_rows(self) -> None:
        self.containers = FilterAndSort.sort(self.containers, self._sort_mode)



    def _highlight_selected_row(self, _rows: List[ContainerRow]) -> None:
        """
        Highlights the row under the cursor, and only that one. The cursor is clamped to the rows shown, it can
        point past the end after the filter got narrower.
        """

        for row in self.containers:
            row.highlight(False)
        if not _rows:
            self._selected_index = 0
            return

        index = max(0, min(self.cursor.position(), len(_rows) - 1))
        self._selected_index = index
        _rows[index].highlight(True)
    # --- END OF _highlight_selected_row() -----------------------------------------------------------------------------



    def _visible_rows(self, _rows: List[ContainerRow]) -> List[ContainerRow]:
        self.window = next_window(self.window, self._selected_index, len(_rows), self.height)
        return visible_slice(_rows, self.window)
    # --- END OF _visible_rows() ---------------------------------------------------------------------------------------

# --- END OF class ContainersWidget ------------------------------------------------------------------------------------
