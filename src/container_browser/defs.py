"""
Filename:   defs.py
Author:     jole
Created:    19.10.2026

Description:    Hold various constants, or other definitions, for use across the project.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses
import argparse

from enum   import Enum
from typing import Dict, Tuple
# --- END OF Import section --------------------------------------------------------------------------------------------



class SortMode(Enum):
    """
    The criteria the container list can be ordered by. NO_SORT is only ever an initial default, rotating the sort
    mode never lands on it.
    """
    NO_SORT     = 0
    BY_ID       = 1
    BY_IMAGE    = 2
    BY_STATUS   = 3
    BY_NAME     = 4
# --- END OF class SortMode --------------------------------------------------------------------------------------------



ARGUMENT_DESCRIPTION = "Docker containers TUI browser"

ARGUMENT_EPILOG =   ("Filtering:\n"
                     "  The filter is a literal substring matched against the container name (case-sensitive).\n"
                     "  An empty filter shows every container.\n"
                     "\nEnvironment:\n"
                     "  DOCKER_HOST   Docker API address used when --host is not given (tcp:// is read as http://)\n"
                     "\nCLI:\n"
                    )

ARGUMENT_FORMATTER_CLASS = argparse.RawDescriptionHelpFormatter

DEFAULT_DOCKER_HOST     = "http://localhost:2375"
DEFAULT_LOG_FILE        = "container_browser.log"
DEFAULT_REFRESH_SECONDS = 5.0
LOGGER_NAME             = "container_browser"

# --- Key used to register widgets showing containers
CONTAINER_SOURCE        = "containers"

# --- Active-sort marker, prefixed to the title of the column currently driving the sort order
DOWN_ARROW              = "↓"

DEFAULT_COLUMN_SPACING  = 1

# --- Order the sort mode rotates through
SORT_ROTATION: Tuple[SortMode, ...] = (SortMode.BY_ID,
                                       SortMode.BY_IMAGE,
                                       SortMode.BY_STATUS,
                                       SortMode.BY_NAME)

# --- Column title holding the field each sort mode compares
SORT_FIELD: Dict[SortMode, str] = {SortMode.BY_ID:      "CONTAINER",
                                   SortMode.BY_IMAGE:   "IMAGE",
                                   SortMode.BY_STATUS:  "STATUS",
                                   SortMode.BY_NAME:    "NAMES"
                                   }

# --- The name filter is applied to this column
FILTER_FIELD            = "NAMES"

SHORT_ID_LENGTH         = 12

# --- Indicator glyphs for the first column
RUNNING_GLYPH           = "●"
STOPPED_GLYPH           = "○"

# --- Logical styles a Buffer cell can carry. TUITheme maps them to curses attributes.
STYLE_NORMAL            = "none"
STYLE_TITLE             = "title"
STYLE_FILTER            = "filtered"
STYLE_HEADER            = "header"
STYLE_HIGHLIGHT         = "highlight"
STYLE_RUNNING           = "running"
STYLE_STOPPED           = "stopped"

HELP_TEXT = [
            "Docker Containers Browser Help",
            "",
            "Navigation:",
            "  ↑/↓ : Move selection",
            "  PgUp/PgDn : Page up/down",
            "  Home/End : Jump to first/last",
            "  Enter : Inspect selected container",
            "",
            "Sorting and filtering:",
            "  F1 or s : Rotate sort column (container, image, status, name)",
            "  / : Filter on container name (literal, case-sensitive)",
            "  C : Clear filter",
            "  % : Toggle show all / running containers",
            "",
            "Other:",
            "  F5 or r : Refresh container list",
            "  q or Q : Quit",
            "  ? : Show this help",
            "",
            "Color legend:",
            "  Green    = Running",
            "  Red      = Not running",
            "  Cyan     = Active filter",
            "",
            "",
            "Hit any key to close this help",
        ]

HELPBAR_TEXT = "F1:Sort /:Filter C:Clear %:All/Running F5:Refresh Enter:Inspect ?:Help q/Q:Quit"

NAVIGATION_KEYS = {curses.KEY_UP,
                   curses.KEY_DOWN,
                   curses.KEY_NPAGE,
                   curses.KEY_PPAGE,
                   curses.KEY_HOME,
                   curses.KEY_END}

ENTER_KEYS = {curses.KEY_ENTER, 10, 13}

# --- Lines taken by the widget title and the table header, above the rows, and by the help bar below them
WIDGET_HEADER_HEIGHT    = 1
TABLE_HEADER_HEIGHT     = 1
HELPBAR_HEIGHT          = 1
