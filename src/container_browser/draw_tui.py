"""
Filename:       draw_tui.py
Author:         jole
Created:        19.10.2026

Description:    Everything that writes to the curses screen.

Notes:
    - Widgets never touch curses, they hand over a Buffer which is painted here.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing import Any, Dict, List

# --- Project defined
from .buffer    import Buffer
from .defs      import HELP_TEXT, HELPBAR_TEXT
from .tui_state import TUITheme
# --- END OF Import section --------------------------------------------------------------------------------------------



class DrawTUI():
    """
    This one is responsible for all the drawing to screen. By drawing I mean writing...
    """

    def draw_buffer(self, _stdscr, _buffer: Buffer, _theme: TUITheme) -> None:
        """
        Paints every cell of _buffer, run by run, using the theme's attribute for each style.
        """

        for y, x, text, style in _buffer.runs():
            self._addstr_clip(_stdscr, y, x, text, _theme.attr(style))
    # --- END OF draw_buffer() -----------------------------------------------------------------------------------------



    def draw_helpbar(self,
                     _stdscr,
                     _theme:            TUITheme,
                     _selected:         int,
                     _count:            int,
                     _message:          str = ""
                     ) -> None:
        """
        Draws up the help at the bottom of the terminal

        :param _stdscr:     Where to write
        :param _message:    Shown instead of the key help, e.g. an error from the last action
        :return:            None
        """

        max_y, max_x = _stdscr.getmaxyx()
        right   = f"row {min(_selected + 1, _count)}/{_count}"
        left    = _message or HELPBAR_TEXT
        bar     = (left + "  " + right)[: max_x - 1]
        self._addstr_clip(_stdscr, max_y - 1, 0, bar.ljust(max_x - 1), _theme.help_bar or _theme.reversed)
    # --- END OF draw_helpbar() ----------------------------------------------------------------------------------------



    def show_help(self, _stdscr, _theme: TUITheme) -> None:
        self._show_lines(_stdscr, _theme, HELP_TEXT)



    def show_details(self, _stdscr, _theme: TUITheme, _details: Dict[str, Any]) -> None:
        """
        Shows the interesting parts of a container inspect answer until a key is hit.
        """

        config  = _details.get("Config") or {}
        state   = _details.get("State") or {}
        network = _details.get("NetworkSettings") or {}

        lines: List[str] = [f"Container {_details.get('Name', '').lstrip('/')}",
                            "",
                            f"  Id:         {_details.get('Id', '')}",
                            f"  Image:      {config.get('Image', '')}",
                            f"  Created:    {_details.get('Created', '')}",
                            f"  Status:     {state.get('Status', '')}",
                            f"  Started:    {state.get('StartedAt', '')}",
                            f"  Exit code:  {state.get('ExitCode', '')}",
                            f"  IP address: {network.get('IPAddress', '')}",
                            f"  Cmd:        {' '.join(config.get('Cmd') or [])}",
                            "",
                            "  Env:"]
        lines.extend(f"    {e}" for e in config.get("Env") or [])
        lines.extend(["", "Hit any key to close"])
        self._show_lines(_stdscr, _theme, lines)
    # --- END OF show_details() ----------------------------------------------------------------------------------------



    def _show_lines(self, _stdscr, _theme: TUITheme, _lines: List[str]) -> None:
        """
        Clears the screen, writes _lines from the top and waits for a key.
        """

        self.clear_screen(_stdscr)
        for i, line in enumerate(_lines):
            attr = _theme.title if i == 0 else 0
            self._addstr_clip(_stdscr, i, 0, line, attr)
        _stdscr.refresh()

        # --- Block for the key, the main loop uses a timeout
        _stdscr.timeout(-1)
        _stdscr.getch()
    # --- END OF _show_lines() -----------------------------------------------------------------------------------------



    def _addstr_clip(self, _stdscr, _y: int, _x: int, _text: str, _attr: int = 0) -> None:
        """
        Writes a string to curses _stdscr, clipping if necessary

        :param _stdscr:  Which screen to write to
        :param _y:       y co-ordinate
        :param _x:       x co-ordinate
        :param _text:    What to write
        :param _attr:    Text attributes

        :return:        None
        """

        max_y, max_x = _stdscr.getmaxyx()
        if _y >= max_y or _x >= max_x:
            return

        _stdscr.addstr(_y, _x, _text[: max_x - _x - 1], _attr)
    # --- END OF _addstr_clip() ----------------------------------------------------------------------------------------



    def clear_screen(self, _stdscr) -> None:
        """
        Clears the screen _stdscr

        :return: None
        """

        _stdscr.erase()
    # --- END OF clear_screen ------------------------------------------------------------------------------------------

# --- END OF class DrawTUI ---------------------------------------------------------------------------------------------
