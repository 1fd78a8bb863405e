"""
Filename:       widget_registry.py
Author:         jole
Created:        19.10.2026

Description:    Keeps track of the active widgets by the data source they show, so key presses can be routed to the
                widget that owns the selected entity.

Notes:
    - Created by the application and handed to the widgets. There is no module level registry.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import threading

from typing import Any, Dict, List, Optional
# --- END OF Import section --------------------------------------------------------------------------------------------



class WidgetRegistry:

    def __init__(self) -> None:
        self._widgets: Dict[str, Any]   = {}
        self._lock                      = threading.Lock()



    def register(self, _source: str, _widget: Any) -> None:
        """
        Registers _widget for _source. A widget registered later for the same source replaces the earlier one.
        """
        with self._lock:
            self._widgets[_source] = _widget



    def unregister(self, _source: str) -> None:
        with self._lock:
            self._widgets.pop(_source, None)



    def get(self, _source: str) -> Optional[Any]:
        with self._lock:
            return self._widgets.get(_source)



    def sources(self) -> List[str]:
        with self._lock:
            return list(self._widgets)

# --- END OF class WidgetRegistry --------------------------------------------------------------------------------------
