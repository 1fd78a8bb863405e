"""
Shared fakes for the tests: a provider returning canned containers, and a requests-like session.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
from typing import Any, Dict, List, Optional, Sequence

import pytest

from container_browser.defs         import SortMode
from container_browser.docker_api   import Container, ContainerFilter
from container_browser.tui_state    import Cursor
# --- END OF Import section --------------------------------------------------------------------------------------------



def make_container(_index: int,
                   _name: Optional[str]    = None,
                   _image: str             = "nginx:latest",
                   _status: str            = "Up 2 hours",
                   _state: str             = "running") -> Container:
    return Container(id         = f"{_index:012d}" + "a" * 52,
                     image      = _image,
                     command    = "/docker-entrypoint.sh",
                     status     = _status,
                     state      = _state,
                     names      = (f"/{_name or f'web-{_index:03d}'}",),
                     ports      = "")



class FakeDaemon:
    """
    Stands in for DockerDaemon, remembers every call to containers().
    """

    def __init__(self, _containers: Sequence[Container] = ()) -> None:
        self.items: List[Container]     = list(_containers)
        self.calls: List[Any]           = []

    def containers(self, _filters: Sequence[ContainerFilter], _sort_mode: SortMode) -> List[Container]:
        self.calls.append((list(_filters), _sort_mode))
        return list(self.items)



class FakeResponse:

    def __init__(self, _payload: Any = None, _status_code: int = 200, _reason: str = "OK", _bad_json: bool = False):
        self.payload        = _payload
        self.status_code    = _status_code
        self.reason         = _reason
        self.bad_json       = _bad_json

    def raise_for_status(self) -> None:
        import requests
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} {self.reason}")

    def json(self) -> Any:
        if self.bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload



class FakeSession:
    """
    Answers get() with the queued results in order. A queued exception is raised instead of returned.
    """

    def __init__(self, *_results: Any) -> None:
        self.results                        = list(_results)
        self.requests: List[Dict[str, Any]] = []

    def get(self, _url: str, params: Optional[Dict[str, str]] = None, timeout: Any = None) -> FakeResponse:
        self.requests.append({"url": _url, "params": params, "timeout": timeout})
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result



@pytest.fixture
def cursor() -> Cursor:
    return Cursor()
