"""
Filename:       docker_api.py
Author:         jole
Created:        19.10.2026

Description:    Talks to the Docker Engine API over HTTP and turns its answers into Container objects.

Notes:
    - Only plain HTTP(S) endpoints are supported, expose the daemon on tcp (or through a proxy) to use it.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import json
import logging
import time
import requests

from dataclasses    import dataclass
from enum           import Enum
from typing         import Any, Dict, List, Optional, Sequence, Tuple

# --- Project defined
from .defs          import SortMode, DEFAULT_DOCKER_HOST
from .log_setup     import get_logger
# --- END OF Import section --------------------------------------------------------------------------------------------



class DataFetchFailedError(Exception):
    """
    Raised when the Docker daemon could not be queried. errors holds one line per failed attempt.
    """

    def __init__(self, _message: str, _errors: Optional[List[str]] = None) -> None:
        super().__init__(_message)
        self.errors: List[str] = list(_errors or [])
# --- END OF class DataFetchFailedError --------------------------------------------------------------------------------



class ContainerFilter(Enum):
    UNFILTERED  = "unfiltered"
    RUNNING     = "running"
# --- END OF class ContainerFilter -------------------------------------------------------------------------------------



def format_ports(_ports: Sequence[Dict[str, Any]]) -> str:
    """
    Renders the Ports list of the API the way 'docker ps' does: 0.0.0.0:8080->80/tcp, 443/tcp
    """

    parts: List[str] = []
    for p in _ports or []:
        private = p.get("PrivatePort", "")
        proto   = p.get("Type", "tcp")
        public  = p.get("PublicPort")
        if public:
            ip = p.get("IP", "")
            parts.append(f"{ip + ':' if ip else ''}{public}->{private}/{proto}")
        else:
            parts.append(f"{private}/{proto}")
    return ", ".join(parts)
# --- END OF format_ports() --------------------------------------------------------------------------------------------



@dataclass(frozen=True)
class Container:
    id:         str
    image:      str
    command:    str
    status:     str
    state:      str
    names:      Tuple[str, ...]
    ports:      str

    @property
    def name(self) -> str:
        return self.names[0].lstrip("/") if self.names else ""

    @property
    def running(self) -> bool:
        return self.state == "running"

    @staticmethod
    def from_api(_data: Dict[str, Any]) -> "Container":
        """
        Builds a Container from one element of the GET /containers/json answer.
        """
        return Container(id         = _data.get("Id", ""),
                         image      = _data.get("Image", ""),
                         command    = _data.get("Command", ""),
                         status     = _data.get("Status", ""),
                         state      = _data.get("State", ""),
                         names      = tuple(_data.get("Names") or ()),
                         ports      = format_ports(_data.get("Ports") or ()))
    # --- END OF from_api() --------------------------------------------------------------------------------------------

# --- END OF class Container -------------------------------------------------------------------------------------------



def normalize_host(_host: Optional[str]) -> str:
    """
    DOCKER_HOST style addresses use tcp://, requests needs http://
    """
    host = (_host or DEFAULT_DOCKER_HOST).strip().rstrip("/")
    if host.startswith("tcp://"):
        host = "http://" + host[len("tcp://"):]
    if "://" not in host:
        host = "http://" + host
    return host
# --- END OF normalize_host() ------------------------------------------------------------------------------------------



class DockerDaemon:
    """
    Provider of containers for the widgets. One HTTP session is kept for the lifetime of the object.
    """

    def __init__(self,
                 _host:     Optional[str]               = None,
                 *,
                 _logger:   Optional[logging.Logger]    = None,
                 _session:  Optional[requests.Session]  = None,
                 _timeout:  Tuple[float, float]         = (3, 10),
                 _retries:  int                         = 2,
                 _backoff:  float                       = 0.5
                 ) -> None:

        self.host       = normalize_host(_host)
        self.logger     = _logger or get_logger()
        self.session    = _session or requests.Session()
        self.timeout    = _timeout
        self.retries    = _retries
        self.backoff    = _backoff
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def containers(self, _filters: Sequence[ContainerFilter], _sort_mode: SortMode) -> List[Container]:
        """
        Lists containers. RUNNING restricts the list to running containers, UNFILTERED (or no filter) lists all.

        :param _sort_mode:  Sort hint. The API has no ordering option, callers sort the rows themselves.

        :return:            The containers in the order the daemon returned them
        """

        params: Dict[str, str] = {"all": "1"}
        if ContainerFilter.RUNNING in _filters and ContainerFilter.UNFILTERED not in _filters:
            params["filters"] = json.dumps({"status": ["running"]})

        self.logger.debug(f"DockerDaemon.containers(): params={params}, sort hint={_sort_mode.name}")
        data = self._get_json("/containers/json", params)
        if not isinstance(data, list):
            raise DataFetchFailedError(f"Unexpected answer from {self.host}/containers/json")

        containers = [Container.from_api(d) for d in data]
        self.logger.info(f"DockerDaemon.containers(): {len(containers)} containers from {self.host}")
        return containers
    # --- END OF containers() ------------------------------------------------------------------------------------------



    def inspect(self, _container_id: str) -> Dict[str, Any]:
        data = self._get_json(f"/containers/{_container_id}/json")
        if not isinstance(data, dict):
            raise DataFetchFailedError(f"Unexpected answer inspecting container {_container_id}")
        return data
    # --- END OF inspect() ---------------------------------------------------------------------------------------------



    def _get_json(self, _path: str, _params: Optional[Dict[str, str]] = None) -> Any:
        """
        GET self.host + _path and decode the JSON body, retrying timeouts and connection errors with a doubling
        backoff.

        :raises DataFetchFailedError:   When every attempt failed, the server answered with an HTTP error, or the
                                        body was not JSON
        """

        url         = self.host + _path
        backoff     = self.backoff
        errors: List[str] = []

        for attempt in range(self.retries + 1):
            try:
                r = self.session.get(url, params = _params, timeout = self.timeout)
                r.raise_for_status()
                return r.json()
            except (requests.Timeout, requests.ConnectionError) as e:
                errors.append(f"{e.__class__.__name__}: {e}")
                if attempt < self.retries:
                    self.logger.notice(f"DockerDaemon._get_json(): {e.__class__.__name__}: {e}. "
                                       f"Retrying in {backoff:.1f}s…")
                    time.sleep(backoff)
                    backoff *= 2
            except requests.HTTPError as e:
                raise DataFetchFailedError(f"HTTP {r.status_code} {r.reason} for {url}", [str(e)]) from e
            except ValueError as e:
                raise DataFetchFailedError(f"Invalid JSON from {url}", [str(e)]) from e

        self.logger.error(f"DockerDaemon._get_json(): giving up on {url} after {self.retries + 1} attempts")
        raise DataFetchFailedError(f"Could not reach the Docker daemon at {self.host}", errors)
    # --- END OF _get_json() -------------------------------------------------------------------------------------------

# --- END OF class DockerDaemon ----------------------------------------------------------------------------------------
