import json

import pytest
import requests

from container_browser.defs         import SortMode
from container_browser.docker_api   import (Container, ContainerFilter, DataFetchFailedError, DockerDaemon,
                                            format_ports, normalize_host)

from conftest import FakeResponse, FakeSession


API_CONTAINER = {"Id":       "8dfafdbc3a40aaaabbbbccccddddeeeeffff0000111122223333444455556666",
                 "Names":    ["/boring_feynman"],
                 "Image":    "ubuntu:latest",
                 "Command":  "echo 1",
                 "State":    "running",
                 "Status":   "Up 5 minutes",
                 "Ports":    [{"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8080, "Type": "tcp"},
                              {"PrivatePort": 443, "Type": "tcp"}]}


def _daemon(_session, **_kwargs):
    return DockerDaemon("tcp://docker.local:2375", _session=_session, _backoff=0, **_kwargs)


def test_container_from_api():
    c = Container.from_api(API_CONTAINER)

    assert c.name == "boring_feynman"
    assert c.running
    assert c.image == "ubuntu:latest"
    assert c.ports == "0.0.0.0:8080->80/tcp, 443/tcp"


def test_container_from_sparse_api_answer():
    c = Container.from_api({"Id": "abc", "State": "exited"})

    assert c.name == ""
    assert not c.running
    assert c.ports == ""


def test_format_ports_without_ip():
    assert format_ports([{"PrivatePort": 53, "PublicPort": 53, "Type": "udp"}]) == "53->53/udp"


@pytest.mark.parametrize("host, expected", [("tcp://1.2.3.4:2375", "http://1.2.3.4:2375"),
                                            ("localhost:2375/", "http://localhost:2375"),
                                            ("https://docker:2376", "https://docker:2376"),
                                            (None, "http://localhost:2375")])
def test_normalize_host(host, expected):
    assert normalize_host(host) == expected


def test_running_only_uses_status_filter():
    session = FakeSession(FakeResponse([API_CONTAINER]))

    containers = _daemon(session).containers([ContainerFilter.RUNNING], SortMode.BY_ID)

    assert [c.name for c in containers] == ["boring_feynman"]
    sent = session.requests[0]
    assert sent["url"] == "http://docker.local:2375/containers/json"
    assert json.loads(sent["params"]["filters"]) == {"status": ["running"]}


def test_unfiltered_lists_all():
    session = FakeSession(FakeResponse([]))

    assert _daemon(session).containers([ContainerFilter.UNFILTERED], SortMode.NO_SORT) == []
    assert session.requests[0]["params"] == {"all": "1"}


def test_connection_errors_are_retried():
    session = FakeSession(requests.ConnectionError("refused"), FakeResponse([API_CONTAINER]))

    containers = _daemon(session, _retries=2).containers([ContainerFilter.RUNNING], SortMode.BY_ID)

    assert len(containers) == 1
    assert len(session.requests) == 2


def test_gives_up_after_retries():
    session = FakeSession(requests.Timeout("slow"), requests.Timeout("slow"), requests.Timeout("slow"))

    with pytest.raises(DataFetchFailedError) as info:
        _daemon(session, _retries=2).containers([ContainerFilter.RUNNING], SortMode.BY_ID)

    assert len(info.value.errors) == 3
    assert len(session.requests) == 3


def test_http_error_is_not_retried():
    session = FakeSession(FakeResponse(None, 500, "Internal Server Error"))

    with pytest.raises(DataFetchFailedError, match="HTTP 500"):
        _daemon(session).containers([ContainerFilter.RUNNING], SortMode.BY_ID)
    assert len(session.requests) == 1


def test_invalid_json():
    session = FakeSession(FakeResponse(_bad_json=True))

    with pytest.raises(DataFetchFailedError, match="Invalid JSON"):
        _daemon(session).containers([ContainerFilter.RUNNING], SortMode.BY_ID)


def test_unexpected_answer_shape():
    session = FakeSession(FakeResponse({"message": "page not found"}))

    with pytest.raises(DataFetchFailedError):
        _daemon(session).containers([ContainerFilter.RUNNING], SortMode.BY_ID)


def test_inspect():
    session = FakeSession(FakeResponse({"Id": "abc", "Name": "/web"}))

    assert _daemon(session).inspect("abc")["Name"] == "/web"
    assert session.requests[0]["url"] == "http://docker.local:2375/containers/abc/json"
