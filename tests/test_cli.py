from container_browser import build_arg_parser
from container_browser.defs import DEFAULT_LOG_FILE, DEFAULT_REFRESH_SECONDS


def test_defaults(monkeypatch):
    monkeypatch.delenv("DOCKER_HOST", raising=False)

    args = build_arg_parser().parse_args([])

    assert args.host is None
    assert not args.all
    assert args.filter is None
    assert args.refresh == DEFAULT_REFRESH_SECONDS
    assert args.log_file == DEFAULT_LOG_FILE
    assert not args.debug


def test_docker_host_from_environment(monkeypatch):
    monkeypatch.setenv("DOCKER_HOST", "tcp://10.0.0.5:2375")

    assert build_arg_parser().parse_args([]).host == "tcp://10.0.0.5:2375"


def test_options():
    args = build_arg_parser().parse_args(["--host", "http://docker:2375", "--all", "--filter", "web",
                                          "--refresh", "0", "--log-file", "x.log", "--debug"])

    assert (args.host, args.all, args.filter, args.refresh, args.log_file, args.debug) == \
           ("http://docker:2375", True, "web", 0.0, "x.log", True)
