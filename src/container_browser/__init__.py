# --- file: __init__.py

# --- Import section ---------------------------------------------------------------------------------------------------
import argparse
import logging
import os

from .defs                  import (ARGUMENT_EPILOG, ARGUMENT_DESCRIPTION, ARGUMENT_FORMATTER_CLASS,
                                    DEFAULT_REFRESH_SECONDS, DEFAULT_LOG_FILE)
from .containers_browser    import ContainersBrowser
from .containers_widget     import ContainersWidget, EmptyCollectionError
from .docker_api            import DockerDaemon, DataFetchFailedError
from .log_setup             import setup_logger
# --- END OF Import section --------------------------------------------------------------------------------------------



# --- Version (managed by setuptools-scm)
try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0"



def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(description      = ARGUMENT_DESCRIPTION,
                                         epilog           = ARGUMENT_EPILOG,
                                         formatter_class  = ARGUMENT_FORMATTER_CLASS)

    arg_parser.add_argument("--host",
                            type    = str,
                            default = os.environ.get("DOCKER_HOST"),
                            help    = "Docker API address (default: $DOCKER_HOST, else http://localhost:2375)")
    arg_parser.add_argument("--all",
                            action  = "store_true",
                            help    = "Show all containers, not only the running ones")
    arg_parser.add_argument("--filter",
                            type    = str,
                            help    = "Initial container name filter (optional)")
    arg_parser.add_argument("--refresh",
                            type    = float,
                            default = DEFAULT_REFRESH_SECONDS,
                            help    = f"Seconds between container list refreshes, 0 disables "
                                      f"(default: {DEFAULT_REFRESH_SECONDS:g})")
    arg_parser.add_argument("--log-file",
                            type    = str,
                            default = DEFAULT_LOG_FILE,
                            help    = f"Log file (default: {DEFAULT_LOG_FILE})")
    arg_parser.add_argument("--debug",
                            action  = "store_true",
                            help    = "Write debug messages to the log file")
    arg_parser.add_argument("--version",
                            action  = "version",
                            version = f"%(prog)s {__version__}")
    return arg_parser
# --- END OF build_arg_parser() ----------------------------------------------------------------------------------------



# --- Main entry point (used by pyproject.toml [project.scripts])
def main() -> None:
    """
    CLI entry point.

    Possible command line arguments:
        * --host        {Docker API address}, defaults to $DOCKER_HOST
        * --all         show stopped containers as well
        * --filter      {substring of the container name}
        * --refresh     {seconds}, defaults to 5
        * --log-file    {path}
        * --debug
    """

    args = build_arg_parser().parse_args()

    logger = setup_logger(args.log_file, _file_level = logging.DEBUG if args.debug else logging.INFO)
    logger.info(f"container_browser {__version__} started")

    browser = ContainersBrowser(DockerDaemon(args.host, _logger = logger),
                                _show_all       = args.all,
                                _initial_filter = args.filter,
                                _refresh        = args.refresh,
                                _logger         = logger)
    status = browser.run()

    logger.info("container_browser ended")
    raise SystemExit(status)

__all__ = [
    "__version__",
    "main",
    "ContainersBrowser",
    "ContainersWidget",
    "DockerDaemon",
    "DataFetchFailedError",
    "EmptyCollectionError"
]
