"""
Filename:       log_setup.py
Author:         jole
Created:        19.10.2026

Description:    The container_browser logger. Every record goes to the log file, the terminal only gets NOTICE and up.

Notes:
    - While curses draws the table any print to the terminal would tear the screen. The refresh thread keeps
      logging daemon failures during that time, so run the curses loop inside curses_owns_stdout() and the records
      only end up in the log file.
    - NOTICE is what a user should see once the screen is back, e.g. a retried daemon request.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import os
import sys

from contextlib import contextmanager
from typing     import Iterator, Optional

# --- Project defined
from .defs  import DEFAULT_LOG_FILE, LOGGER_NAME
# --- END OF Import section --------------------------------------------------------------------------------------------



NOTICE                  = 25            # between INFO and WARNING
STDOUT_HANDLER_NAME     = "container_browser.stdout"
FILE_FORMAT             = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
SILENT                  = logging.CRITICAL + 1

logging.addLevelName(NOTICE, "NOTICE")



def _notice(self: logging.Logger, _message, *args, **kwargs) -> None:
    """
    logger.notice(), same calling convention as logger.info()
    """
    if self.isEnabledFor(NOTICE):
        self._log(NOTICE, _message, args, **kwargs)

logging.Logger.notice = _notice  # type: ignore[attr-defined]



def get_logger() -> logging.Logger:
    """
    The project logger, whether setup_logger() has been called or not.
    """
    return logging.getLogger(LOGGER_NAME)
# --- END OF get_logger() ----------------------------------------------------------------------------------------------



def _stdout_handler(_logger: logging.Logger) -> Optional[logging.Handler]:
    return next((h for h in _logger.handlers if h.get_name() == STDOUT_HANDLER_NAME), None)



def _logs_to_file(_logger: logging.Logger, _path: str) -> bool:
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == _path for h in _logger.handlers)



def setup_logger(_filename: str = DEFAULT_LOG_FILE,
                 *,
                 _file_level:   int = logging.DEBUG,
                 _stream_level: int = NOTICE
                 ) -> logging.Logger:
    """
    Attaches the log file and the terminal to the project logger. Safe to call more than once, a file or the
    terminal already attached is not attached twice.

    :param _filename:       Log file, appended to
    :param _file_level:     Lowest level written to the file
    :param _stream_level:   Lowest level printed on stdout

    :return:                The project logger
    """

    logger = get_logger()
    logger.setLevel(min(_file_level, _stream_level))

    path = os.path.abspath(_filename)
    if not _logs_to_file(logger, path):
        to_file = logging.FileHandler(path)
        to_file.setLevel(_file_level)
        to_file.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(to_file)

    if _stdout_handler(logger) is None:
        to_stdout = logging.StreamHandler(sys.stdout)
        to_stdout.set_name(STDOUT_HANDLER_NAME)
        to_stdout.setLevel(_stream_level)
        to_stdout.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(to_stdout)

    return logger
# --- END OF setup_logger() --------------------------------------------------------------------------------------------



def set_stdout_threshold(_logger: logging.Logger, _level: int = NOTICE) -> int:
    """
    Sets the lowest level printed on stdout. The log file is left alone.

    :return:    The previous threshold, NOTICE when nothing prints to stdout yet
    """

    handler = _stdout_handler(_logger)
    if handler is None:
        return NOTICE

    previous = handler.level
    handler.setLevel(_level)
    return previous
# --- END OF set_stdout_threshold() ------------------------------------------------------------------------------------



@contextmanager
def curses_owns_stdout(_logger: logging.Logger) -> Iterator[None]:
    """
    Nothing is printed on stdout inside the block, the previous threshold is back afterwards, also on errors.
    """

    previous = set_stdout_threshold(_logger, SILENT)
    try:
        yield
    finally:
        set_stdout_threshold(_logger, previous)
# --- END OF curses_owns_stdout() --------------------------------------------------------------------------------------
