"""Engine and client loggers that write timestamped lines to standard output."""

from __future__ import annotations

import logging
import sys
import threading

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"
_RESET = "\033[0m"
_COLOURS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;41m",
}


class _ConsoleHandler(logging.Handler):
    """Writes records to whatever sys.stdout is at the time, coloured on a terminal."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            stream = sys.stdout
            isatty = getattr(stream, "isatty", None)
            if isatty is not None and isatty():
                colour = _COLOURS.get(record.levelno, "")
                line = f"{colour}{line}{_RESET}"
            stream.write(line + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


_lock = threading.Lock()
_loggers: dict[str, logging.Logger] = {}


def _get_logger(name: str) -> logging.Logger:
    with _lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = logging.getLogger(name)
            logger.setLevel(TRACE)
            handler = _ConsoleHandler()
            handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
            logger.addHandler(handler)
            logger.propagate = False
            _loggers[name] = logger
        return logger


def get_engine_logger() -> logging.Logger:
    """Return the shared logger used by the engine."""
    return _get_logger("Engine")


def get_client_logger() -> logging.Logger:
    """Return the shared logger used by game code."""
    return _get_logger("Client")