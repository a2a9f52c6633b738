"""
Logging setup for the converter command line interface.

Library modules only create loggers under ``html_json_converter``; handlers
are installed by :func:`setup_logging`, which the CLI calls once per run.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterator, Optional, TextIO

LOGGER_NAME = "html_json_converter"

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


class LogFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    RESET = '\033[0m'
    LEVEL_COLORS = {
        logging.DEBUG: '\033[34m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[1;31m',
    }

    def __init__(self, fmt: str = CONSOLE_FORMAT, colored: bool = False):
        super().__init__(fmt)
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if self.colored and color:
            message = message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)
        return message


def _is_terminal(stream: TextIO) -> bool:
    # No ANSI colors on Windows consoles or when output is redirected
    return sys.platform != 'win32' and hasattr(stream, 'isatty') and stream.isatty()


def setup_logging(debug: bool = False,
                  log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Install console and file handlers on the package logger.

    The console shows INFO and above, or everything with ``debug``. A log
    file, when given, always receives DEBUG records. A logger that already
    has handlers is returned untouched.

    Args:
        debug: Show debug messages on the console
        log_file: Optional path of a log file; missing directories are created
        stream: Console stream, stderr by default

    Returns:
        logging.Logger: The ``html_json_converter`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    stream = stream or sys.stderr
    console_level = logging.DEBUG if debug else logging.INFO
    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(LogFormatter(colored=_is_terminal(stream)))
    logger.addHandler(console_handler)
    logger.setLevel(console_level)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


def get_default_log_file() -> str:
    """Path of today's debug log: ~/.html_json_converter/logs/converter_YYYY-MM-DD.log"""
    log_dir = os.path.join(os.path.expanduser("~"), ".html_json_converter", "logs")
    return os.path.join(log_dir, f"converter_{datetime.now():%Y-%m-%d}.log")


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "Conversion failed") -> None:
    """
    Log an exception as an error.

    The traceback is attached only when the logger is enabled for DEBUG.
    """
    exc_info = exception if logger.isEnabledFor(logging.DEBUG) else None
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Times named operations of one component and logs their durations."""

    def __init__(self, logger: logging.Logger, component: str):
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}
        self.durations: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: int = logging.DEBUG) -> float:
        """
        Stop timing an operation and log how long it took.

        Args:
            name: Operation name passed to :meth:`start`
            level: Log level of the timing message

        Returns:
            float: Duration in seconds, 0.0 if the operation was never started
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"{self.component}: {name} was never started")
            return 0.0

        duration = time.perf_counter() - started
        self.durations[name] = duration
        self.logger.log(level, f"{self.component} {name} took {duration:.4f} seconds")
        return duration

    @contextmanager
    def measure(self, name: str, level: int = logging.DEBUG) -> Iterator[None]:
        """Time the body of a ``with`` block, even when it raises."""
        self.start(name)
        try:
            yield
        finally:
            self.end(name, level)

    @property
    def total(self) -> float:
        """Sum of all recorded durations in seconds."""
        return sum(self.durations.values())
