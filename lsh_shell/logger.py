"""
Logging setup for lsh-shell.

Modules log through ``logging.getLogger(__name__)``; ``setup_logging``
attaches one handler to the ``lsh_shell`` logger. The log goes to stderr
(or a file) so that it never mixes with command output on stdout.
"""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO

ROOT_LOGGER_NAME = 'lsh_shell'


class LogFormatter(logging.Formatter):
    """
    Formatter producing ``[timestamp] LEVEL    name: message``.

    The level is colour coded when the destination is a terminal.
    """

    # ANSI color codes for terminal output
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = False):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        message = f"[{timestamp}] {level_display} {record.name}: {record.getMessage()}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def _supports_color(stream: TextIO) -> bool:
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level for the package logger
        log_file: Append the log to this file instead of a stream
        stream: Stream to log to when no file is given (default: sys.stderr)

    Returns:
        The configured ``lsh_shell`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding='utf-8')
        handler.setFormatter(LogFormatter(use_colors=False))
    else:
        stream = stream or sys.stderr
        handler = logging.StreamHandler(stream)
        handler.setFormatter(LogFormatter(use_colors=_supports_color(stream)))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
