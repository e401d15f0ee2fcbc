"""
Output redirection for a single command.

``extract_redirection`` finds a ``>`` or ``>>`` operator in an argument
vector and cuts it (and everything after it) off. ``RedirectedOutput`` is
the scoped resource that points file descriptor 1 at the target for the
duration of one command and puts the original back when the block exits,
whatever way it exits.
"""

import contextlib
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

from .exceptions import RedirectionError

logger = logging.getLogger(__name__)

STDOUT_FILENO = 1

TRUNCATE_OPERATOR = '>'
APPEND_OPERATOR = '>>'

# Permission bits for files created by a redirection (before umask)
CREATE_MODE = 0o644


@dataclass(frozen=True)
class Redirection:
    """Where standard output goes for one command"""

    target: str
    append: bool = False

    @property
    def operator(self) -> str:
        return APPEND_OPERATOR if self.append else TRUNCATE_OPERATOR

    @property
    def flags(self) -> int:
        """os.open() flags for the target"""
        mode_flag = os.O_APPEND if self.append else os.O_TRUNC
        return os.O_WRONLY | os.O_CREAT | mode_flag


def extract_redirection(argv: List[str]) -> Tuple[Optional[Redirection], List[str]]:
    """
    Split an argument vector into its redirection and the command proper.

    The vector is scanned left to right for the first ``>`` or ``>>``;
    the token right after it names the target file. The returned vector
    stops just before the operator, so neither the operator nor the
    filename (nor anything after them) reaches the command.

    Args:
        argv: Argument vector, command name first

    Returns:
        (Redirection or None, argument vector for the command)

    Raises:
        RedirectionError: the operator is the last token

    Examples:
        >>> extract_redirection(['echo', 'hi', '>', 'out.txt'])
        (Redirection(target='out.txt', append=False), ['echo', 'hi'])
        >>> extract_redirection(['ls'])
        (None, ['ls'])
    """
    for position, token in enumerate(argv):
        if token not in (TRUNCATE_OPERATOR, APPEND_OPERATOR):
            continue
        if position + 1 >= len(argv):
            raise RedirectionError(token, position=position)
        redirection = Redirection(
            target=argv[position + 1],
            append=(token == APPEND_OPERATOR),
        )
        return redirection, list(argv[:position])
    return None, list(argv)


class RedirectedOutput:
    """
    Context manager that sends standard output to a file.

    On entry the target is opened (created with mode 0644 if missing),
    the current descriptor 1 is duplicated as the restore point and the
    target is installed as descriptor 1. Child processes inherit it; the
    text stream returned by ``__enter__`` writes to it for builtins.
    On exit the saved descriptor is put back and closed, exactly once.

    If the target cannot be opened, ``__enter__`` raises OSError before
    touching descriptor 1.

    Example:
        with RedirectedOutput(Redirection('out.txt')) as stream:
            stream.write("hello\\n")
    """

    def __init__(self, redirection: Redirection, fd: int = STDOUT_FILENO):
        self.redirection = redirection
        self.fd = fd
        self.stream: Optional[TextIO] = None
        self._saved_fd: Optional[int] = None

    def __enter__(self) -> TextIO:
        target_fd = os.open(self.redirection.target, self.redirection.flags, CREATE_MODE)
        try:
            # Pending interpreter output belongs to the old destination
            sys.stdout.flush()
            self._saved_fd = os.dup(self.fd)
            os.dup2(target_fd, self.fd)
        except OSError:
            if self._saved_fd is not None:
                os.close(self._saved_fd)
                self._saved_fd = None
            raise
        finally:
            os.close(target_fd)

        logger.debug("fd %d redirected to %s (%s)", self.fd,
                      self.redirection.target, self.redirection.operator)
        self.stream = open(self.fd, 'w', encoding='utf-8', closefd=False)
        return self.stream

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.restore()
        return False

    def restore(self):
        """Put the saved descriptor back; later calls do nothing"""
        if self._saved_fd is None:
            return
        try:
            if self.stream is not None:
                # Close while fd 1 is still the target so nothing buffered
                # can reach the restored descriptor later
                with contextlib.suppress(OSError):
                    self.stream.close()
            sys.stdout.flush()
        finally:
            os.dup2(self._saved_fd, self.fd)
            os.close(self._saved_fd)
            self._saved_fd = None
            self.stream = None
            logger.debug("fd %d restored", self.fd)
