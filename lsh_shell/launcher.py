"""
Launching external programs.

A program runs in a forked child that replaces itself with ``execvp``; the
shell blocks until that child has exited or been killed by a signal.
"""

import logging
import os
import sys
from typing import List

from .exceptions import CommandNotFoundError
from .exit_codes import EXIT_FAILURE, STATUS_CONTINUE

logger = logging.getLogger(__name__)

STDERR_FILENO = 2


class Launcher:
    """Runs external programs in the foreground"""

    def launch(self, argv: List[str]) -> int:
        """
        Run ``argv[0]`` with the remaining elements as its arguments.

        The program is looked up on PATH and inherits the environment,
        the working directory and descriptors 0-2 (including any active
        output redirection).

        Returns:
            STATUS_CONTINUE, whatever the program's exit status
        """
        # Anything still buffered would otherwise be written twice
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            pid = os.fork()
        except OSError as e:
            sys.stderr.write(f"lsh: fork failed: {e.strerror or e}\n")
            return STATUS_CONTINUE

        if pid == 0:
            self._exec_child(argv)

        status = self._wait(pid)
        if os.WIFEXITED(status):
            logger.debug("pid %d (%s) exited with %d", pid, argv[0], os.WEXITSTATUS(status))
        else:
            logger.debug("pid %d (%s) killed by signal %d", pid, argv[0], os.WTERMSIG(status))
        return STATUS_CONTINUE

    def _exec_child(self, argv: List[str]):
        """Replace the child image; never returns"""
        exit_code = EXIT_FAILURE
        try:
            os.execvp(argv[0], argv)
        except FileNotFoundError:
            error = CommandNotFoundError(argv[0])
            exit_code = error.exit_code
            _write_stderr(f"lsh: {error}\n")
        except OSError as e:
            _write_stderr(f"lsh: {argv[0]}: {e.strerror or e}\n")
        except ValueError as e:
            # NUL character in the program name or an argument
            _write_stderr(f"lsh: {argv[0]}: {e}\n")
        finally:
            os._exit(exit_code)

    def _wait(self, pid: int) -> int:
        """Block until ``pid`` exits or is killed; stop/continue reports are skipped"""
        logger.debug("waiting for pid %d", pid)
        while True:
            _, status = os.waitpid(pid, os.WUNTRACED)
            if os.WIFEXITED(status) or os.WIFSIGNALED(status):
                return status
            logger.debug("pid %d reported status %#x, waiting again", pid, status)


def _write_stderr(message: str):
    # Raw write: the child must not flush buffers inherited from the parent
    os.write(STDERR_FILENO, message.encode('utf-8', errors='replace'))
