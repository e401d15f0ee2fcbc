"""Process class for builtin command execution"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from .exceptions import ShellError
from .exit_codes import STATUS_CONTINUE

logger = logging.getLogger(__name__)


class Process:
    """Represents a single builtin invocation: its argument vector and streams"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Callable[['Process'], int]] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name (element 0 of the argument vector)
            args: Command arguments (the remaining elements)
            stdout: Output stream (defaults to sys.stdout at call time)
            stderr: Error stream (defaults to sys.stderr at call time)
            executor: Builtin handler that receives this process
        """
        self.command = command
        self.args = args
        self._stdout = stdout
        self._stderr = stderr
        self.executor = executor
        self.status = STATUS_CONTINUE

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def argv(self) -> List[str]:
        """Full argument vector, command name first"""
        return [self.command] + list(self.args)

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Loop status (STATUS_STOP or STATUS_CONTINUE)
        """
        if self.executor is None:
            self.stderr.write(f"lsh: {self.command}: command not found\n")
            self.status = STATUS_CONTINUE
            return self.status

        logger.debug("running builtin %r with args %r", self.command, self.args)
        try:
            self.status = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except ShellError as e:
            logger.debug("builtin %r failed with exit code %d", self.command, e.exit_code)
            self.stderr.write(f"{e}\n")
            self.status = STATUS_CONTINUE
        except Exception as e:
            logger.debug("builtin %r failed", self.command, exc_info=True)
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.status = STATUS_CONTINUE

        try:
            self.stdout.flush()
        except OSError as e:
            # e.g. ENOSPC once output is redirected to a full device
            self.stderr.write(f"{self.command}: write error: {e.strerror or e}\n")
        self.stderr.flush()

        return self.status

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
