"""
Executor - runs one argument vector.

Order of operations:
1. an empty vector is a no-op
2. a redirection is split off the vector
3. the command is dispatched to a builtin, or else to the launcher
4. standard output is restored if it was redirected
"""

import contextlib
import logging
import sys
from typing import Callable, List, Mapping, Optional, TextIO

from .builtins import BUILTINS
from .exceptions import RedirectionError
from .exit_codes import STATUS_CONTINUE
from .launcher import Launcher
from .process import Process
from .redirection import RedirectedOutput, extract_redirection

logger = logging.getLogger(__name__)


class Executor:
    """
    Dispatches argument vectors to builtins or external programs.

    The executor keeps no state between calls; the working directory and
    the loop status are the only things that carry over, and both live
    outside it.

    Attributes:
        builtins: Mapping from command name to builtin handler
        launcher: Runs anything that is not a builtin
    """

    def __init__(
        self,
        builtins: Optional[Mapping[str, Callable[[Process], int]]] = None,
        launcher: Optional[Launcher] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.builtins = builtins if builtins is not None else BUILTINS
        self.launcher = launcher or Launcher()
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def execute(self, argv: List[str]) -> int:
        """
        Execute one argument vector.

        Args:
            argv: Tokens of one input line, command name first

        Returns:
            STATUS_STOP if the loop should end, STATUS_CONTINUE otherwise
        """
        if not argv:
            return STATUS_CONTINUE

        try:
            redirection, argv = extract_redirection(argv)
        except RedirectionError as e:
            self.stderr.write(f"lsh: {e}\n")
            return STATUS_CONTINUE

        if not argv:
            # "> file" with no command
            self.stderr.write(f"lsh: syntax error: missing command before '{redirection.operator}'\n")
            return STATUS_CONTINUE

        with contextlib.ExitStack() as stack:
            stdout = self.stdout
            if redirection is not None:
                try:
                    stdout = stack.enter_context(RedirectedOutput(redirection))
                except (OSError, ValueError) as e:
                    # ValueError: the target holds a NUL character
                    detail = getattr(e, "strerror", None) or e
                    self.stderr.write(f"lsh: {redirection.target}: {detail}\n")
                    return STATUS_CONTINUE
            return self._dispatch(argv, stdout)

    def _dispatch(self, argv: List[str], stdout: TextIO) -> int:
        handler = self.builtins.get(argv[0])
        if handler is not None:
            process = Process(
                command=argv[0],
                args=argv[1:],
                stdout=stdout,
                stderr=self._stderr,
                executor=handler,
            )
            return process.execute()

        logger.debug("launching %r", argv)
        return self.launcher.launch(argv)
