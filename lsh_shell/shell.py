"""Shell: the read-execute loop around the executor"""

import logging
from typing import Optional, TextIO

from .config import ShellConfig
from .executor import Executor
from .exit_codes import STATUS_CONTINUE, STATUS_STOP
from .reader import LineReader
from .tokenizer import split_line

logger = logging.getLogger(__name__)


class Shell:
    """
    Reads lines, tokenizes them and hands the tokens to the executor.

    One line is fully executed, output restoration included, before the
    next one is read.

    Attributes:
        config: Session settings
        reader: Source of command lines
        executor: Runs each argument vector
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Executor] = None,
    ):
        self.config = config or ShellConfig()
        self.reader = LineReader(stdin, prompt=self.config.prompt, prompt_stream=stdout)
        self.executor = executor or Executor(stdout=stdout, stderr=stderr)

    def execute(self, line: str) -> int:
        """
        Execute one command line.

        Returns:
            STATUS_STOP or STATUS_CONTINUE
        """
        argv = split_line(line)
        logger.debug("tokens: %r", argv)
        return self.executor.execute(argv)

    def loop(self) -> int:
        """
        Read and execute lines until ``exit`` or end of input.

        Returns:
            The status that ended the loop (always STATUS_STOP)
        """
        status = STATUS_CONTINUE
        while status != STATUS_STOP:
            line = self.reader.read_line()
            if line is None:
                logger.debug("end of input")
                break
            status = self.execute(line)
        return STATUS_STOP
