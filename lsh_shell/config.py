"""
Shell configuration.

Settings come from defaults, then ``LSH_*`` environment variables, then
command line flags (applied by the CLI with ``dataclasses.replace``).
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PROMPT = "> "
DEFAULT_LOG_LEVEL = "WARNING"

ENV_PROMPT = "LSH_PROMPT"
ENV_LOG_LEVEL = "LSH_LOG_LEVEL"
ENV_LOG_FILE = "LSH_LOG_FILE"


@dataclass
class ShellConfig:
    """
    Settings for one shell session.

    Attributes:
        prompt: Text written before each line is read ('' for none)
        log_level: Name of a logging level, e.g. 'DEBUG'
        log_file: Write the log here instead of stderr
    """

    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """
        Build a config from ``LSH_PROMPT``, ``LSH_LOG_LEVEL`` and ``LSH_LOG_FILE``.

        Examples:
            >>> ShellConfig.from_env({'LSH_PROMPT': '$ '}).prompt
            '$ '
        """
        if environ is None:
            environ = os.environ
        config = cls(
            prompt=environ.get(ENV_PROMPT, DEFAULT_PROMPT),
            log_level=environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
            log_file=environ.get(ENV_LOG_FILE) or None,
        )
        config.validate()
        return config

    def validate(self):
        """
        Raises:
            ValueError: log_level is not a logging level name
        """
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"invalid log level: {self.log_level!r}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())
