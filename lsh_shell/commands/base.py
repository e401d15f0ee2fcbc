"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

import os
from typing import Optional

from ..exceptions import CommandSyntaxError
from ..exit_codes import STATUS_CONTINUE
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        process.stderr.write(f"{process.command}: {message}\n")
    else:
        process.stderr.write(f"{message}\n")


def validate_arg_count(process: Process, min_args: int = 0, max_args: Optional[int] = None,
                       usage: str = ""):
    """
    Validate the number of arguments.

    Args:
        process: The process object
        min_args: Minimum required arguments
        max_args: Maximum allowed arguments (None = unlimited)
        usage: Usage string to display on error

    Raises:
        CommandSyntaxError: too few or too many arguments
    """
    arg_count = len(process.args)

    if arg_count < min_args:
        raise CommandSyntaxError(process.command, "expected argument", usage)

    if max_args is not None and arg_count > max_args:
        raise CommandSyntaxError(process.command, "too many arguments", usage)


def handle_os_error(process: Process, error: OSError, filename: str,
                    command_name: Optional[str] = None) -> int:
    """
    Report an OSError raised while operating on ``filename``.

    The message uses the OS description of the errno when there is one,
    e.g. ``cd: /missing: No such file or directory``.

    Returns:
        STATUS_CONTINUE, errors never stop the shell

    Example:
        try:
            os.chdir(path)
        except OSError as e:
            return handle_os_error(process, e, path)
    """
    cmd = command_name or process.command
    if error.errno is not None:
        detail = error.strerror or os.strerror(error.errno)
    else:
        detail = str(error)
    process.stderr.write(f"{cmd}: {filename}: {detail}\n")
    return STATUS_CONTINUE


__all__ = [
    'write_error',
    'validate_arg_count',
    'handle_os_error',
]
