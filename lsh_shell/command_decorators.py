"""Decorator that declares builtin metadata and argument requirements"""

import functools
from typing import Callable, Optional

from .commands.base import validate_arg_count
from .process import Process


def command(min_args: int = 0, max_args: Optional[int] = None, usage: str = ""):
    """
    Declare a builtin's argument requirements.

    The wrapped handler only runs when the argument count is acceptable;
    otherwise CommandSyntaxError is raised, which Process.execute reports.
    The usage string and the first docstring line are attached as
    ``usage`` and ``summary`` for ``help``.

    Example:
        @register_command('cd')
        @command(min_args=1, usage="cd <path>")
        def cmd_cd(process): ...
    """
    def decorator(func: Callable[[Process], int]) -> Callable[[Process], int]:
        @functools.wraps(func)
        def wrapper(process: Process) -> int:
            validate_arg_count(process, min_args, max_args, usage)
            return func(process)

        doc = (func.__doc__ or "").strip()
        wrapper.usage = usage
        wrapper.summary = doc.splitlines()[0] if doc else ""
        return wrapper
    return decorator
