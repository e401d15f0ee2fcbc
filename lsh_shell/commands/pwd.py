"""
PWD command - print working directory.
"""

import os

from ..process import Process
from ..command_decorators import command
from ..exit_codes import STATUS_CONTINUE
from . import register_command
from .base import write_error


@register_command('pwd')
@command(usage="pwd")
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd
    """
    try:
        cwd = os.getcwd()
    except OSError as e:
        write_error(process, e.strerror or str(e))
        return STATUS_CONTINUE
    process.stdout.write(f"{cwd}\n")
    return STATUS_CONTINUE
