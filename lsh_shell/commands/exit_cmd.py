"""
EXIT command - leave the shell.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..exit_codes import STATUS_STOP
from . import register_command


@register_command('exit')
@command(usage="exit")
def cmd_exit(process: Process) -> int:
    """
    Stop the read-execute loop

    Usage: exit

    Any arguments are ignored.
    """
    return STATUS_STOP
