"""
TYPE command - tell whether a name is a builtin.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..process import Process
from ..command_decorators import command
from ..exit_codes import STATUS_CONTINUE
from . import BUILTINS, register_command
from .base import write_error


@register_command('type')
@command(min_args=1, usage="type <name>...")
def cmd_type(process: Process) -> int:
    """
    Report whether each name is a shell builtin

    Usage: type <name>...

    Only the builtin table is consulted; PATH is not searched, so external
    programs are reported as not found.
    """
    for name in process.args:
        if name in BUILTINS:
            process.stdout.write(f"{name} is a shell builtin\n")
        else:
            write_error(process, f"{name}: not found")
    return STATUS_CONTINUE
