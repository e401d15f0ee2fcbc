"""
HELP command - list the builtins.
"""

from ..process import Process
from ..command_decorators import command
from ..exit_codes import STATUS_CONTINUE
from . import BUILTINS, register_command


@register_command('help')
@command(usage="help")
def cmd_help(process: Process) -> int:
    """
    Print the names of the builtin commands

    Usage: help
    """
    out = process.stdout
    out.write("lsh\n")
    out.write("Type program names and arguments, and hit enter.\n")
    out.write("The following are built in:\n")
    for name, handler in BUILTINS.items():
        summary = getattr(handler, 'summary', '')
        if summary:
            out.write(f"  {name:<6} {summary}\n")
        else:
            out.write(f"  {name}\n")
    out.write("Use the man command for information on other programs.\n")
    return STATUS_CONTINUE
