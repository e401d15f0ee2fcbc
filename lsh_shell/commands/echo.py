"""
ECHO command - print arguments.
"""

from typing import List

from ..process import Process
from ..command_decorators import command
from ..exit_codes import STATUS_CONTINUE
from . import register_command

QUOTE_CHARS = ("'", '"')


def unwrap_quotes(args: List[str]) -> List[str]:
    """
    Strip a surrounding quote pair spread across the argument list.

    If the first argument starts with a quote character, that character is
    removed from it, and removed from the end of the last argument when it
    ends with the same character. This is a textual patch over whitespace
    tokenization, not quote parsing: ``"a   b"`` still prints as ``a b``
    and an unmatched quote only loses its opening character.

    Examples:
        >>> unwrap_quotes(['"hello', 'world"'])
        ['hello', 'world']
        >>> unwrap_quotes(["'x"])
        ['x']
    """
    if not args or not args[0] or args[0][0] not in QUOTE_CHARS:
        return list(args)

    quote = args[0][0]
    words = list(args)
    words[0] = words[0][1:]
    if words[-1].endswith(quote):
        words[-1] = words[-1][:-1]
    return words


@register_command('echo')
@command(usage="echo [args...]")
def cmd_echo(process: Process) -> int:
    """
    Print the arguments separated by spaces

    Usage: echo [args...]
    """
    process.stdout.write(' '.join(unwrap_quotes(process.args)) + '\n')
    return STATUS_CONTINUE
