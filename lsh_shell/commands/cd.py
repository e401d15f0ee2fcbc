"""
CD command - change the shell's working directory.
"""

import logging
import os

from ..process import Process
from ..command_decorators import command
from ..exit_codes import STATUS_CONTINUE
from . import register_command
from .base import handle_os_error

logger = logging.getLogger(__name__)


@register_command('cd')
@command(min_args=1, usage="cd <path>")
def cmd_cd(process: Process) -> int:
    """
    Change the working directory

    Usage: cd <path>

    The new directory belongs to the shell process itself, so later
    builtins and every program launched afterwards start there.
    """
    path = process.args[0]
    try:
        os.chdir(path)
    except OSError as e:
        return handle_os_error(process, e, path)
    logger.debug("working directory is now %s", os.getcwd())
    return STATUS_CONTINUE
