"""
Built-in shell commands registry.

The commands live in the commands/ directory and register themselves on
import. This module loads them once and exposes the table read-only.
"""

from types import MappingProxyType
from typing import Callable, List, Optional

from .commands import load_all_commands
from .process import Process

# Load all command modules to populate the registry
BUILTINS = MappingProxyType(load_all_commands())


def get_builtin(command: str) -> Optional[Callable[[Process], int]]:
    """
    Get a built-in command handler.

    Args:
        command: The command name to look up (exact match)

    Returns:
        The command function, or None if not found

    Example:
        >>> handler = get_builtin('echo')
        >>> if handler:
        ...     handler(process)
    """
    return BUILTINS.get(command)


def is_builtin(command: str) -> bool:
    return command in BUILTINS


def builtin_names() -> List[str]:
    """Builtin names in registration order"""
    return list(BUILTINS)
