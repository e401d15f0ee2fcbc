"""
Builtin command modules.

Each module registers its handler with ``register_command``; the package
level ``BUILTINS`` dict is filled when ``load_all_commands`` imports them.
"""

import importlib
from typing import Callable, Dict

from ..process import Process

BUILTINS: Dict[str, Callable[[Process], int]] = {}

# Import order is registration order, which is the order `help` lists
COMMAND_MODULES = (
    'cd',
    'help',
    'exit_cmd',
    'type_cmd',
    'echo',
    'pwd',
)


def register_command(name: str):
    """
    Register a handler under ``name``.

    Raises:
        ValueError: if a handler is already registered under ``name``
    """
    def decorator(func):
        if name in BUILTINS:
            raise ValueError(f"builtin '{name}' is already registered")
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable[[Process], int]]:
    """Import every command module so that each one registers itself"""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'.{module_name}', __name__)
    return BUILTINS
