"""
Exception hierarchy for lsh-shell.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Suggested exit codes

Usage:
    from lsh_shell.exceptions import RedirectionError

    try:
        redirection, argv = extract_redirection(argv)
    except RedirectionError as e:
        stderr.write(f"lsh: {e}\\n")
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a builtin nor a program on PATH.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=127)


class CommandSyntaxError(CommandError):
    """
    Raised when a builtin is called with the wrong number of arguments.

    The usage line, when given, is appended to the message.

    Example:
        raise CommandSyntaxError("cd", "expected argument", usage="cd <path>")
    """

    def __init__(self, command: str, details: str, usage: str = ""):
        message = f"{command}: {details}"
        if usage:
            message += f"\nusage: {usage}"
        super().__init__(command, message, exit_code=2)
        self.usage = usage


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for parsing-related errors.

    Raised when an argument vector cannot be interpreted.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message, exit_code=2)
        self.position = position


class RedirectionError(ParsingError):
    """
    Raised when a redirection operator is not followed by a filename.

    Example:
        raise RedirectionError(">", position=2)
    """

    def __init__(self, operator: str, position: Optional[int] = None):
        message = f"syntax error: expected filename after '{operator}'"
        super().__init__(message, position=position)
        self.operator = operator
