"""Whitespace tokenizer for command lines.

Splitting is the only lexical step: there is no quoting, escaping or
variable expansion. A quoted word such as ``"a b"`` becomes the two tokens
``'"a'`` and ``'b"'``.
"""

import re
from typing import List

# space, tab, carriage return, newline, bell
TOKEN_DELIMITERS = " \t\r\n\a"

_DELIMITER_RUN = re.compile("[" + re.escape(TOKEN_DELIMITERS) + "]+")


def split_line(line: str) -> List[str]:
    """
    Split a raw command line into an argument vector.

    Runs of delimiters collapse, so no token is ever empty. A blank or
    all-delimiter line yields an empty list.

    Examples:
        >>> split_line("cd   /tmp")
        ['cd', '/tmp']
        >>> split_line(" \\t\\n")
        []
    """
    return [token for token in _DELIMITER_RUN.split(line) if token]
