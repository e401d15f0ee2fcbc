"""
Status values shared by the executor, builtins and the CLI.

Loop statuses tell the read-execute loop whether to keep going; they are
not process exit codes.
"""

# Returned by execute(): stop the loop (only `exit` and end of input do this)
STATUS_STOP = 0

# Returned by execute(): read the next line
STATUS_CONTINUE = 1

# Process exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
