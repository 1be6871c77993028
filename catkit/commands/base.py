"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to report errors consistently.
"""

from ..exceptions import FileOpenError
from ..exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from ..process import Process


def handle_open_error(process: Process, error: FileOpenError) -> int:
    """
    Report a file that could not be opened.

    Writes "<command>: <path>: <reason>" to stderr and returns the exit
    code the process's open-failure policy assigns to it: 1 under the
    strict policy, 0 under the lenient one.

    Args:
        process: Process object with stderr stream and context
        error: The translated open failure

    Returns:
        Exit code for this failure

    Example:
        try:
            handle = open_for_read(process, path)
        except FileOpenError as e:
            exit_code = handle_open_error(process, e)
    """
    process.stderr.write(f"{process.command}: {error.path}: {error.reason}\n")
    process.stderr.flush()

    if process.context.is_strict:
        return EXIT_FAILURE
    return EXIT_SUCCESS


__all__ = [
    'handle_open_error',
]
