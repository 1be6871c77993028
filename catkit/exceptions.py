"""
Custom exception hierarchy for catkit.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from catkit.exceptions import FileOpenError, translate_os_error

    try:
        handle = filesystem.open_file(path)
    except OSError as e:
        raise translate_os_error(e, path)
"""

import os
from typing import Callable, Optional

from .exit_codes import EXIT_COMMAND_NOT_FOUND, EXIT_FAILURE


class CatError(Exception):
    """
    Base class for all catkit errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# File System Errors
# =============================================================================

class FileSystemError(CatError):
    """
    Base class for filesystem-related errors.

    Raised when filesystem operations fail.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = EXIT_FAILURE):
        super().__init__(message, exit_code)
        self.path = path


class FileOpenError(FileSystemError):
    """
    Raised when a named path cannot be opened for reading.

    Every cause (missing file, permission denied, directory, ...) is the
    same error kind; only the reason text differs.

    Example:
        raise FileOpenError("/path/to/file", "No such file or directory", errno.ENOENT)
    """

    def __init__(self, path: str, reason: str, errno: Optional[int] = None):
        super().__init__(f"{path}: {reason}", path, exit_code=EXIT_FAILURE)
        self.reason = reason
        self.errno = errno


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(CatError):
    """
    Base class for command-related errors.

    Raised when command lookup or execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is not registered.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=EXIT_COMMAND_NOT_FOUND)


# =============================================================================
# Utility Functions
# =============================================================================

def translate_os_error(error: OSError, path: str,
                       describe_error: Callable[[int], str] = os.strerror) -> FileOpenError:
    """
    Translate an OSError raised while opening a file to FileOpenError.

    The reason text comes from describe_error(errno). Errors that carry
    no errno fall back to their strerror, then to str(error).

    Args:
        error: The OSError raised by the open call
        path: Path as given by the user
        describe_error: Maps an errno value to a human-readable message

    Returns:
        FileOpenError for path

    Example:
        >>> translate_os_error(OSError(2, 'No such file or directory'), 'x').reason
        'No such file or directory'
    """
    if error.errno is not None:
        reason = describe_error(error.errno)
    elif error.strerror:
        reason = error.strerror
    else:
        reason = str(error)

    return FileOpenError(path, reason, error.errno)
