"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that carries the
configuration of a run (where files come from, how open failures are
treated, how errors are described) so commands take no hidden globals
and tests can swap any piece.
"""

import enum
import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from .filesystem_interface import FileSystemInterface, LocalFileSystem

# Transfer buffer capacity in bytes
BUFFER_SIZE = 8192


class OpenFailurePolicy(enum.Enum):
    """What to do when a named file cannot be opened"""

    # Report the failure, keep going, exit 0
    LENIENT = 'lenient'
    # Report the failure, stop immediately, exit 1
    STRICT = 'strict'


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with:
    - The filesystem to open named paths on
    - The open-failure policy
    - The errno-to-message describer used in diagnostics
    - The transfer buffer size

    Example:
        >>> from catkit.context import CommandContext, OpenFailurePolicy
        >>> ctx = CommandContext(policy=OpenFailurePolicy.STRICT)
        >>> ctx.is_strict
        True
        >>> ctx.describe_error(2)
        'No such file or directory'
    """

    filesystem: Optional[FileSystemInterface] = field(default_factory=LocalFileSystem)
    policy: OpenFailurePolicy = OpenFailurePolicy.LENIENT
    describe_error: Callable[[int], str] = os.strerror
    buffer_size: int = BUFFER_SIZE

    def __post_init__(self):
        if self.buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")

    @property
    def is_strict(self) -> bool:
        return self.policy is OpenFailurePolicy.STRICT

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(filesystem={type(self.filesystem).__name__}, "
            f"policy={self.policy.value}, "
            f"buffer_size={self.buffer_size})"
        )
