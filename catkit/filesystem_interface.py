"""
FileSystemInterface - Abstract interface for filesystem operations.

This module provides the FileSystemInterface abstract base class that allows
commands to work with any filesystem implementation (Local, Mock).
"""

import logging
from abc import ABC, abstractmethod
from typing import BinaryIO

logger = logging.getLogger(__name__)


class FileSystemInterface(ABC):
    """
    Abstract interface for filesystem operations.

    This allows commands to work with any filesystem implementation:
    - LocalFileSystem (the host filesystem)
    - MockFileSystem (testing without touching disk)
    """

    @abstractmethod
    def open_file(self, path: str) -> BinaryIO:
        """
        Open a file for reading in binary mode.

        The caller owns the returned handle and must close it; handles
        support the context manager protocol.

        Args:
            path: File path (absolute or relative to the working directory)

        Returns:
            Readable binary file object

        Raises:
            OSError: If the file cannot be opened. errno identifies the
                cause (ENOENT, EACCES, EISDIR, ...).
        """
        pass


class LocalFileSystem(FileSystemInterface):
    """Host filesystem, opened with the builtin open()"""

    def open_file(self, path: str) -> BinaryIO:
        logger.debug("opening %r", path)
        return open(path, 'rb')
