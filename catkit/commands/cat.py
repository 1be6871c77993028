"""
CAT command - concatenate and print files.
"""

import logging
from typing import BinaryIO

from ..context import BUFFER_SIZE
from ..exceptions import FileOpenError, translate_os_error
from ..exit_codes import EXIT_SUCCESS
from ..process import Process
from ..streams import OutputStream
from . import register_command
from .base import handle_open_error

logger = logging.getLogger(__name__)


def copy_stream(source, sink: OutputStream, buffer_size: int = BUFFER_SIZE) -> int:
    """
    Copy source to sink in buffer_size chunks until end of stream.

    Bytes are written exactly as read and in order. Sources that offer
    read1() are read with it, so a pipe or FIFO is copied as data arrives
    instead of once a full buffer has accumulated. The source is not
    closed. Read and write errors propagate to the caller.

    Args:
        source: InputStream or binary file object
        sink: Output stream receiving the bytes
        buffer_size: Maximum bytes per read

    Returns:
        Number of bytes copied
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    read = getattr(source, 'read1', None) or source.read

    total = 0
    while True:
        chunk = read(buffer_size)
        if not chunk:
            break
        sink.write(chunk)
        sink.flush()
        total += len(chunk)
    return total


def open_for_read(process: Process, path: str) -> BinaryIO:
    """
    Open path through the process's filesystem.

    Raises:
        FileOpenError: If the path cannot be opened
    """
    filesystem = process.context.filesystem
    try:
        if filesystem is not None:
            return filesystem.open_file(path)
        # Fallback to local filesystem
        return open(path, 'rb')
    except OSError as e:
        raise translate_os_error(e, path, process.context.describe_error) from e


@register_command('cat')
def cmd_cat(process: Process) -> int:
    """
    Concatenate and print files or stdin

    Usage: cat [file...]
    """
    buffer_size = process.context.buffer_size

    if not process.args:
        copied = copy_stream(process.stdin, process.stdout, buffer_size)
        logger.debug("%s: copied %d bytes from stdin", process.command, copied)
        return EXIT_SUCCESS

    for filename in process.args:
        try:
            handle = open_for_read(process, filename)
        except FileOpenError as e:
            exit_code = handle_open_error(process, e)
            if process.context.is_strict:
                logger.debug("%s: stopping at %r", process.command, filename)
                return exit_code
            continue

        with handle:
            copied = copy_stream(handle, process.stdout, buffer_size)
        logger.debug("%s: copied %d bytes from %r", process.command, copied, filename)

    return EXIT_SUCCESS


__all__ = ['copy_stream', 'open_for_read', 'cmd_cat']
