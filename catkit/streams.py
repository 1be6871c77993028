"""
Stream wrappers for command input and output.

Commands never touch sys.stdin/sys.stdout directly. They read from an
InputStream and write to an OutputStream/ErrorStream, which wrap either a
real binary file object (the process's standard streams) or an in-memory
buffer (tests, captured output).
"""

import io
import sys
from typing import BinaryIO, Optional, Union


class InputStream:
    """Readable byte stream"""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    @classmethod
    def from_bytes(cls, data: bytes) -> 'InputStream':
        """Create an input stream over an in-memory byte string"""
        return cls(io.BytesIO(data))

    @classmethod
    def from_stdin(cls) -> 'InputStream':
        """Create an input stream over the process's binary stdin"""
        return cls(sys.stdin.buffer)

    def read(self, size: int = -1) -> bytes:
        """
        Read up to size bytes.

        Returns b'' at end of stream. With size < 0 reads everything
        that is left.
        """
        return self.stream.read(size)

    def read1(self, size: int = -1) -> bytes:
        """
        Read up to size bytes with at most one read on the raw stream.

        Returns whatever is already available instead of waiting for size
        bytes, so data from a pipe or terminal is passed on as it arrives.
        """
        read1 = getattr(self.stream, 'read1', None)
        if read1 is None:
            return self.stream.read(size)
        return read1(size)


class OutputStream:
    """
    Writable byte stream.

    Accepts both bytes and str; str is encoded as UTF-8 with
    surrogateescape so that file names which were decoded from the
    filesystem round-trip to their original bytes.
    """

    encoding = 'utf-8'
    errors = 'surrogateescape'

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create an output stream that collects bytes in memory"""
        return cls(io.BytesIO())

    @classmethod
    def to_stdout(cls) -> 'OutputStream':
        """Create an output stream over the process's binary stdout"""
        return cls(sys.stdout.buffer)

    def write(self, data: Union[bytes, str]) -> int:
        if isinstance(data, str):
            data = data.encode(self.encoding, self.errors)
        self.stream.write(data)
        return len(data)

    def flush(self):
        self.stream.flush()

    def get_value(self) -> Optional[bytes]:
        """
        Get everything written so far.

        Only available for in-memory streams; returns None when the stream
        wraps a real file.
        """
        if isinstance(self.stream, io.BytesIO):
            return self.stream.getvalue()
        return None


class ErrorStream(OutputStream):
    """Writable stream for diagnostics"""

    @classmethod
    def to_stderr(cls) -> 'ErrorStream':
        """Create an error stream over the process's binary stderr"""
        return cls(sys.stderr.buffer)
