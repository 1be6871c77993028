"""
Pytest configuration and shared fixtures for catkit tests.

This module provides reusable test fixtures for:
- Mock filesystem implementations
- Captured output streams and processes
- Test data and helper utilities
"""

import errno
import io
import os
from typing import Dict, List

import pytest

from catkit.filesystem_interface import FileSystemInterface


# ============================================================================
# Mock Filesystem Implementation
# ============================================================================

class TrackingBytesIO(io.BytesIO):
    """BytesIO that remembers it was closed, so tests can inspect it afterwards."""

    def __init__(self, data: bytes):
        super().__init__(data)
        self.was_closed = False

    def close(self):
        self.was_closed = True
        super().close()


class MockFileSystem(FileSystemInterface):
    """
    Mock filesystem for testing without touching disk.

    Provides an in-memory filesystem that raises the same OSErrors the
    host filesystem raises on open.
    """

    def __init__(self):
        self.files: Dict[str, bytes] = {}
        self.directories: set = {'/'}
        self.unreadable: set = set()
        self.opened: List[TrackingBytesIO] = []
        self.open_calls: List[str] = []

    def open_file(self, path: str):
        """Open a file for reading."""
        self.open_calls.append(path)

        if path in self.directories:
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)

        if path in self.unreadable:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)

        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)

        handle = TrackingBytesIO(self.files[path])
        self.opened.append(handle)
        return handle

    def write_file(self, path: str, data: bytes):
        """Create or overwrite a file."""
        self.files[path] = data

    def create_directory(self, path: str):
        """Create directory."""
        self.directories.add(path)


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def mock_filesystem():
    """
    Provides a mock filesystem for testing.

    Returns:
        MockFileSystem: In-memory filesystem instance

    Example:
        def test_open(mock_filesystem):
            with mock_filesystem.open_file('/test.txt') as f:
                assert f.read() == b'Hello, World!'
    """
    fs = MockFileSystem()

    # Add some default test files
    fs.write_file('/test.txt', b'Hello, World!')
    fs.write_file('/numbers.txt', b'1\n2\n3\n4\n5\n')
    fs.create_directory('/testdir')
    fs.write_file('/testdir/file1.txt', b'File 1 content')
    fs.write_file('/testdir/file2.txt', b'File 2 content')

    return fs


@pytest.fixture
def test_data_dir(tmp_path):
    """
    Provides a temporary directory with test data files.

    Returns:
        pathlib.Path: Path to temporary test directory
    """
    (tmp_path / "test.txt").write_bytes(b"Hello, World!")
    (tmp_path / "numbers.txt").write_bytes(b"1\n2\n3\n4\n5\n")
    (tmp_path / "empty.txt").write_bytes(b"")

    subdir = tmp_path / "subdir"
    subdir.mkdir()
    (subdir / "file1.txt").write_bytes(b"File 1")
    (subdir / "file2.txt").write_bytes(b"File 2")

    return tmp_path


@pytest.fixture
def capture_output():
    """
    Provides in-memory streams for capturing command output.

    Returns:
        tuple: (stdout, stderr) OutputStream/ErrorStream objects
    """
    from catkit.streams import OutputStream, ErrorStream

    stdout = OutputStream(io.BytesIO())
    stderr = ErrorStream(io.BytesIO())

    return stdout, stderr


@pytest.fixture
def make_process(capture_output):
    """
    Provides a factory for cat processes with captured output.

    Example:
        def test_cat(make_process):
            process = make_process(['/test.txt'])
            assert process.execute() == 0
    """
    from catkit.commands.cat import cmd_cat
    from catkit.context import CommandContext, OpenFailurePolicy
    from catkit.process import Process
    from catkit.streams import InputStream

    stdout, stderr = capture_output

    def factory(args, command='mycat', stdin=b'', filesystem=None,
                policy=OpenFailurePolicy.LENIENT, **context_kwargs):
        if filesystem is not None:
            context_kwargs['filesystem'] = filesystem
        context = CommandContext(policy=policy, **context_kwargs)
        return Process(
            command=command,
            args=list(args),
            stdin=InputStream.from_bytes(stdin),
            stdout=stdout,
            stderr=stderr,
            executor=cmd_cat,
            context=context,
        )

    return factory


@pytest.fixture
def mock_process(make_process, mock_filesystem):
    """
    Provides a cat Process instance bound to the mock filesystem.

    Returns:
        Process: Process with no arguments, mock filesystem, captured output
    """
    return make_process([], filesystem=mock_filesystem)


# ============================================================================
# Helper Functions
# ============================================================================

def get_stdout(process) -> str:
    """Get stdout content as string."""
    output = process.get_stdout()
    if isinstance(output, bytes):
        return output.decode('utf-8', errors='replace')
    return output


def get_stderr(process) -> str:
    """Get stderr content as string."""
    error = process.get_stderr()
    if isinstance(error, bytes):
        return error.decode('utf-8', errors='replace')
    return error


def assert_error_contains(process, expected: str):
    """
    Assert that process stderr contains expected string.

    Args:
        process: Process instance with captured output
        expected: Expected string in error output
    """
    error = get_stderr(process)
    assert expected in error, f"Expected '{expected}' in stderr, got: {error}"


# Make helper functions available as pytest helpers
pytest.get_stdout = get_stdout
pytest.get_stderr = get_stderr
pytest.assert_error_contains = assert_error_contains
