"""Process class for command execution"""

import logging
from typing import Callable, List, Optional

from .context import CommandContext
from .exit_codes import EXIT_COMMAND_NOT_FOUND, EXIT_FAILURE
from .streams import ErrorStream, InputStream, OutputStream

logger = logging.getLogger(__name__)


class Process:
    """Represents a single command invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdin: Optional[InputStream] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name, used as the prefix of diagnostics
            args: Command arguments
            stdin: Input stream (defaults to an empty in-memory stream)
            stdout: Output stream (defaults to an in-memory buffer)
            stderr: Error stream (defaults to an in-memory buffer)
            executor: Callable that executes the command
            context: CommandContext with run configuration
        """
        self.command = command
        self.args = args
        self.stdin = stdin or InputStream.from_bytes(b'')
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            self.stderr.write(f"Error: No such command '{self.command}'\n")
            self.exit_code = EXIT_COMMAND_NOT_FOUND
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except BrokenPipeError:
            # Nobody is reading stdout any more; nothing useful to report
            raise
        except Exception as e:
            logger.debug("%s failed", self.command, exc_info=True)
            self.stderr.write(f"{self.command}: {e}\n")
            self.exit_code = EXIT_FAILURE

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> Optional[bytes]:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> Optional[bytes]:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
