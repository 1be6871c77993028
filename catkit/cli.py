"""
Console entry points.

mycat and jcat are the same command with different open-failure policies:
mycat reports unopenable files and keeps going, jcat stops at the first
one and exits 1.
"""

import logging
import os
import sys
from typing import List, Optional

from .commands import get_builtin
from .context import CommandContext, OpenFailurePolicy
from .exceptions import CommandNotFoundError
from .exit_codes import EXIT_FAILURE, EXIT_INTERRUPTED
from .filesystem_interface import LocalFileSystem
from .process import Process
from .streams import ErrorStream, InputStream, OutputStream

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = 'CATKIT_LOG_LEVEL'
LOG_FORMAT = '%(name)s: %(levelname)s: %(message)s'

PROGRAMS = {
    'mycat': OpenFailurePolicy.LENIENT,
    'jcat': OpenFailurePolicy.STRICT,
}


def configure_logging(level: Optional[str] = None):
    """
    Send catkit log records to stderr.

    The level defaults to WARNING and can be raised or lowered through
    the CATKIT_LOG_LEVEL environment variable.
    """
    level = (level or os.environ.get(LOG_LEVEL_ENV) or 'WARNING').upper()
    root = logging.getLogger('catkit')
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.WARNING))


def silence_stdout():
    """
    Point the stdout descriptor at /dev/null.

    After the reader of a pipe goes away, the interpreter's final flush of
    stdout would raise BrokenPipeError again at shutdown.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def build_process(prog: str, args: List[str], policy: OpenFailurePolicy) -> Process:
    """Bind a cat process to the real standard streams"""
    executor = get_builtin('cat')
    if executor is None:
        raise CommandNotFoundError('cat')

    context = CommandContext(filesystem=LocalFileSystem(), policy=policy)
    return Process(
        command=prog,
        args=args,
        stdin=InputStream.from_stdin(),
        stdout=OutputStream.to_stdout(),
        stderr=ErrorStream.to_stderr(),
        executor=executor,
        context=context,
    )


def main(argv: Optional[List[str]] = None, prog: str = 'mycat',
         policy: Optional[OpenFailurePolicy] = None) -> int:
    """
    Run cat over argv and return the exit code.

    Args:
        argv: Path arguments, excluding the program name (defaults to sys.argv[1:])
        prog: Program name used as the diagnostic prefix
        policy: Open-failure policy (defaults to the one registered for prog)
    """
    configure_logging()

    if argv is None:
        argv = sys.argv[1:]
    if policy is None:
        policy = PROGRAMS.get(prog, OpenFailurePolicy.LENIENT)

    logger.debug("%s: policy=%s args=%r", prog, policy.value, argv)

    try:
        process = build_process(prog, argv, policy)
        return process.execute()
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
    except BrokenPipeError:
        silence_stdout()
        return EXIT_FAILURE
    except CommandNotFoundError as e:
        sys.stderr.write(f"{prog}: {e}\n")
        return e.exit_code


def mycat_main() -> int:
    return main(prog='mycat')


def jcat_main() -> int:
    return main(prog='jcat')
