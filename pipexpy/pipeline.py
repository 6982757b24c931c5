"""Opening the end files of a pipeline and running its commands."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Iterable, List, Mapping, Optional, Union

from .command import resolve_command
from .errors import (
    CommandNotFoundError,
    NoSuchFileError,
    PermissionDeniedError,
    PipexError,
)

FILE_MODE = 0o777

Endpoint = Optional[Union[int, IO[bytes]]]


def _open_failure(path: str) -> PipexError:
    if os.access(path, os.F_OK) and not os.access(path, os.R_OK):
        return PermissionDeniedError()
    return NoSuchFileError()


def open_infile(path: str) -> int:
    """Open ``path`` for reading and return its file descriptor."""
    try:
        return os.open(path, os.O_RDONLY)
    except OSError:
        raise _open_failure(path) from None


def open_outfile(path: str, append: bool = False) -> int:
    """Open ``path`` for writing, creating it, and return its file descriptor.

    The file is truncated unless ``append`` is true.
    """
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        return os.open(path, flags, FILE_MODE)
    except OSError:
        raise _open_failure(path) from None


def _exit_status(code: int) -> int:
    return 128 - code if code < 0 else code


def _report(error: PipexError) -> None:
    sys.stderr.write(error.diagnostic)
    sys.stderr.flush()


def run_pipeline(
    commands: Iterable[str],
    stdin: Endpoint = None,
    stdout: Endpoint = None,
    env: Optional[Mapping[str, str]] = None,
) -> List[int]:
    """Run ``commands`` connected by pipes and return each one's exit status.

    A command that cannot be started is reported on standard error and given
    the status 127; the command after it reads an empty input.
    """
    texts = list(commands)
    if not texts:
        raise ValueError("at least one command is required")
    environment = dict(os.environ if env is None else env)
    last = len(texts) - 1
    stages: List[Union[int, subprocess.Popen]] = []
    source: Endpoint = stdin
    previous: Optional[IO[bytes]] = None

    for index, text in enumerate(texts):
        target = stdout if index == last else subprocess.PIPE
        process: Optional[subprocess.Popen] = None
        try:
            path, argv = resolve_command(text, environment)
            process = subprocess.Popen(
                argv, executable=path, stdin=source, stdout=target, env=environment
            )
        except CommandNotFoundError as error:
            _report(error)
            stages.append(error.exit_status)
        except OSError:
            error = CommandNotFoundError()
            _report(error)
            stages.append(error.exit_status)

        if previous is not None:
            previous.close()
            previous = None

        if process is None:
            source = subprocess.DEVNULL
            continue
        stages.append(process)
        if index != last:
            previous = process.stdout
            source = previous

    return [
        stage if isinstance(stage, int) else _exit_status(stage.wait())
        for stage in stages
    ]