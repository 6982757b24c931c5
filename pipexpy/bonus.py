"""Extended entry point: many commands, here-documents and a typed pipe."""

from __future__ import annotations

import os
import sys
import tempfile
from typing import IO, List, Mapping, Optional, Sequence

from .cli import run
from .errors import ArgumentCountError, NoSuchFileError, PipexError
from .lines import LineReader
from .pipeline import open_infile, open_outfile, run_pipeline
from .textutil import split_fields, trim

HEREDOC_KEYWORD = "here_doc"
HEREDOC_PROMPT = "heredoc> "
PIPE_PROMPT = "pipex >"


def read_heredoc(
    limiter: str, stream: Optional[IO] = None, prompt: Optional[IO[str]] = None
):
    """Collect lines from ``stream`` until a line equal to ``limiter``.

    A prompt is written to ``prompt`` before each line is read. Reading also
    stops at the end of the stream.
    """
    stream = sys.stdin if stream is None else stream
    prompt = sys.stdout if prompt is None else prompt
    reader = LineReader(stream)
    collected = []
    terminator = None
    while True:
        prompt.write(HEREDOC_PROMPT)
        prompt.flush()
        line = reader.read_line()
        if line is None:
            break
        if terminator is None:
            terminator = (
                (limiter + "\n").encode() if isinstance(line, bytes) else limiter + "\n"
            )
        if line == terminator:
            break
        collected.append(line)
    if collected and isinstance(collected[0], bytes):
        return b"".join(collected)
    return "".join(collected)


def rewrite_manual_pipe(args: Sequence[str], line: Optional[str]) -> List[str]:
    """Complete ``infile cmd1 |`` with a typed ``cmd2 ... outfile`` line.

    Returns ``[infile, cmd1, cmd2, outfile]``; quotes and spaces around the
    words of the second command are removed.
    """
    if not line:
        raise ArgumentCountError()
    if line.endswith("\n"):
        line = line[:-1]
    words = split_fields(line, " ")
    if len(words) < 2:
        raise ArgumentCountError()
    command = " ".join(trim(word, '" \n') for word in words[:-1])
    return [args[0], args[1], command, words[-1]]


def _read_command_line(stream: IO, prompt: IO[str]) -> Optional[str]:
    prompt.write(PIPE_PROMPT)
    prompt.flush()
    line = LineReader(stream).read_line()
    if isinstance(line, bytes):
        return line.decode()
    return line


def _run_from_files(
    args: Sequence[str], env: Optional[Mapping[str, str]]
) -> int:
    try:
        source = open_infile(args[0])
    except PipexError:
        raise NoSuchFileError() from None
    try:
        target = open_outfile(args[-1])
    except PipexError:
        os.close(source)
        raise NoSuchFileError() from None
    try:
        return run_pipeline(args[1:-1], source, target, env)[-1]
    finally:
        os.close(source)
        os.close(target)


def _run_heredoc(
    args: Sequence[str],
    env: Optional[Mapping[str, str]],
    stdin: IO,
    prompt: IO[str],
) -> int:
    if len(args) < 5:
        raise ArgumentCountError()
    try:
        target = open_outfile(args[-1], append=True)
    except PipexError:
        raise NoSuchFileError() from None
    try:
        text = read_heredoc(args[1], stdin, prompt)
        data = text if isinstance(text, bytes) else text.encode()
        with tempfile.TemporaryFile() as source:
            source.write(data)
            source.seek(0)
            return run_pipeline(args[2:-1], source, target, env)[-1]
    finally:
        os.close(target)


def run_bonus(
    args: Sequence[str],
    env: Optional[Mapping[str, str]] = None,
    stdin: Optional[IO] = None,
    prompt: Optional[IO[str]] = None,
) -> int:
    """Run the extended program with ``args`` and return the exit status."""
    stdin = sys.stdin if stdin is None else stdin
    prompt = sys.stdout if prompt is None else prompt
    args = list(args)

    if len(args) == 3 and args[2].startswith("|"):
        line = _read_command_line(stdin, prompt)
        return run(rewrite_manual_pipe(args, line), env)
    if len(args) > 4 and args[2].startswith("|"):
        return run([args[0], args[1], args[3], args[4]], env)
    if len(args) < 4:
        raise ArgumentCountError()
    if args[0] == HEREDOC_KEYWORD:
        return _run_heredoc(args, env, stdin, prompt)
    return _run_from_files(args, env)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the extended program with ``argv`` (default: the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        return run_bonus(args)
    except PipexError as error:
        sys.stderr.write(error.diagnostic)
        sys.stderr.flush()
        return error.exit_status


if __name__ == "__main__":
    sys.exit(main())