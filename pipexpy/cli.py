"""Command line entry point: ``infile cmd1 cmd2 outfile``."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence

from .errors import ArgumentCountError, PipexError
from .pipeline import open_infile, open_outfile, run_pipeline


def run(args: Sequence[str], env: Optional[Mapping[str, str]] = None) -> int:
    """Run ``cmd1 < infile | cmd2 > outfile`` and return the exit status.

    A missing or unreadable input file is reported and the second command
    still runs with empty input; a failing output file raises.
    """
    if len(args) != 4:
        raise ArgumentCountError()
    infile, first, second, outfile = args

    source: Optional[int]
    try:
        source = open_infile(infile)
    except PipexError as error:
        sys.stderr.write(error.diagnostic)
        sys.stderr.flush()
        source = None

    try:
        target = open_outfile(outfile)
    except PipexError:
        if source is not None:
            try:
                run_pipeline([first], source, subprocess.DEVNULL, env)
            finally:
                os.close(source)
        raise

    try:
        if source is None:
            return run_pipeline([second], subprocess.DEVNULL, target, env)[-1]
        return run_pipeline([first, second], source, target, env)[-1]
    finally:
        os.close(target)
        if source is not None:
            os.close(source)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program with ``argv`` (default: the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        return run(args)
    except PipexError as error:
        sys.stderr.write(error.diagnostic)
        sys.stderr.flush()
        return error.exit_status


if __name__ == "__main__":
    sys.exit(main())