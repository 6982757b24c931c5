"""Locating executables on the search path and splitting command strings."""

from __future__ import annotations

import os
from typing import Mapping

from .errors import CommandNotFoundError
from .textutil import split_fields


def find_executable(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """Return the path ``name`` would run as, or ``None`` if none is executable.

    An absolute name that is executable is used as it is. Otherwise each
    directory in the environment's ``PATH`` is tried in order.
    """
    if env is None:
        env = os.environ
    if name.startswith("/") and os.access(name, os.X_OK):
        return name
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split_fields(search, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def parse_command(text: str) -> list[str]:
    """Split a command string on spaces into its argument list."""
    argv = split_fields(text, " ")
    if not argv:
        raise CommandNotFoundError()
    return argv


def resolve_command(
    text: str, env: Mapping[str, str] | None = None
) -> tuple[str, list[str]]:
    """Return the executable path and argument list for a command string."""
    argv = parse_command(text)
    path = find_executable(argv[0], env)
    if path is None:
        raise CommandNotFoundError()
    return path, argv