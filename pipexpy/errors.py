"""Exceptions raised by the pipeline runner, each carrying its exit status."""

from __future__ import annotations


class PipexError(Exception):
    """Base class for every failure the runner reports."""

    exit_status: int = 1
    default_message: str = "error"
    _suffix: str = " \n"

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def diagnostic(self) -> str:
        """Text written to standard error when this failure ends the program."""
        return f"{self.message}{self._suffix}"


class CommandNotFoundError(PipexError):
    """A command is empty or cannot be found on the search path."""

    exit_status = 127
    default_message = "command not found"


class NoSuchFileError(PipexError):
    """An input or output file cannot be opened."""

    exit_status = 1
    default_message = "no such file or directory"


class PermissionDeniedError(PipexError):
    """A file exists but the needed access to it is refused."""

    exit_status = 126
    default_message = "permission denied"


class ArgumentCountError(PipexError):
    """The program was started with the wrong number of arguments."""

    exit_status = 2
    default_message = "invalid number of arguaments"
    _suffix = ""