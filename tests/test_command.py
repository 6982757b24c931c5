import os

import pytest

from pipexpy.command import find_executable, parse_command, resolve_command
from pipexpy.errors import CommandNotFoundError


def make_file(directory, name, mode):
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("#!/bin/sh\n")
    os.chmod(path, mode)
    return path


def test_finds_in_path(tmp_path):
    bin_dir = tmp_path / "bin"
    make_file(bin_dir, "tool", 0o755)
    env = {"PATH": str(bin_dir)}
    assert find_executable("tool", env) == f"{bin_dir}/tool"


def test_first_directory_wins(tmp_path):
    first, second = tmp_path / "a", tmp_path / "b"
    make_file(first, "tool", 0o755)
    make_file(second, "tool", 0o755)
    env = {"PATH": f"{first}:{second}"}
    assert find_executable("tool", env) == f"{first}/tool"


def test_skips_non_executable(tmp_path):
    first, second = tmp_path / "a", tmp_path / "b"
    make_file(first, "tool", 0o644)
    make_file(second, "tool", 0o755)
    env = {"PATH": f"{first}:{second}"}
    assert find_executable("tool", env) == f"{second}/tool"


def test_empty_path_entries_ignored(tmp_path):
    bin_dir = tmp_path / "bin"
    make_file(bin_dir, "tool", 0o755)
    env = {"PATH": f"::{bin_dir}:"}
    assert find_executable("tool", env) == f"{bin_dir}/tool"


def test_absolute_executable_returned_as_is(tmp_path):
    path = make_file(tmp_path, "tool", 0o755)
    assert find_executable(str(path), {}) == str(path)


def test_missing_path_variable(tmp_path):
    make_file(tmp_path, "tool", 0o755)
    assert find_executable("tool", {"HOME": str(tmp_path)}) is None


def test_not_found_anywhere(tmp_path):
    assert find_executable("nothing-here", {"PATH": str(tmp_path)}) is None


def test_parse_command_splits_on_spaces():
    assert parse_command("grep  -v  test") == ["grep", "-v", "test"]


@pytest.mark.parametrize("text", ["", "   "])
def test_parse_empty_command_fails(text):
    with pytest.raises(CommandNotFoundError):
        parse_command(text)


def test_resolve_command(tmp_path):
    bin_dir = tmp_path / "bin"
    make_file(bin_dir, "tool", 0o755)
    path, argv = resolve_command("tool -x arg", {"PATH": str(bin_dir)})
    assert path == f"{bin_dir}/tool"
    assert argv == ["tool", "-x", "arg"]


def test_resolve_unknown_command(tmp_path):
    with pytest.raises(CommandNotFoundError):
        resolve_command("nothing-here", {"PATH": str(tmp_path)})


def test_resolve_empty_command(tmp_path):
    with pytest.raises(CommandNotFoundError):
        resolve_command("", {"PATH": str(tmp_path)})