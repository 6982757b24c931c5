import pytest

from pipexpy.cli import main, run
from pipexpy.errors import ArgumentCountError, NoSuchFileError


def test_wrong_argument_count_raises():
    with pytest.raises(ArgumentCountError):
        run(["a", "b", "c"])


def test_main_wrong_argument_count(capfd):
    assert main(["only", "two"]) == 2
    assert capfd.readouterr().err == "invalid number of arguaments"


def test_two_commands_copy_file(tmp_path):
    text = "hello\nworld\n"
    source = tmp_path / "in.txt"
    source.write_text(text)
    target = tmp_path / "out.txt"
    assert run([str(source), "cat", "cat", str(target)]) == 0
    assert target.read_text() == text


def test_output_is_truncated(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("short\n")
    target = tmp_path / "out.txt"
    target.write_text("a much longer earlier content\n")
    run([str(source), "cat", "cat", str(target)])
    assert target.read_text() == "short\n"


def test_missing_infile_still_runs_second(tmp_path, capfd):
    target = tmp_path / "out.txt"
    status = run([str(tmp_path / "absent"), "cat", "cat", str(target)])
    assert status == 0
    assert target.read_text() == ""
    assert "no such file or directory \n" in capfd.readouterr().err


def test_unknown_second_command(tmp_path, capfd):
    source = tmp_path / "in.txt"
    source.write_text("x\n")
    status = run([str(source), "cat", "no_such_command_pipexpy", str(tmp_path / "o")])
    assert status == 127
    assert "command not found \n" in capfd.readouterr().err


def test_bad_outfile_raises(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("x\n")
    with pytest.raises(NoSuchFileError):
        run([str(source), "cat", "cat", str(tmp_path / "nodir" / "out")])


def test_main_bad_outfile_status(tmp_path, capfd):
    source = tmp_path / "in.txt"
    source.write_text("x\n")
    assert main([str(source), "cat", "cat", str(tmp_path / "nodir" / "out")]) == 1
    assert "no such file or directory \n" in capfd.readouterr().err


def test_main_success(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("line\n")
    target = tmp_path / "out.txt"
    assert main([str(source), "cat", "cat", str(target)]) == 0
    assert target.read_text() == "line\n"