import os

import pytest

from shelltools.pipex import (
    PipexError,
    find_command_path,
    main,
    parse_command,
    run_pipeline,
)


def test_parse_command_drops_empty_words():
    assert parse_command("ls  -l   -a") == ["ls", "-l", "-a"]


def test_parse_command_empty():
    assert parse_command("   ") == []


def test_find_command_path_with_slash_is_unchanged():
    assert find_command_path("./prog", {"PATH": "/nowhere"}) == "./prog"
    assert find_command_path("a/b", {}) == "a/b"


def test_find_command_path_without_path_variable():
    assert find_command_path("tool", {"HOME": "/tmp"}) is None


def test_find_command_path_searches_directories(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    bindir = tmp_path / "bin"
    bindir.mkdir()
    (bindir / "tool").write_text("")
    env = {"PATH": f"::{empty}:{bindir}"}
    assert find_command_path("tool", env) == f"{bindir}/tool"


def test_find_command_path_first_match_wins(tmp_path):
    one = tmp_path / "one"
    two = tmp_path / "two"
    for directory in (one, two):
        directory.mkdir()
        (directory / "tool").write_text("")
    assert find_command_path("tool", {"PATH": f"{one}:{two}"}) == f"{one}/tool"


def test_find_command_path_missing(tmp_path):
    assert find_command_path("tool", {"PATH": str(tmp_path)}) is None


def test_run_pipeline_transforms_input(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("hello\nworld\n")
    status = run_pipeline(infile, "cat", "tr a-z A-Z", outfile, os.environ)
    assert status == 0
    assert outfile.read_text() == "HELLO\nWORLD\n"


def test_run_pipeline_truncates_output(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("abc\n")
    outfile.write_text("old content that is longer\n")
    run_pipeline(infile, "cat", "cat", outfile, os.environ)
    assert outfile.read_text() == "abc\n"


def test_run_pipeline_missing_input_still_runs_second(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(tmp_path / "absent", "cat", "cat", outfile, os.environ)
    assert status == 0
    assert outfile.read_text() == ""
    assert "error" in capsys.readouterr().err


def test_run_pipeline_unknown_second_command(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("x\n")
    status = run_pipeline(
        infile, "cat", "no-such-command-here", tmp_path / "out", os.environ
    )
    assert status == 127
    assert "finding command path" in capsys.readouterr().err


def test_run_pipeline_empty_second_command(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("x\n")
    status = run_pipeline(infile, "cat", "", tmp_path / "out", os.environ)
    assert status == 127
    assert "Command is empty" in capsys.readouterr().err


def test_run_pipeline_bad_output_raises(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("x\n")
    with pytest.raises(PipexError):
        run_pipeline(infile, "cat", "cat", tmp_path / "no" / "out", os.environ)


def test_main_bad_arguments(capsys):
    assert main(["only", "three", "args"]) == 1
    captured = capsys.readouterr()
    assert "Error: Bad arguments" in captured.err
    assert "Usage" in captured.out


def test_main_runs_pipeline(tmp_path):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("b\na\n")
    assert main([str(infile), "cat", "sort", str(outfile)]) == 0
    assert outfile.read_text() == "a\nb\n"


def test_main_output_error_returns_one(tmp_path, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("x\n")
    assert main([str(infile), "cat", "cat", str(tmp_path / "no" / "out")]) == 1
    assert "error" in capsys.readouterr().err