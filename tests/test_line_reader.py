import os

import pytest

from shelltools.line_reader import LineReader


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


@pytest.fixture
def opened():
    fds = []

    def make(data: bytes) -> int:
        fd = _pipe_with(data)
        fds.append(fd)
        return fd

    yield make
    for fd in fds:
        os.close(fd)


@pytest.mark.parametrize("size", [1, 2, 3, 7, 300])
def test_lines_independent_of_buffer_size(opened, size):
    text = "first\nsecond\n\nlast"
    reader = LineReader(opened(text.encode()), size)
    assert list(reader) == text.splitlines(keepends=True)


def test_read_line_returns_none_at_end(opened):
    reader = LineReader(opened(b"only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_input(opened):
    assert LineReader(opened(b"")).read_line() is None


def test_line_longer_than_buffer(opened):
    text = "x" * 1000 + "\n" + "y" * 10
    lines = list(LineReader(opened(text.encode()), 16))
    assert "".join(lines) == text
    assert len(lines) == 2


def test_multibyte_split_across_reads(opened):
    text = "héllo wörld\nçà\n"
    assert "".join(LineReader(opened(text.encode()), 1)) == text


def test_every_line_but_last_ends_with_newline(opened):
    lines = list(LineReader(opened(b"a\nb\nc"), 2))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "c"


def test_file_descriptor_from_file(tmp_path):
    path = tmp_path / "data.txt"
    text = "one\ntwo\n"
    path.write_text(text)
    fd = os.open(path, os.O_RDONLY)
    try:
        assert "".join(LineReader(fd, 4)) == text
    finally:
        os.close(fd)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(0, size)


def test_closed_fd_raises_os_error():
    read_end, write_end = os.pipe()
    os.close(write_end)
    os.close(read_end)
    with pytest.raises(OSError):
        LineReader(read_end).read_line()