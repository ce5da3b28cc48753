import os

import pytest

from cub3d.line_reader import LineReader, read_lines


@pytest.fixture
def open_bytes(tmp_path):
    fds = []

    def _open(data: bytes) -> int:
        path = tmp_path / f"input{len(fds)}.cub"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        fds.append(fd)
        return fd

    yield _open
    for fd in fds:
        os.close(fd)


def test_lines_keep_newlines(open_bytes):
    fd = open_bytes(b"NO ./north\n111\n1N1")
    assert read_lines(fd) == ["NO ./north\n", "111\n", "1N1"]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100000])
def test_buffer_size_does_not_change_result(open_bytes, size):
    data = b"first line\n\nthird\n  1111  \nlast"
    assert "".join(read_lines(open_bytes(data), size)) == data.decode()
    assert read_lines(open_bytes(data), size) == read_lines(open_bytes(data))


def test_empty_input_gives_no_lines(open_bytes):
    fd = open_bytes(b"")
    reader = LineReader(fd)
    assert reader.next_line() is None
    assert read_lines(fd) == []


def test_none_repeatedly_after_end(open_bytes):
    reader = LineReader(open_bytes(b"only\n"), 4)
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_line_ends_at_nul_byte(open_bytes):
    reader = LineReader(open_bytes(b"ab\0cd\nxy"))
    assert reader.next_line() == "ab"
    assert reader.next_line() == "xy"


def test_iteration_yields_each_line(open_bytes):
    reader = LineReader(open_bytes(b"1\n2\n3\n"), 2)
    assert list(reader) == ["1\n", "2\n", "3\n"]


def test_reading_after_end_picks_up_new_data():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"a\n")
        reader = LineReader(read_fd)
        assert reader.next_line() == "a\n"
        os.write(write_fd, b"b\n")
        assert reader.next_line() == "b\n"
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_invalid_descriptor_raises(tmp_path):
    path = tmp_path / "closed.cub"
    path.write_bytes(b"x\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd).next_line()


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(0, size)