import io

import pytest

from solong.lines import BUFFER_SIZE, LineReader, read_lines

SAMPLE = "1111111\n1P0C0E1\n1111111\n"


@pytest.mark.parametrize("size", [1, 2, 3, BUFFER_SIZE, 7, 8, 100])
def test_lines_rejoin_to_input(size):
    lines = list(LineReader(io.StringIO(SAMPLE), size))
    assert "".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


def test_each_line_ends_with_newline():
    lines = list(LineReader(io.StringIO(SAMPLE)))
    assert all(line.endswith("\n") for line in lines)
    assert all(line.count("\n") == 1 for line in lines)


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("ab\ncd"), 3)
    assert reader.readline() == "ab\n"
    assert reader.readline() == "cd"
    assert reader.readline() is None


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.readline() is None
    assert list(reader) == []


def test_blank_lines_are_kept():
    lines = list(LineReader(io.StringIO("\n\nx\n"), 2))
    assert lines == ["\n", "\n", "x\n"]


def test_binary_stream():
    data = b"one\ntwo\nthree"
    lines = list(LineReader(io.BytesIO(data), 4))
    assert lines == data.splitlines(keepends=True)


def test_readline_after_end_keeps_returning_none():
    reader = LineReader(io.StringIO("x\n"))
    assert reader.readline() == "x\n"
    assert reader.readline() is None
    assert reader.readline() is None


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(SAMPLE), size)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    reader = LineReader(_FailingStream())
    with pytest.raises(OSError):
        reader.readline()


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(SAMPLE, encoding="utf-8")
    assert read_lines(path) == SAMPLE.splitlines(keepends=True)


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "absent.ber")