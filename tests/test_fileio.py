import pytest

from ymcommon.fileio import read_file


def test_reads_whole_contents(tmp_path):
    path = tmp_path / "data.txt"
    content = "first line\nsecond line\n"
    path.write_text(content, encoding="utf-8")
    assert read_file(path) == content


def test_accepts_string_path(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("hello", encoding="utf-8")
    assert read_file(str(path)) == "hello"


def test_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\nb\rc\n")
    assert read_file(path) == "a\r\nb\rc\n"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert read_file(path) == ""


def test_large_file_round_trip(tmp_path):
    path = tmp_path / "big.txt"
    content = "0123456789abcdef" * 10_000
    path.write_text(content, encoding="utf-8")
    result = read_file(path)
    assert len(result) == len(content)
    assert result == content


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_directory_raises(tmp_path):
    with pytest.raises(OSError):
        read_file(tmp_path)