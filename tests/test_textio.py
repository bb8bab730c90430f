from __future__ import annotations

from pathlib import Path

import pytest

from huffman_text.compressor import compress, decompress
from huffman_text.errors import (
    EXIT_IO,
    CannotOpenFile,
    CannotReadFile,
    CannotWriteFile,
    FileAlreadyExists,
)
from huffman_text.textio import read_text_file, write_text_file


def test_write_then_read_preserves_control_chars(tmp_path: Path) -> None:
    p = tmp_path / "out.huf"
    content = "a\r\nb\rc\x00\x7f é"
    write_text_file(p, content)
    assert read_text_file(p) == content
    assert p.read_bytes() == content.encode("utf-8")


def test_wire_survives_the_filesystem(tmp_path: Path) -> None:
    text = "line one\r\nline two\rline three\n" * 20
    p = tmp_path / "out.huf"
    write_text_file(p, compress(text))
    assert decompress(read_text_file(p)) == text


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CannotOpenFile) as ei:
        read_text_file(tmp_path / "missing.txt")
    assert ei.value.exit_code == EXIT_IO
    assert "missing.txt" in str(ei.value)


def test_read_directory_is_an_open_error(tmp_path: Path) -> None:
    with pytest.raises(CannotOpenFile):
        read_text_file(tmp_path)


def test_read_invalid_utf8(tmp_path: Path) -> None:
    p = tmp_path / "bad.txt"
    p.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(CannotReadFile):
        read_text_file(p)


def test_write_never_overwrites(tmp_path: Path) -> None:
    p = tmp_path / "exists.txt"
    p.write_text("keep me", encoding="utf-8")
    with pytest.raises(FileAlreadyExists):
        write_text_file(p, "new content")
    assert p.read_text(encoding="utf-8") == "keep me"


def test_write_into_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(CannotWriteFile):
        write_text_file(tmp_path / "no" / "such" / "dir.txt", "x")
