"""File collaborators for the CLI.

Newline translation is disabled both ways: 7-bit packing can emit '\r', which
text mode would otherwise rewrite on read.
"""

from __future__ import annotations

from pathlib import Path

from huffman_text.errors import CannotOpenFile, CannotReadFile, CannotWriteFile, FileAlreadyExists


def read_text_file(path: str | Path) -> str:
    p = Path(path)
    try:
        fp = p.open("r", encoding="utf-8", newline="")
    except OSError as e:
        raise CannotOpenFile(str(p)) from e
    with fp:
        try:
            return fp.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CannotReadFile(str(p)) from e


def write_text_file(path: str | Path, content: str) -> None:
    """Create ``path`` and write ``content``; never overwrites."""
    p = Path(path)
    try:
        fp = p.open("x", encoding="utf-8", newline="")
    except FileExistsError as e:
        raise FileAlreadyExists(str(p)) from e
    except OSError as e:
        raise CannotWriteFile(str(p)) from e
    with fp:
        try:
            fp.write(content)
        except (OSError, UnicodeEncodeError) as e:
            raise CannotWriteFile(str(p)) from e
