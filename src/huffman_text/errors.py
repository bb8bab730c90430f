"""Typed errors for huffman-text.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Core components raise a ``HuffmanError`` subclass carrying an ``ErrorKind``.
- The facade wraps those into ``CompressionError`` (same kind, same detail).
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_CORRUPT_INPUT = 11
EXIT_IO = 12


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid format spec, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (invalid tree, unexpected error, etc.)"),
    ExitCodeInfo(
        EXIT_CORRUPT_INPUT,
        "CORRUPT_INPUT",
        "Compressed input does not parse or its payload cannot be decoded",
    ),
    ExitCodeInfo(EXIT_IO, "IO", "Input/output file cannot be opened, read or written"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE — do not edit manually.\n")
    lines.append("> Source of truth: `src/huffman_text/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Error kinds\n\n")
    lines.append("| Kind | Exit code |\n")
    lines.append("|---|---:|\n")
    for kind in ErrorKind:
        lines.append(f"| `{kind.value}` | {_EXIT_CODE_BY_KIND[kind]} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every internal error extends `HuffmanTextError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# -----------
# Error kinds
# -----------


class ErrorKind(str, Enum):
    INVALID_TREE = "InvalidTree"
    ITEM_NOT_FOUND = "ItemNotFound"
    ENCODING = "EncodingError"
    DECODING = "DecodingError"
    DESERIALIZATION = "DeserializationError"


_EXIT_CODE_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_TREE: EXIT_GENERIC,
    ErrorKind.ITEM_NOT_FOUND: EXIT_GENERIC,
    ErrorKind.ENCODING: EXIT_GENERIC,
    ErrorKind.DECODING: EXIT_CORRUPT_INPUT,
    ErrorKind.DESERIALIZATION: EXIT_CORRUPT_INPUT,
}


# ---------------
# Typed exceptions
# ---------------


class HuffmanTextError(Exception):
    """Base error for huffman-text."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffmanTextError):
    exit_code = EXIT_USAGE


class HuffmanError(HuffmanTextError):
    """Failure inside the coding core (tree, code table, bit stream, wire format)."""

    kind: ErrorKind = ErrorKind.ENCODING

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        return _EXIT_CODE_BY_KIND[self.kind]

    def __str__(self) -> str:
        if not self.detail:
            return self.kind.value
        return f"{self.kind.value}: {self.detail}"


class InvalidTree(HuffmanError):
    kind = ErrorKind.INVALID_TREE


class ItemNotFound(HuffmanError):
    kind = ErrorKind.ITEM_NOT_FOUND


class EncodingError(HuffmanError):
    kind = ErrorKind.ENCODING


class DecodingError(HuffmanError):
    kind = ErrorKind.DECODING


class DeserializationError(HuffmanError):
    kind = ErrorKind.DESERIALIZATION


class CompressionError(HuffmanTextError):
    """Raised by ``compress``/``decompress``: one error type, inspectable ``kind``."""

    def __init__(self, kind: ErrorKind, detail: str) -> None:
        super().__init__(detail)
        self.kind = kind
        self.detail = detail

    @property
    def exit_code(self) -> int:  # type: ignore[override]
        return _EXIT_CODE_BY_KIND[self.kind]

    def __str__(self) -> str:
        return f"{self.detail} ({self.kind.value})"


class FileError(HuffmanTextError):
    exit_code = EXIT_IO

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class CannotOpenFile(FileError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"cannot open file: {path}")


class CannotReadFile(FileError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"cannot read file: {path}")


class CannotWriteFile(FileError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"cannot write file: {path}")


class FileAlreadyExists(FileError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"file already exists: {path}")
