"""huffman-text CLI.

This is the stable CLI entrypoint (console-script: ``huffman-text``).

UX policy:
  - ``--input``/``--output`` are file paths by default; ``--input-type text`` /
    ``--output-type text`` switch to literal text on the command line / stdout.
  - Reports and errors go to stderr with the ``[huffman-text]`` prefix, so
    stdout only ever carries the produced text (or ``OK``).
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from huffman_text.compressor import compress, decompress, inspect
from huffman_text.core.tree import render_tree
from huffman_text.errors import EXIT_GENERIC, EXIT_USAGE, HuffmanTextError, UsageError
from huffman_text.format_spec import DEFAULT_FORMAT, FormatSpec, FormatSpecError, load_format_spec
from huffman_text.textio import read_text_file, write_text_file

PROG = "huffman-text"
IO_TYPES = ("file", "text")


def _report(msg: str) -> None:
    print(f"[{PROG}] {msg}", file=sys.stderr)


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--format",
        default=None,
        help=(
            "Format spec JSON (@file.json or inline JSON). "
            "Default: 7-bit packing, '-' delimiter."
        ),
    )
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--input", required=True, help="Input file path (or literal text)")
    p.add_argument(
        "-i",
        "--input-type",
        choices=IO_TYPES,
        default="file",
        help="Whether --input is a file path or literal text (default: file)",
    )


def _load_format(format_arg: str | None) -> FormatSpec:
    return load_format_spec(format_arg) if format_arg else DEFAULT_FORMAT


def _read_input(value: str, input_type: str) -> str:
    if input_type == "text":
        return value
    return read_text_file(value)


def _run_transform(ns: argparse.Namespace, fn: Callable[[str, FormatSpec], str]) -> int:
    fmt = _load_format(ns.format)
    data = _read_input(ns.input, ns.input_type)
    out = fn(data, fmt)

    if ns.output_type == "text":
        sys.stdout.write(out)
        sys.stdout.flush()
    else:
        if not ns.output:
            raise UsageError("--output is required when --output-type is file")
        write_text_file(ns.output, out)
        _report(f"wrote {ns.output}")

    _report(f"original length: {len(data)}")
    _report(f"new length: {len(out)}")
    return 0


def _show(ns: argparse.Namespace) -> int:
    fmt = _load_format(ns.format)
    data = _read_input(ns.input, ns.input_type)
    info = inspect(wire=data, fmt=fmt) if ns.compressed else inspect(data, fmt=fmt)

    sys.stdout.write(render_tree(info.tree))
    print(f"tree text length: {len(info.tree_text)}")
    print(f"tree depth: {info.tree.depth()}")
    print(f"payload bits: {info.payload_bits}")
    print("codes:")
    for sym in sorted(info.codes, key=lambda s: (len(info.codes[s]), s)):
        code = "".join(str(b) for b in info.codes[sym]) or "-"
        print(f"  {sym!r:>8} {code}")
    return 0


def _format_validate(format_arg: str) -> int:
    # load is the validation
    load_format_spec(format_arg)
    print("OK")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=PROG, description="Lossless Huffman text compressor")
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, help_text in (
        ("compress", "Compress text into the huffman-text wire format"),
        ("decompress", "Decompress huffman-text wire format back into text"),
    ):
        sp = sub.add_parser(name, help=help_text)
        _add_input_args(sp)
        sp.add_argument("--output", default=None, help="Output file path (must not exist)")
        sp.add_argument(
            "-o",
            "--output-type",
            choices=IO_TYPES,
            default="file",
            help="Write to --output (file) or to stdout (text). Default: file",
        )
        _add_common_args(sp)

    p_show = sub.add_parser("show", help="Print the Huffman tree and code table of an input")
    _add_input_args(p_show)
    p_show.add_argument(
        "--compressed",
        action="store_true",
        help="Input is already compressed: show the tree stored in it",
    )
    _add_common_args(p_show)

    p_v = sub.add_parser("format-validate", help="Validate a format spec (v1)")
    p_v.add_argument("spec", help="Format spec JSON (@file.json or inline JSON)")
    p_v.add_argument("--debug", action="store_true", help="Show stack traces on errors")

    return p


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        if ns.cmd == "compress":
            return _run_transform(ns, compress)
        if ns.cmd == "decompress":
            return _run_transform(ns, decompress)
        if ns.cmd == "show":
            return _show(ns)
        if ns.cmd == "format-validate":
            return _format_validate(str(ns.spec))
        raise AssertionError("unreachable")

    except SystemExit:
        raise
    except FormatSpecError as e:
        # Treat as usage/config error.
        if getattr(ns, "debug", False):
            raise
        _report(str(e))
        return EXIT_USAGE
    except HuffmanTextError as e:
        if getattr(ns, "debug", False):
            raise
        _report(str(e))
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        _report(f"error: {e}")
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
