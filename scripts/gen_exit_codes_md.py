#!/usr/bin/env python3
"""Generate docs/exit_codes.md (exit codes + error kinds) from src/huffman_text/errors.py.

``--check`` only compares: it exits 1 when the file on disk is missing or stale,
so it can guard changes to EXIT_CODES or ErrorKind.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="gen_exit_codes_md")
    p.add_argument("--out", default=str(REPO / "docs" / "exit_codes.md"), help="Output path")
    p.add_argument("--check", action="store_true", help="Fail if the file is not up to date")
    ns = p.parse_args(argv)

    sys.path.insert(0, str(REPO / "src"))
    from huffman_text import errors  # noqa: E402

    out = Path(ns.out)
    md = errors.render_exit_codes_markdown()

    if ns.check:
        current = out.read_text(encoding="utf-8") if out.exists() else None
        if current != md:
            print(f"[huffman-text] {out} is out of date; run scripts/gen_exit_codes_md.py")
            return 1
        print(f"[huffman-text] {out} is up to date")
        return 0

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(md, encoding="utf-8")
    n_codes = len(errors.EXIT_CODES)
    n_kinds = len(errors.ErrorKind)
    print(f"[huffman-text] wrote {out} ({n_codes} exit codes, {n_kinds} error kinds)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
