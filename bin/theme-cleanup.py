#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Build the strict JSON color theme from its commented base file.

Usage:
    ./bin/theme-cleanup.py [source] [target] [--verify]

Examples:
    ./bin/theme-cleanup.py
    ./bin/theme-cleanup.py themes/dark-amber-color-theme-base.json /tmp/dark-amber.json
    ./bin/theme-cleanup.py --verify

Behavior:
    - Drops every line that is blank or whose trimmed text starts with `//`.
    - Kept lines are written verbatim; a `//` later in a line (e.g. "http://x") is not touched.
    - Lines end at LF, CRLF or CR only; a leading UTF-8 BOM is dropped before filtering.
    - Kept lines are joined with a single newline and the file ends with one trailing newline
      (an input with nothing left to keep produces an empty file).
    - Overwrites `target`; `source` is only read. Cleaning the output again changes nothing.
    - `--verify` parses the base file as JSONC and the written file as strict JSON and fails
      unless both parse to the same document.

Inputs / Outputs:
    source: base theme (JSON with line comments), UTF-8.
            Default: themes/dark-amber-color-theme-base.json
    target: derived theme written as UTF-8.
            Default: themes/dark-amber-color-theme.json
    stdout: progress lines ("Reading file ...", "Written file ...")

Exit codes:
    0   Success
    2   Usage / bad args, file read/write error, or --verify failure
"""
from __future__ import annotations

import argparse
import json
import re
import sys
from pathlib import Path
from typing import List, Tuple

import json5


COMMENT_MARKER = "//"
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

REPO_ROOT = Path(__file__).resolve().parent.parent
THEMES_DIR = REPO_ROOT / "themes"
BASE_THEME = "dark-amber-color-theme-base.json"
DERIVED_THEME = "dark-amber-color-theme.json"


def default_paths() -> Tuple[Path, Path]:
    """Return the (base, derived) theme paths, independent of the cwd."""
    return THEMES_DIR / BASE_THEME, THEMES_DIR / DERIVED_THEME


def strip_comment_lines(text: str, marker: str = COMMENT_MARKER) -> str:
    """Return `text` without blank lines and lines starting with `marker`.

    A line is tested on its stripped form but kept as-is, so indentation and
    anything after an inline `marker` survive. No trailing newline is added.
    """
    kept: List[str] = []
    for line in LINE_BREAK_RE.split(text):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(marker):
            continue
        kept.append(line)
    return "\n".join(kept)


def clean_theme_file(source: Path, target: Path) -> Tuple[str, str]:
    """Write the comment-free contents of `source` to `target`.

    Returns (source_text, written_text). `source` is fully read before
    `target` is opened, so both may name the same file. A leading BOM is
    not kept. OSError and UnicodeDecodeError are left to the caller.
    """
    text = source.read_text(encoding="utf-8-sig")
    cleaned = strip_comment_lines(text)
    if cleaned:
        cleaned += "\n"
    target.write_text(cleaned, encoding="utf-8")
    return text, cleaned


def verify_theme(source_text: str, cleaned_text: str) -> None:
    """Raise ValueError unless `cleaned_text` is strict JSON equal to `source_text`."""
    try:
        expected = json5.loads(source_text)
    except ValueError as e:
        raise ValueError(f"base file is not valid JSONC: {e}") from e
    try:
        actual = json.loads(cleaned_text)
    except json.JSONDecodeError as e:
        raise ValueError(f"cleaned file is not strict JSON: {e}") from e
    if actual != expected:
        raise ValueError("cleaned file does not match the base file contents")


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    default_source, default_target = default_paths()
    parser = argparse.ArgumentParser(
        description="Strip comment-only and blank lines from the base color theme and write the derived theme.",
        epilog="Example: %(prog)s themes/dark-amber-color-theme-base.json themes/dark-amber-color-theme.json",
    )
    parser.add_argument('source', nargs='?', type=Path, default=default_source,
                        help=f'Base theme file (default: {default_source})')
    parser.add_argument('target', nargs='?', type=Path, default=default_target,
                        help=f'Derived theme file to write (default: {default_target})')
    parser.add_argument('--verify', action='store_true',
                        help='Check that the written file is strict JSON matching the base file')
    args = parser.parse_args(argv)

    print(f"Reading file '{args.source}'")
    try:
        source_text, cleaned_text = clean_theme_file(args.source, args.target)
    except (OSError, UnicodeDecodeError) as e:
        sys.stderr.write(f"Error cleaning '{args.source}' -> '{args.target}': {e}\n")
        return 2
    print(f"Written file '{args.target}'")

    if args.verify:
        try:
            verify_theme(source_text, cleaned_text)
        except ValueError as e:
            sys.stderr.write(f"Error verifying '{args.target}': {e}\n")
            return 2
        print(f"Verified file '{args.target}'")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
