"""Orchestration logic for expanding `fully_pub` attributes across files."""

import argparse
import difflib
import logging
import sys
from pathlib import Path

from fully_pub.errors import FullyPubError
from fully_pub.expand_source import expand_source
from fully_pub.format_diagnostic import format_diagnostic
from fully_pub.iter_rust_files import iter_rust_files
from fully_pub.load_config import load_config
from fully_pub.rust_parser import RustParser

logger = logging.getLogger(__name__)


def run_expansion(args: argparse.Namespace) -> int:
    """Execute the expansion over every requested file."""
    config = load_config(args.config)
    missing = [p for p in args.paths if not p.exists()]
    if missing:
        joined = ", ".join(str(p) for p in missing)
        msg = f"Path not found: {joined}"
        raise SystemExit(msg)

    files = iter_rust_files(
        args.paths, config["files"]["include"], config["files"]["exclude"]
    )
    if not files:
        joined = ", ".join(str(p) for p in args.paths)
        msg = f"No Rust files found under: {joined}"
        raise SystemExit(msg)
    if args.stdout and len(files) > 1:
        msg = f"--stdout expects a single file, got {len(files)}"
        raise SystemExit(msg)

    parser = RustParser()
    changed = 0
    failed = 0
    for path in files:
        try:
            # Bytes keep the original line endings.
            original = path.read_bytes().decode("utf-8")
            expanded = expand_source(original, config["marker"], parser)
        except (FullyPubError, UnicodeDecodeError, OSError) as exc:
            print(format_diagnostic(path, exc), file=sys.stderr)
            failed += 1
            continue

        if args.stdout:
            print(expanded, end="")
        if expanded == original:
            logger.debug("Unchanged: %s", path)
            continue

        changed += 1
        if args.check:
            print(f"Would expand: {path}")
        elif args.diff:
            _print_diff(path, original, expanded)
        elif not args.stdout:
            try:
                path.write_bytes(expanded.encode("utf-8"))
            except OSError as exc:
                print(format_diagnostic(path, exc), file=sys.stderr)
                failed += 1
                continue
            logger.info("Expanded %s", path)

    _print_summary(len(files), changed, failed, args)
    if failed or (args.check and changed):
        return 1
    return 0


def _print_diff(path: Path, original: str, expanded: str) -> None:
    """Print a unified diff between the original and expanded source."""
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        expanded.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    sys.stdout.writelines(diff)


def _print_summary(
    total: int, changed: int, failed: int, args: argparse.Namespace
) -> None:
    if args.stdout:
        return
    verb = "would change" if args.check or args.diff else "changed"
    print(f"{total} file(s) processed, {changed} {verb}, {failed} failed.")
