"""Expand `#[fully_pub]` attributes in Rust source files.

`#[fully_pub]` marks an item and everything it contains as `pub`; with
`#[fully_pub(recursive)]` the content of nested modules is made `pub` as well.
Any part of the item can opt out with `#[fully_pub(exclude)]`.

This tool rewrites the source files in place (or reports what would change),
producing the same code the attribute macro would expand to.
"""

import argparse
import logging
from pathlib import Path

from fully_pub.run_expansion import run_expansion


def main(argv: list[str] | None = None) -> int:
    """Run the expansion tool."""
    ap = argparse.ArgumentParser(
        description="Expand #[fully_pub] attributes in Rust source files.",
    )
    ap.add_argument(
        "paths",
        type=Path,
        nargs="+",
        help="Rust source files or directories to walk",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Report files that would change and exit 1 if any, without writing",
    )
    mode.add_argument(
        "--diff",
        action="store_true",
        help="Print a unified diff instead of writing files",
    )
    mode.add_argument(
        "--stdout",
        action="store_true",
        help="Print the expanded source instead of writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_expansion(args)


if __name__ == "__main__":
    raise SystemExit(main())
