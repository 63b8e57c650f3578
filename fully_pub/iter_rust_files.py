"""Logic for collecting the Rust source files to expand."""

from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path


def iter_rust_files(
    paths: Iterable[Path], include: list[str], exclude: list[str]
) -> list[Path]:
    """Expand files and directories into the list of source files to process.

    Files named explicitly are always kept. Directories are walked; a file is
    kept when its name matches an `include` pattern and none of its parent
    directories (below the walked root) is named in `exclude`.
    """
    found: list[Path] = []
    for root in paths:
        if root.is_file():
            found.append(root)
            continue
        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            parents = path.relative_to(root).parts[:-1]
            if any(part in exclude for part in parents):
                continue
            if any(fnmatch(path.name, pattern) for pattern in include):
                found.append(path)
    return found
