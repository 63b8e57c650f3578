"""Logic for presenting expansion errors as compiler-style diagnostics."""

from pathlib import Path

from fully_pub.errors import FullyPubError


def format_diagnostic(path: Path | str, error: Exception) -> str:
    """Format an error as `path:line:col: error: message`.

    Errors without a source location (unreadable files, for instance) are
    reported against the path alone.
    """
    if not isinstance(error, FullyPubError):
        return f"{path}: error: {error}"
    if error.span is None:
        return f"{path}: error: {error.message}"
    return f"{path}:{error.span.line}:{error.span.column}: error: {error.message}"
