"""Logic for interpreting the argument of a `fully_pub` invocation."""

from fully_pub.attribute import DEFAULT_MARKER
from fully_pub.errors import InvalidConfigurationArgumentError
from fully_pub.span import Span

RECURSIVE_KEYWORD = "recursive"


def parse_recursive_flag(
    argument: str | None, marker: str = DEFAULT_MARKER, span: Span | None = None
) -> bool:
    """Return True for `recursive`, False when no argument is given."""
    if argument is None or not argument.strip():
        return False
    token = argument.strip()
    if token == RECURSIVE_KEYWORD:
        return True
    raise InvalidConfigurationArgumentError(token, marker, span)
