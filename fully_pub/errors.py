"""Exceptions raised while expanding `fully_pub` attributes."""

from fully_pub.span import Span


class FullyPubError(Exception):
    """Base class for every validation failure, bound to a source location."""

    def __init__(self, message: str, span: Span | None = None) -> None:
        """Initialize the error with a message and the offending span."""
        super().__init__(message)
        self.message = message
        self.span = span


class UnknownMarkerArgumentError(FullyPubError):
    """The marker argument is not `exclude`."""

    def __init__(self, argument: str, marker: str, span: Span | None = None) -> None:
        """Initialize the error for the unrecognized argument."""
        super().__init__(f"unknown {marker} attribute `{argument}`", span)
        self.argument = argument


class DuplicateMarkerError(FullyPubError):
    """A node carries the marker more than once."""

    def __init__(self, marker: str, span: Span | None = None) -> None:
        """Initialize the error for the repeated marker."""
        super().__init__(f"duplicate {marker} attribute `exclude`", span)


class MalformedMarkerError(FullyPubError):
    """The marker argument is not a single identifier."""


class InvalidConfigurationArgumentError(FullyPubError):
    """The invocation argument is not `recursive`."""

    def __init__(self, argument: str, marker: str, span: Span | None = None) -> None:
        """Initialize the error for the rejected invocation argument."""
        super().__init__(f"invalid argument to `{marker}` attribute macro", span)
        self.argument = argument


class RustParseError(FullyPubError):
    """The source text is not valid Rust."""
