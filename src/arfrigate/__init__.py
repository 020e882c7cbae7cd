"""arfrigate — hierarchical path-ignore rule engine with a filtering CLI."""

__version__ = "0.1.0"


class ArfrigateError(Exception):
    """User-facing error.

    Raised for invalid arguments, missing directories, and other
    recoverable input errors. The CLI prints the message to stderr
    and exits with code 1.
    """


class InvalidPatternError(ArfrigateError, ValueError):
    """A rule pattern violates the segment or negation-marker structure.

    Attributes:
        pattern: The offending raw pattern string.
        reason: Short description of the violation.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class InvalidPathError(ArfrigateError, ValueError):
    """A candidate path is not a normalized relative path.

    Attributes:
        path: The offending candidate path.
        reason: Short description of the violation.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"invalid path {path!r}: {reason}")
