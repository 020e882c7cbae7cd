"""Engine boundary: validated construction and string-path queries."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from arfrigate import InvalidPathError, InvalidPatternError
from arfrigate.tree import NEGATION_MARKER, SEPARATOR, RuleTreeNode

logger = logging.getLogger(__name__)

_RELATIVE_MARKERS = frozenset({".", ".."})


def validate_pattern(raw: str) -> None:
    """Check that *raw* is a well-formed rule.

    The empty string is accepted and inserts nothing.

    Args:
        raw: Rule text, optionally prefixed with ``!``.

    Raises:
        InvalidPatternError: On a lone negation marker, an empty segment,
            or a negation marker anywhere but the start of the rule.
    """
    if not raw:
        return
    body = raw[len(NEGATION_MARKER) :] if raw.startswith(NEGATION_MARKER) else raw
    if not body:
        raise InvalidPatternError(raw, "negation marker without a pattern")
    segments = body.split(SEPARATOR)
    if any(not segment for segment in segments):
        raise InvalidPatternError(raw, "empty path segment")
    if any(segment.startswith(NEGATION_MARKER) for segment in segments):
        raise InvalidPatternError(raw, "negation marker is only allowed at the start")


def split_path(path: str) -> list[str]:
    """Validate a candidate path and split it into segments.

    Args:
        path: ``/``-separated relative path.

    Returns:
        list[str]: Non-empty path segments.

    Raises:
        InvalidPathError: On an empty path, an empty segment, a backslash,
            or a ``.``/``..`` segment.
    """
    if not path:
        raise InvalidPathError(path, "empty path")
    if "\\" in path:
        raise InvalidPathError(path, "backslash separator")
    segments = path.split(SEPARATOR)
    for segment in segments:
        if not segment:
            raise InvalidPathError(path, "empty path segment")
        if segment in _RELATIVE_MARKERS:
            raise InvalidPathError(path, f"relative segment {segment!r}")
    return segments


class IgnoreEngine:
    """Keep/reject decisions for relative paths against a rule set.

    Bare rules whitelist paths and ``!`` rules exclude them, which is the
    reverse of ``.gitignore``. A path matched by no bare rule is rejected.

    Example:
        >>> engine = IgnoreEngine(["*.txt", "!secret.txt"])
        >>> engine.is_kept("a.txt")
        True
        >>> engine.is_kept("secret.txt")
        False
        >>> engine.is_kept("a.md")
        False
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        """Initialize the engine.

        Args:
            patterns: Rules to insert, in order.

        Raises:
            InvalidPatternError: If any rule is malformed.
        """
        self._root = RuleTreeNode()
        self._patterns: list[str] = []
        self.add_patterns(patterns)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> IgnoreEngine:
        """Build an engine from *patterns*; same as calling the class."""
        return cls(patterns)

    @property
    def patterns(self) -> tuple[str, ...]:
        """Accepted rules, in insertion order."""
        return tuple(self._patterns)

    @property
    def root(self) -> RuleTreeNode:
        """Root node of the rule tree. Treat it as read-only."""
        return self._root

    def add_pattern(self, raw: str) -> None:
        """Validate and insert one rule.

        Raises:
            InvalidPatternError: If *raw* is malformed. The tree is left
                untouched.
        """
        validate_pattern(raw)
        if not raw:
            return
        logger.debug("Adding rule: %s", raw)
        self._root.insert(raw)
        self._patterns.append(raw)

    def add_patterns(self, patterns: Iterable[str]) -> None:
        """Validate and insert each of *patterns*, in order.

        Raises:
            InvalidPatternError: On the first malformed rule. Rules before
                it stay inserted.
        """
        for raw in patterns:
            self.add_pattern(raw)

    def is_kept(self, path: str) -> bool:
        """Return whether *path* is kept by the rules.

        Args:
            path: ``/``-separated relative path with non-empty segments.

        Raises:
            InvalidPathError: If *path* is not normalized.
        """
        kept = self._root.is_kept(split_path(path))
        logger.debug("%s: %s", path, "kept" if kept else "rejected")
        return kept

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._patterns!r})"
