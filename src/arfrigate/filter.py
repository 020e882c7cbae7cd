"""Filter orchestration: one engine query per candidate path."""

from __future__ import annotations

from collections.abc import Iterable

from arfrigate.engine import IgnoreEngine
from arfrigate.scanner import Entry


class PathFilter:
    """Keep the candidates an :class:`IgnoreEngine` accepts.

    The engine is asked exactly once per candidate; results are neither
    cached nor reordered.
    """

    def __init__(self, engine: IgnoreEngine) -> None:
        """Initialize path filter.

        Args:
            engine: Fully built engine. It is only queried, never modified.
        """
        self._engine = engine

    def filter(self, candidates: Iterable[str]) -> list[str]:
        """Return the kept candidates in input order.

        Args:
            candidates: Normalized relative paths.

        Returns:
            list[str]: Candidates for which the engine returned ``True``.

        Raises:
            InvalidPathError: If a candidate is not normalized.
        """
        return [path for path in candidates if self._engine.is_kept(path)]

    def filter_entries(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return the scanner entries whose ``rel_path`` is kept."""
        return [entry for entry in entries if self._engine.is_kept(entry.rel_path)]
