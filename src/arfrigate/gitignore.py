"""Gitignore integration — prune scanned entries via pathspec."""

from __future__ import annotations

import logging
from pathlib import Path

from pathspec import GitIgnoreSpec

logger = logging.getLogger(__name__)


def load_gitignore_spec(root: Path) -> GitIgnoreSpec | None:
    """Load .gitignore patterns from *root* directory.

    Args:
        root: Directory containing the ``.gitignore`` file.

    Returns:
        A compiled spec when a ``.gitignore`` exists and is readable,
        otherwise ``None``.
    """
    gitignore_path = root / ".gitignore"
    try:
        lines = gitignore_path.read_text(encoding="utf-8").splitlines()
    except OSError:
        logger.debug("Cannot read .gitignore: %s", gitignore_path)
        return None
    return GitIgnoreSpec.from_lines(lines)


class GitignorePruner:
    """Prune entries that the root ``.gitignore`` ignores.

    This runs in the directory source, before rule evaluation, and uses
    ordinary gitignore semantics rather than the rule engine's.
    """

    def __init__(self, spec: GitIgnoreSpec) -> None:
        self._spec = spec

    def should_prune(self, rel_path: str, is_dir: bool) -> bool:
        """Return whether *rel_path* is ignored by the loaded spec.

        Args:
            rel_path: ``/``-separated path relative to the scan root.
            is_dir: Whether the entry is a directory.
        """
        candidate = f"{rel_path}/" if is_dir else rel_path
        return self._spec.match_file(candidate)
