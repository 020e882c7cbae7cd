"""Directory source: enumerate candidate relative paths with an explicit DFS stack."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Entry:
    """A single filesystem entry discovered during scanning.

    Attributes:
        path: Absolute path of the filesystem entry.
        rel_path: ``/``-separated path relative to the scanning root.
        name: Basename of the entry.
        is_dir: Whether the entry is a directory.
        depth: Parent directory depth from scanning root.
    """

    path: Path
    rel_path: str
    name: str
    is_dir: bool
    depth: int


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """Options controlling scanner behavior.

    Attributes:
        max_depth: Maximum parent depth to scan. ``None`` means unlimited.
        all_files: Whether to include hidden entries.
        include_dirs: Whether directories are emitted as candidates.
            Directories are always descended into.
    """

    max_depth: int | None = None
    all_files: bool = False
    include_dirs: bool = False


class PathPruner(Protocol):
    """Protocol for entries removed before they become candidates.

    A pruned directory is not descended into.
    """

    def should_prune(self, rel_path: str, is_dir: bool) -> bool: ...


class _NullPruner:
    """Default pass-through pruner that removes nothing."""

    def should_prune(self, rel_path: str, is_dir: bool) -> bool:
        return False


def scan(
    root: Path,
    options: ScanOptions | None = None,
    pruner: PathPruner | None = None,
) -> list[Entry]:
    """Scan root directory and return entries in deterministic DFS order.

    Args:
        root: Root directory to scan.
        options: Scanner options. Defaults to ``ScanOptions()``.
        pruner: Optional pruner implementation.

    Returns:
        list[Entry]: Flat list of discovered entries.
    """
    scan_options = options or ScanOptions()
    active_pruner = pruner or _NullPruner()
    root = root.resolve()

    if not root.is_dir():
        return []

    result: list[Entry] = []

    # Stack items: (directory_path, relative_prefix, depth)
    stack: list[tuple[Path, str, int]] = [(root, "", 0)]

    while stack:
        current_dir, prefix, depth = stack.pop()

        if scan_options.max_depth is not None and depth > scan_options.max_depth:
            continue

        try:
            raw_entries = list(os.scandir(current_dir))
        except PermissionError:
            logger.debug("Permission denied: %s", current_dir)
            continue

        raw_entries.sort(key=lambda e: e.name)

        child_dirs: list[tuple[Path, str, int]] = []

        for dir_entry in raw_entries:
            name = dir_entry.name
            try:
                is_dir = dir_entry.is_dir(follow_symlinks=False)
            except OSError:
                logger.debug("Cannot stat: %s", dir_entry.path)
                continue

            if not scan_options.all_files and name.startswith("."):
                continue

            # Candidates use "/" as their only separator.
            if "\\" in name:
                logger.debug("Skipping name with backslash: %s", dir_entry.path)
                continue

            # Names os.fsdecode could not decode carry lone surrogates.
            try:
                name.encode("utf-8")
            except UnicodeEncodeError:
                logger.debug("Skipping undecodable name: %r", dir_entry.path)
                continue

            rel_path = f"{prefix}{name}"
            if active_pruner.should_prune(rel_path, is_dir):
                logger.debug("Pruned: %s", rel_path)
                continue

            if is_dir:
                child_dirs.append((Path(dir_entry.path), f"{rel_path}/", depth + 1))
                if not scan_options.include_dirs:
                    continue

            result.append(
                Entry(
                    path=Path(dir_entry.path),
                    rel_path=rel_path,
                    name=name,
                    is_dir=is_dir,
                    depth=depth,
                )
            )

        # Push children in reverse so first-alphabetical is popped first
        for child in reversed(child_dirs):
            stack.append(child)

    return result
