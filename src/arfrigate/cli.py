"""CLI entry point for arfrigate — I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from arfrigate import ArfrigateError, __version__
from arfrigate.engine import IgnoreEngine
from arfrigate.filter import PathFilter
from arfrigate.gitignore import GitignorePruner, load_gitignore_spec
from arfrigate.scanner import ScanOptions, scan
from arfrigate.tree import NEGATION_MARKER

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``arfrigate`` command.
    """
    parser = argparse.ArgumentParser(
        prog="arfrigate",
        description="filter directory contents through whitelist/exclude path rules",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    filter_parser = subparsers.add_parser(
        "filter",
        help="Print the paths under each directory that the rules keep",
        description=(
            "Bare rules keep matching paths; rules prefixed with '!' drop them. "
            "A path no bare rule matches is dropped."
        ),
    )
    filter_parser.add_argument(
        "directories",
        nargs="*",
        default=["."],
        metavar="DIRECTORY",
        help="Root directories to filter (default: current directory)",
    )
    filter_parser.add_argument(
        "-r",
        "--rule",
        action="append",
        default=[],
        dest="rules",
        metavar="PATTERN",
        help="Add a rule (can be specified multiple times; prefix with ! to exclude)",
    )
    filter_parser.add_argument(
        "--preset",
        type=str,
        default=None,
        help="Add a rule preset (python, node, rust, generic)",
    )
    filter_parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="all_files",
        help="Include hidden files (starting with .)",
    )
    filter_parser.add_argument(
        "-d",
        "--include-dirs",
        action="store_true",
        dest="include_dirs",
        help="Offer directories to the rules as well as files",
    )
    filter_parser.add_argument(
        "-L",
        "--level",
        type=int,
        default=None,
        dest="max_depth",
        help="Max depth of the directory scan",
    )
    filter_parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Skip entries ignored by the root .gitignore before applying rules",
    )
    filter_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        dest="output_file",
        help="Write output to a file instead of stdout",
    )
    filter_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    return parser


def run_arfrigate(argv: list[str] | None = None) -> str:
    """Run arfrigate with provided CLI args and return formatted output.

    This function is intentionally side-effect free and is the primary
    test target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.

    Returns:
        str: Kept paths, one per line.

    Raises:
        ArfrigateError: On any user-facing validation or I/O error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args)


def _resolve_root(directory: str) -> Path:
    """Resolve directory and validate it is a directory.

    Raises:
        ArfrigateError: If directory does not exist or is not a directory.
    """
    root = Path(directory).resolve()
    if not root.is_dir():
        raise ArfrigateError(f"'{directory}' is not a directory")
    return root


def _build_rules(args: argparse.Namespace) -> list[str]:
    """Collect rules from ``--rule`` and ``--preset``.

    Raises:
        ArfrigateError: If ``--preset`` is unknown or no include rule was
            given.
    """
    rules: list[str] = list(args.rules)
    if args.preset:
        from arfrigate.preset import get_preset_patterns

        try:
            rules.extend(get_preset_patterns(args.preset))
        except ValueError as exc:
            raise ArfrigateError(str(exc)) from exc

    if not rules:
        raise ArfrigateError("no rules given; pass --rule or --preset")
    if all(rule.startswith(NEGATION_MARKER) or not rule for rule in rules):
        raise ArfrigateError(
            "no include rule given; bare rules keep paths, '!' rules only drop them"
        )
    return rules


def _translate_level_to_scan_depth(level_arg: int | None) -> int | None:
    """Translate ``-L`` level semantics to scanner depth.

    Raises:
        ArfrigateError: If level is less than 1.
    """
    if level_arg is None:
        return None
    if level_arg < 1:
        raise ArfrigateError("Invalid level, must be greater than 0.")
    return level_arg - 1


def _run_with_args(args: argparse.Namespace) -> str:
    """Build the engine once, then scan and filter every directory.

    Raises:
        ArfrigateError: On any user-facing validation or I/O error.
    """
    roots = [(directory, _resolve_root(directory)) for directory in args.directories]
    engine = IgnoreEngine(_build_rules(args))
    logger.debug("Rule tree holds %d entries", engine.root.rule_count())
    path_filter = PathFilter(engine)
    scan_opts = ScanOptions(
        max_depth=_translate_level_to_scan_depth(args.max_depth),
        all_files=args.all_files,
        include_dirs=args.include_dirs,
    )

    lines: list[str] = []
    for directory, root in roots:
        pruner = None
        if args.gitignore:
            spec = load_gitignore_spec(root)
            pruner = GitignorePruner(spec) if spec is not None else None

        entries = scan(root, scan_opts, pruner)
        kept = path_filter.filter_entries(entries)
        logger.debug("%s: kept %d of %d entries", directory, len(kept), len(entries))
        lines.extend((Path(directory) / entry.rel_path).as_posix() for entry in kept)

    return "\n".join(lines)


def main() -> None:
    """Run the CLI entry point with process arguments.

    Writes output to stdout or the ``-o`` file.
    Exits with code 1 on user-facing errors.
    """
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    try:
        output = _run_with_args(args)
    except ArfrigateError as exc:
        sys.stderr.write(f"arfrigate: {exc}\n")
        sys.exit(1)

    text = output + "\n" if output else ""
    if args.output_file:
        try:
            Path(args.output_file).write_text(text, encoding="utf-8", newline="")
        except (OSError, UnicodeError) as exc:
            sys.stderr.write(
                f"arfrigate: cannot write to '{args.output_file}': {exc}\n"
            )
            sys.exit(1)
    else:
        try:
            sys.stdout.write(text)
        except UnicodeError as exc:
            sys.stderr.write(f"arfrigate: cannot write output: {exc}\n")
            sys.exit(1)
