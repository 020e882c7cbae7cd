"""Recursive rule tree: insertion of multi-segment rules and evaluation.

Each node holds two rule lists. Bare rules go to ``include_rules`` and
``!``-prefixed rules go to ``exclude_rules``. A path is kept at a node
when at least one include rule matches it and no exclude rule does.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from arfrigate.pattern import SegmentPattern, compile_segment

NEGATION_MARKER = "!"
SEPARATOR = "/"
DOUBLE_STAR_TEXT = "**"


@dataclass(frozen=True, slots=True)
class DoubleStar:
    """Tag standing for zero or more whole path segments."""

    @property
    def raw(self) -> str:
        return DOUBLE_STAR_TEXT


DOUBLE_STAR = DoubleStar()

RuleTag = DoubleStar | SegmentPattern


def _make_tag(prefix: str) -> RuleTag:
    if prefix == DOUBLE_STAR_TEXT:
        return DOUBLE_STAR
    return compile_segment(prefix)


@dataclass(slots=True)
class RuleEntry:
    """One rule segment and the rest of the rule, if any.

    Attributes:
        tag: ``DOUBLE_STAR`` or the compiled segment pattern.
        child: Node holding the remaining segments of the rule, ``None``
            when this entry is the last segment.
    """

    tag: RuleTag
    child: RuleTreeNode | None = None

    def same_rule(self, text: str, *, has_child: bool) -> bool:
        """Return whether this entry was built from segment *text*."""
        return (self.child is not None) is has_child and self.tag.raw == text

    def matches(self, segments: Sequence[str]) -> bool:
        """Return whether this entry matches the remaining *segments*."""
        match self.tag:
            case DoubleStar():
                if self.child is None:
                    return True
                child = self.child
                return any(
                    child.is_kept(segments[start:]) for start in range(len(segments))
                )
            case SegmentPattern() as pattern:
                if not segments:
                    return False
                head, tail = segments[0], segments[1:]
                if self.child is None:
                    return not tail and pattern.matches(head)
                return bool(tail) and pattern.matches(head) and self.child.is_kept(tail)
        raise TypeError(f"unknown rule tag: {self.tag!r}")


@dataclass(slots=True)
class RuleTreeNode:
    """A node of the rule tree.

    Attributes:
        include_rules: Rules a path must match to be kept.
        exclude_rules: Rules that reject a path even when included.
    """

    include_rules: list[RuleEntry] = field(default_factory=list)
    exclude_rules: list[RuleEntry] = field(default_factory=list)

    def insert(self, raw: str) -> None:
        """Insert one raw rule, merging shared prefixes.

        Identical leaf rules are stored once. A multi-segment rule whose
        first segment already leads to a child reuses that child.

        Args:
            raw: Rule text, optionally prefixed with ``!``.
        """
        if not raw:
            return

        if raw.startswith(NEGATION_MARKER):
            rules = self.exclude_rules
            raw = raw[len(NEGATION_MARKER) :]
        else:
            rules = self.include_rules

        prefix, sep, suffix = raw.partition(SEPARATOR)

        if sep:
            for entry in rules:
                if entry.child is not None and entry.same_rule(prefix, has_child=True):
                    entry.child.insert(suffix)
                    return
            child = RuleTreeNode()
            child.insert(suffix)
            rules.append(RuleEntry(_make_tag(prefix), child))
            return

        if any(entry.same_rule(prefix, has_child=False) for entry in rules):
            return
        rules.append(RuleEntry(_make_tag(prefix)))

    def is_kept(self, segments: Sequence[str]) -> bool:
        """Return whether the path given as *segments* is kept.

        Args:
            segments: Remaining path segments below this node.

        Returns:
            bool: ``True`` when some include rule matches and no exclude
            rule does. A node without include rules keeps nothing.
        """
        if not any(entry.matches(segments) for entry in self.include_rules):
            return False
        return not any(entry.matches(segments) for entry in self.exclude_rules)

    def rule_count(self) -> int:
        """Return the number of entries in this node and its descendants."""
        total = 0
        for entry in (*self.include_rules, *self.exclude_rules):
            total += 1
            if entry.child is not None:
                total += entry.child.rule_count()
        return total
