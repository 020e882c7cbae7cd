"""Single-segment glob patterns: compilation and matching.

A segment pattern is the text between two ``/`` separators of a rule.
The only special character is ``*``, which matches any run of characters
(including none) inside one segment.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Literal:
    """Token that must appear verbatim in the target.

    Attributes:
        text: Non-empty literal text.
    """

    text: str


@dataclass(frozen=True, slots=True)
class Wildcard:
    """Token standing for any run of characters, including none."""


WILDCARD = Wildcard()

Token = Literal | Wildcard


@dataclass(frozen=True, slots=True)
class SegmentPattern:
    """A compiled segment glob.

    Attributes:
        raw: The source text the pattern was compiled from.
        tokens: Literal and wildcard tokens, in order. Never holds two
            consecutive wildcards.
    """

    raw: str
    tokens: tuple[Token, ...]

    def __len__(self) -> int:
        return len(self.tokens)

    def matches(self, target: str) -> bool:
        """Return whether *target* matches this pattern.

        Tokens are consumed left to right. A literal following a wildcard
        is anchored at its first occurrence after the cursor; there is no
        backtracking.

        Args:
            target: One path segment.

        Returns:
            bool: ``True`` when the whole of *target* is matched.
        """
        if not self.tokens:
            return target == ""

        cursor = 0
        pending = False
        for token in self.tokens:
            match token:
                case Wildcard():
                    pending = True
                case Literal(text=text) if pending:
                    found = target.find(text, cursor)
                    if found < 0:
                        return False
                    cursor = found + len(text)
                    pending = False
                case Literal(text=text):
                    if not target.startswith(text, cursor):
                        return False
                    cursor += len(text)

        if pending:
            return True
        return cursor == len(target)


def compile_segment(raw: str) -> SegmentPattern:
    """Compile one segment glob into a token sequence.

    Args:
        raw: Segment text, without any ``/``.

    Returns:
        SegmentPattern: The compiled pattern.

    Examples:
        >>> len(compile_segment(""))
        0
        >>> compile_segment("a*c").tokens
        (Literal(text='a'), Wildcard(), Literal(text='c'))
        >>> len(compile_segment("*abc*df*"))
        5
    """
    tokens: list[Token] = []
    # Every part after the first is preceded by a star in *raw*.
    for index, part in enumerate(raw.split("*")):
        if index and not (tokens and tokens[-1] == WILDCARD):
            tokens.append(WILDCARD)
        if part:
            tokens.append(Literal(part))
    return SegmentPattern(raw=raw, tokens=tuple(tokens))
