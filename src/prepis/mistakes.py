"""Mistakes found while validating a segment.

Every mistake carries ``at``, the index of the offending token. Mistakes
that need sub-token precision (BadSubstr) additionally carry offsets
relative to that token's start.

Taxonomy:
- Structural: NestedDelim, ClosingUnopenedDelim, UnclosedDelim
- Lexical: BadToken (blacklisted), BadSubstr, BadAttr
- Contextual: BadToken (numeral outside round brackets), MissingAttrs

None of these are exceptions. A validation run always completes and
returns the full list, so a transcriber can fix everything in one pass.

"""

from __future__ import annotations

from dataclasses import dataclass

from prepis.tokens import DelimKind

_BRACKETS = {
    DelimKind.ROUND: "()",
    DelimKind.SQUARE: "[]",
    DelimKind.ANGLE: "<>",
}


@dataclass(frozen=True, slots=True)
class Mistake:
    """Base class for all mistakes.

    Attributes:
        at: Token index of the offending token

    """

    at: int

    def describe(self) -> str:
        """One-line human readable description.

        Subclasses override this with a message specific to their kind.
        """
        return f"mistake at token {self.at}"


@dataclass(frozen=True, slots=True)
class BadToken(Mistake):
    """Whole token rejected (blacklisted, or a misplaced count marker)."""

    def describe(self) -> str:
        return "token not allowed here"


@dataclass(frozen=True, slots=True)
class BadSubstr(Mistake):
    """A run inside a token not covered by any allowed atom.

    Attributes:
        start: Start offset relative to the token start
        end: End offset relative to the token start

    """

    start: int
    end: int

    def describe(self) -> str:
        return "characters not allowed in a word"


@dataclass(frozen=True, slots=True)
class NestedDelim(Mistake):
    """Bracket opened again before the outer one of the same kind closed.

    Attributes:
        delim: Bracket kind
        outermost_start: Token index of the still-open outer bracket

    """

    delim: DelimKind
    outermost_start: int

    def describe(self) -> str:
        opening = _BRACKETS[self.delim][0]
        return f"{opening!r} nested inside another {opening!r} (opened at token {self.outermost_start})"


@dataclass(frozen=True, slots=True)
class ClosingUnopenedDelim(Mistake):
    delim: DelimKind

    def describe(self) -> str:
        opening, closing = _BRACKETS[self.delim]
        return f"{closing!r} without a matching {opening!r}"


@dataclass(frozen=True, slots=True)
class UnclosedDelim(Mistake):
    delim: DelimKind

    def describe(self) -> str:
        opening, closing = _BRACKETS[self.delim]
        return f"{opening!r} never closed with {closing!r}"


@dataclass(frozen=True, slots=True)
class MissingAttrs(Mistake):
    """Angle bracket not followed by a codes token.

    ``at`` is the index where the codes were expected, which equals the
    token count when the segment ends right after the bracket.

    """

    def describe(self) -> str:
        return "'<' must be followed by attribute codes"


@dataclass(frozen=True, slots=True)
class BadAttr(Mistake):
    """A single `_`-separated attribute code outside the allowed set."""

    attr: str

    def describe(self) -> str:
        return f"unknown attribute code {self.attr!r}"


__all__ = [
    "BadAttr",
    "BadSubstr",
    "BadToken",
    "ClosingUnopenedDelim",
    "Mistake",
    "MissingAttrs",
    "NestedDelim",
    "UnclosedDelim",
]
