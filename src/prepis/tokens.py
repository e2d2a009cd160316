"""Token and delimiter definitions for the prepis lexer.

The lexer produces a flat sequence of Token objects that the parser consumes.
A token is either one bracket character or a maximal run of anything else
that is not a space; no legality checking happens at this stage.

Thread Safety:
Token and Tokenized are frozen (immutable) and safe to share across threads.
DelimKind and TokenKind are enums (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DelimKind(Enum):
    """Paired delimiter kinds of the transcription convention.

    Declaration order is significant: it is the order in which unclosed
    delimiters are reported at the end of a segment.

    """

    ROUND = auto()  # ( ) uncertain or partial speech, may hold a count marker
    SQUARE = auto()  # [ ] overlapping or disputed speech
    ANGLE = auto()  # < > inline metadata codes


class TokenKind(Enum):
    """Coarse token categories."""

    NON_DELIM = auto()
    OPEN = auto()
    CLOSE = auto()


# Bracket character -> (kind, delimiter)
DELIMITERS: dict[str, tuple[TokenKind, DelimKind]] = {
    "(": (TokenKind.OPEN, DelimKind.ROUND),
    ")": (TokenKind.CLOSE, DelimKind.ROUND),
    "[": (TokenKind.OPEN, DelimKind.SQUARE),
    "]": (TokenKind.CLOSE, DelimKind.SQUARE),
    "<": (TokenKind.OPEN, DelimKind.ANGLE),
    ">": (TokenKind.CLOSE, DelimKind.ANGLE),
}

DELIMITER_CHARS = frozenset(DELIMITERS)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: NON_DELIM, OPEN or CLOSE
        delim: Delimiter kind for OPEN/CLOSE tokens, None for NON_DELIM
        start: Start offset in the normalized source (inclusive)
        end: End offset in the normalized source (exclusive)

    """

    kind: TokenKind
    delim: DelimKind | None
    start: int
    end: int

    def __repr__(self) -> str:
        if self.delim is None:
            return f"Token({self.kind.name}, {self.start}:{self.end})"
        return f"Token({self.kind.name}[{self.delim.name}], {self.start}:{self.end})"

    @property
    def is_word(self) -> bool:
        """True for non-delimiter tokens."""
        return self.kind is TokenKind.NON_DELIM


@dataclass(frozen=True, slots=True)
class Tokenized:
    """Normalized source paired with its token sequence.

    All token offsets refer to ``source``, never to the raw input.
    """

    source: str
    tokens: tuple[Token, ...]

    def text(self, token: Token) -> str:
        """Return the source slice covered by token."""
        return self.source[token.start : token.end]

    def __len__(self) -> int:
        return len(self.tokens)
