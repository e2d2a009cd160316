"""Single-pass validating parser producing nodes and mistakes.

Consumes the token sequence from the lexer and walks it once, left to
right, with no backtracking. State is the current token index plus one
open-bracket position per delimiter kind.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal, result accumulation
- `WordParsingMixin`: Lexical classification of words
- `DelimiterParsingMixin`: Bracket balance
- `AttrListParsingMixin`: Attribute codes after '<'

Failure Semantics:
There are no fatal errors. Every malformed input produces mistakes and the
parser always returns a complete result.

Thread Safety:
- Parser instances are single-use and not thread-safe
- ParserConfig is read-only and may be shared between parsers
- Parsed results are immutable

"""

from __future__ import annotations

from dataclasses import dataclass

from prepis.config import ParserConfig
from prepis.mistakes import Mistake
from prepis.nodes import Node
from prepis.parsing import (
    AttrListParsingMixin,
    DelimiterParsingMixin,
    TokenNavigationMixin,
    WordParsingMixin,
)
from prepis.tokens import DelimKind, Token, Tokenized, TokenKind


@dataclass(frozen=True, slots=True)
class Parsed:
    """Result of validating one segment.

    Attributes:
        source: Normalized segment text
        tokens: Token sequence the indices in nodes and mistakes refer to
        nodes: Clean structural reading of the segment
        mistakes: Every problem found, in discovery order

    """

    source: str
    tokens: tuple[Token, ...]
    nodes: tuple[Node, ...]
    mistakes: tuple[Mistake, ...]

    @property
    def ok(self) -> bool:
        """True if the segment is fully valid."""
        return not self.mistakes

    def text(self, index: int) -> str:
        """Source text of the token at index."""
        token = self.tokens[index]
        return self.source[token.start : token.end]


class Parser(
    TokenNavigationMixin,
    WordParsingMixin,
    DelimiterParsingMixin,
    AttrListParsingMixin,
):
    """Validating state machine over a token sequence.

    Usage:
        >>> from prepis.config import compile_config
        >>> from prepis.lexer import tokenize
        >>> parser = Parser(compile_config(), tokenize(")(("))
        >>> [type(m).__name__ for m in parser.parse().mistakes]
        ['ClosingUnopenedDelim', 'NestedDelim', 'UnclosedDelim']

    Thread Safety:
        Parser instances are single-use. Create one per segment.

    """

    __slots__ = (
        "_config",
        "_source",
        "_tokens",
        "_tokens_len",
        "_pos",
        "_nodes",
        "_mistakes",
        # Open bracket position per kind, None when closed
        "_open",
    )

    def __init__(self, config: ParserConfig, tokenized: Tokenized) -> None:
        """Initialize parser with rules and a tokenized segment.

        Args:
            config: Compiled validation rules
            tokenized: Lexer output for one segment
        """
        self._config = config
        self._source = tokenized.source
        self._tokens = tokenized.tokens
        self._tokens_len = len(tokenized.tokens)
        self._pos = 0
        self._nodes: list[Node] = []
        self._mistakes: list[Mistake] = []
        self._open: dict[DelimKind, int | None] = dict.fromkeys(DelimKind)

    def parse(self) -> Parsed:
        """Validate the whole token sequence.

        Returns:
            Parsed result with nodes and mistakes

        Complexity: O(n) in the segment length
        """
        while not self._at_end():
            token = self._tokens[self._pos]
            if token.is_word:
                self._parse_word(token)
            elif token.kind is TokenKind.OPEN:
                self._parse_open(token)
            else:
                self._parse_close(token)
            self._pos += 1

        self._report_unclosed()

        return Parsed(
            source=self._source,
            tokens=self._tokens,
            nodes=tuple(self._nodes),
            mistakes=tuple(self._mistakes),
        )


def validate(config: ParserConfig, tokenized: Tokenized) -> Parsed:
    """Validate a tokenized segment against compiled rules.

    Args:
        config: Compiled validation rules
        tokenized: Lexer output for one segment

    Returns:
        Parsed result; ``mistakes`` is empty iff the segment is valid

    """
    return Parser(config, tokenized).parse()


__all__ = ["Parsed", "Parser", "validate"]
