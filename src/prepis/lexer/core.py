"""State-machine lexer with O(n) guaranteed performance.

Whitespace is normalized before scanning (every run collapsed to a single
ASCII space, ends trimmed), since transcribers should never have to fix
whitespace irregularities by hand. All offsets are reported against the
normalized string.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

import regex

from prepis.tokens import DELIMITERS, Token, Tokenized, TokenKind

# Unicode White_Space; the U+001C..U+001F separators are not part of it
WHITESPACE_RE = regex.compile(r"\p{White_Space}+")


def normalize_whitespace(source: str) -> str:
    """Collapse whitespace runs to single spaces and trim both ends.

    Args:
        source: Raw segment text

    Returns:
        Normalized text

    Example:
        >>> normalize_whitespace("  foo\\t\\n bar ")
        'foo bar'
    """
    return WHITESPACE_RE.sub(" ", source).strip(" ")


class Lexer:
    """Splits a normalized segment into delimiter and non-delimiter tokens.

    Usage:
        >>> lexer = Lexer("foo][ bar(baz)..")
        >>> [lexer.source[t.start:t.end] for t in lexer.tokenize()]
        ['foo', ']', '[', 'bar', '(', 'baz', ')', '..']

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        """Initialize lexer with raw segment text.

        Args:
            source: Raw segment text; normalized on construction
        """
        self._source = normalize_whitespace(source)
        self._source_len = len(self._source)
        self._pos = 0

    @property
    def source(self) -> str:
        """The normalized source all token offsets refer to."""
        return self._source

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects, strictly left to right

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            char = source[self._pos]
            if char == " ":
                # Separator; normalization guarantees it is a single space
                self._pos += 1
                continue
            delim = DELIMITERS.get(char)
            if delim is not None:
                kind, delim_kind = delim
                yield Token(kind, delim_kind, self._pos, self._pos + 1)
                self._pos += 1
                continue
            yield self._scan_word()

    def _scan_word(self) -> Token:
        """Consume a maximal run of non-space, non-delimiter characters."""
        start = self._pos
        source = self._source
        source_len = self._source_len
        pos = start
        while pos < source_len:
            char = source[pos]
            if char == " " or char in DELIMITERS:
                break
            pos += 1
        self._pos = pos
        return Token(TokenKind.NON_DELIM, None, start, pos)


def tokenize(source: str) -> Tokenized:
    """Normalize and tokenize a raw segment.

    A pure function of its input: no configuration is consulted.

    Args:
        source: Raw segment text

    Returns:
        Tokenized with the normalized source and its tokens

    Example:
        >>> tokenized = tokenize("foo <SM bar>")
        >>> [t.kind.name for t in tokenized.tokens]
        ['NON_DELIM', 'OPEN', 'NON_DELIM', 'NON_DELIM', 'CLOSE']
    """
    lexer = Lexer(source)
    tokens = tuple(lexer.tokenize())
    return Tokenized(source=lexer.source, tokens=tokens)
