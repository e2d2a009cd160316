"""Single-pass lexer for transcribed segments.

Splitting and legality checking are decoupled: the lexer only separates
bracket characters from everything else, so one malformed character never
prevents the rest of a segment from being analyzed. All checks happen in
the parser.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
└── core.py              # Lexer class, whitespace normalization

Usage:
    >>> from prepis.lexer import tokenize
    >>> tokenized = tokenize("  foo [bar]  ")
    >>> tokenized.source
    'foo [bar]'
    >>> [tokenized.text(t) for t in tokenized.tokens]
    ['foo', '[', 'bar', ']']

"""

from prepis.lexer.core import Lexer, normalize_whitespace, tokenize

__all__ = ["Lexer", "normalize_whitespace", "tokenize"]
