"""Parsing subsystem for the prepis validator.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal and result accumulation
- `WordParsingMixin`: Numerals, blacklist, whitelist, atom coverage
- `DelimiterParsingMixin`: Bracket balance and same-kind nesting
- `AttrListParsingMixin`: Attribute codes after '<'

Example:
    >>> from prepis.parsing import (
    ...     TokenNavigationMixin,
    ...     WordParsingMixin,
    ...     DelimiterParsingMixin,
    ...     AttrListParsingMixin,
    ... )
    >>> class Parser(
    ...     TokenNavigationMixin,
    ...     WordParsingMixin,
    ...     DelimiterParsingMixin,
    ...     AttrListParsingMixin,
    ... ):
    ...     pass

"""

from prepis.parsing.attrs import AttrListParsingMixin
from prepis.parsing.delimiters import DelimiterParsingMixin
from prepis.parsing.token_nav import TokenNavigationMixin
from prepis.parsing.words import WordParsingMixin

__all__ = [
    "AttrListParsingMixin",
    "DelimiterParsingMixin",
    "TokenNavigationMixin",
    "WordParsingMixin",
]
