"""Lexical classification of non-delimiter tokens.

Classification order:
1. Count marker: legal only while a round bracket is open
2. Blacklist: rejected
3. Whitelist: accepted verbatim
4. Atom coverage: accepted, with one BadSubstr per uncovered run

With ``whitelist_overrides_blacklist`` steps 2 and 3 swap. Which order
should be the default is an open product decision: blacklist-first is the
default until it is settled, and the flag serves deployments where a
whitelisted word must win over the blacklist.

Rejected numerals and blacklisted words are dropped from the node
sequence; words with coverage gaps are kept. A wrong word and a slightly
misspelled word are different severities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prepis.mistakes import BadSubstr, BadToken
from prepis.nodes import TokenNode
from prepis.tokens import DelimKind

if TYPE_CHECKING:
    from prepis.config import ParserConfig
    from prepis.tokens import Token


class WordParsingMixin:
    """Mixin classifying words against the compiled rules.

    Required Host Attributes:
        - _config: ParserConfig
        - _open: dict[DelimKind, int | None]
        - _pos: int

    Required Host Methods:
        - _text(token) -> str
        - _emit(node) -> None
        - _report(mistake) -> None

    """

    _config: ParserConfig
    _open: dict[DelimKind, int | None]
    _pos: int

    def _parse_word(self, token: Token) -> None:
        text = self._text(token)
        config = self._config

        if config.is_numeral(text):
            if self._open[DelimKind.ROUND] is None:
                self._report(BadToken(at=self._pos))
            else:
                self._emit(TokenNode(token))
            return

        if config.whitelist_overrides_blacklist:
            if config.is_whitelisted(text):
                self._emit(TokenNode(token))
                return
            if config.is_blacklisted(text):
                self._report(BadToken(at=self._pos))
                return
        else:
            if config.is_blacklisted(text):
                self._report(BadToken(at=self._pos))
                return
            if config.is_whitelisted(text):
                self._emit(TokenNode(token))
                return

        for start, end in config.atom_gaps(text):
            self._report(BadSubstr(at=self._pos, start=start, end=end))
        self._emit(TokenNode(token))
