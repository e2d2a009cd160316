"""Attribute code lists following an angle bracket.

``<SM_SJ ...>``: the token right after ``<`` is a `_`-separated list of
codes. Every code is checked individually; the list is accepted only if
all of its codes are allowed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prepis.config import ATTR_SEPARATOR
from prepis.mistakes import BadAttr, MissingAttrs
from prepis.nodes import AttrList

if TYPE_CHECKING:
    from prepis.config import ParserConfig


class AttrListParsingMixin:
    """Mixin parsing the codes token after ``<``.

    Required Host Attributes:
        - _config: ParserConfig
        - _pos: int (points at the '<' token on entry)

    Required Host Methods:
        - _peek(offset) -> Token | None
        - _text(token) -> str
        - _emit(node) -> None
        - _report(mistake) -> None

    """

    _config: ParserConfig
    _pos: int

    def _parse_attr_list(self) -> None:
        """Parse the codes token following the current '<'.

        On success the codes token is consumed (``_pos`` points at it on
        return) so the main loop does not treat it as a word. A missing
        codes token consumes nothing.
        """
        codes_pos = self._pos + 1
        token = self._peek()
        if token is None or not token.is_word:
            self._report(MissingAttrs(at=codes_pos))
            return

        self._pos = codes_pos
        valid = True
        codes: set[str] = set()
        for code in self._text(token).split(ATTR_SEPARATOR):
            if self._config.is_allowed_attr(code):
                codes.add(code)
            else:
                valid = False
                self._report(BadAttr(at=codes_pos, attr=code))

        if valid:
            self._emit(AttrList(tuple(sorted(codes))))
