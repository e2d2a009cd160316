"""Bracket balance tracking for the prepis parser.

Each delimiter kind has its own open position, a stack capped at depth 1:
opening a second bracket of the same kind before closing the first is a
mistake, not deeper nesting. The outermost bracket stays authoritative and
is the one reported if it is never closed. Different kinds are tracked
independently, so ``( [ ) ]`` is accepted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prepis.mistakes import ClosingUnopenedDelim, NestedDelim, UnclosedDelim
from prepis.nodes import CloseNode, OpenNode
from prepis.tokens import DelimKind

if TYPE_CHECKING:
    from prepis.tokens import Token


class DelimiterParsingMixin:
    """Mixin handling opening and closing brackets.

    Required Host Attributes:
        - _open: dict[DelimKind, int | None]
        - _pos: int

    Required Host Methods:
        - _emit(node) -> None
        - _report(mistake) -> None
        - _parse_attr_list() -> None

    """

    _open: dict[DelimKind, int | None]
    _pos: int

    def _parse_open(self, token: Token) -> None:
        delim = token.delim
        assert delim is not None
        outermost = self._open[delim]
        if outermost is not None:
            self._report(
                NestedDelim(at=self._pos, delim=delim, outermost_start=outermost)
            )
        else:
            self._open[delim] = self._pos
            self._emit(OpenNode(delim))

        # Codes are expected after every '<', nested or not
        if delim is DelimKind.ANGLE:
            self._parse_attr_list()

    def _parse_close(self, token: Token) -> None:
        delim = token.delim
        assert delim is not None
        if self._open[delim] is None:
            self._report(ClosingUnopenedDelim(at=self._pos, delim=delim))
            return
        self._open[delim] = None
        self._emit(CloseNode(delim))

    def _report_unclosed(self) -> None:
        """Report brackets still open at end of segment, in DelimKind order."""
        for delim in DelimKind:
            start = self._open[delim]
            if start is not None:
                self._report(UnclosedDelim(at=start, delim=delim))
