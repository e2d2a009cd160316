"""Token navigation utilities for the prepis parser.

Provides mixin for token stream navigation and result accumulation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prepis.mistakes import Mistake
    from prepis.nodes import Node
    from prepis.tokens import Token


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _source: str
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens) for hot loops)
        - _pos: int
        - _nodes: list[Node]
        - _mistakes: list[Mistake]

    """

    _source: str
    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _nodes: list[Node]
    _mistakes: list[Mistake]

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._pos >= self._tokens_len

    def _peek(self, offset: int = 1) -> Token | None:
        """Peek at token at offset from current position."""
        pos = self._pos + offset
        if pos < self._tokens_len:
            return self._tokens[pos]
        return None

    def _text(self, token: Token) -> str:
        """Source text covered by token."""
        return self._source[token.start : token.end]

    def _emit(self, node: Node) -> None:
        self._nodes.append(node)

    def _report(self, mistake: Mistake) -> None:
        self._mistakes.append(mistake)
