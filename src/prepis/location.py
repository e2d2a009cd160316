"""Map mistakes back to the normalized source.

Mistakes point at token indices; consumers that underline text need
absolute offsets. Span converts either kind of reference.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from prepis.mistakes import BadSubstr

if TYPE_CHECKING:
    from prepis.mistakes import Mistake
    from prepis.parser import Parsed


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open range of offsets in a normalized source.

    Attributes:
        start: Start offset (inclusive)
        end: End offset (exclusive); equals start for a position

    Examples:
        >>> Span(4, 7)
        Span(start=4, end=7)
        >>> str(Span(4, 7))
        '4:7'

    """

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, source: str) -> str:
        """Return the text covered by this span."""
        return source[self.start : self.end]


def mistake_span(parsed: Parsed, mistake: Mistake) -> Span:
    """Compute the offsets a mistake refers to.

    Args:
        parsed: The result the mistake belongs to
        mistake: Any mistake from ``parsed.mistakes``

    Returns:
        The offending token's span; the uncovered run for BadSubstr; an
        empty span at the end of the source when ``at`` is past the last
        token (MissingAttrs at end of segment)

    """
    if mistake.at >= len(parsed.tokens):
        end = len(parsed.source)
        return Span(end, end)
    token = parsed.tokens[mistake.at]
    if isinstance(mistake, BadSubstr):
        return Span(token.start + mistake.start, token.start + mistake.end)
    return Span(token.start, token.end)


__all__ = ["Span", "mistake_span"]
