"""Caret rendering of mistakes for transcribers.

Renders each mistake under the normalized source line, e.g.::

    characters not allowed in a word
    čarala b%nga máro
            ^

Padding and caret width count extended grapheme clusters rather than code
points, so combining accents (a decomposed ``á`` is two code points) do not
shift the carets. Grapheme segmentation uses the ``regex`` module's ``\\X``.

Thread Safety:
All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

import regex

from prepis.location import mistake_span

if TYPE_CHECKING:
    from prepis.mistakes import Mistake
    from prepis.parser import Parsed

_GRAPHEME_RE = regex.compile(r"\X")


def grapheme_len(text: str) -> int:
    """Number of user-perceived characters in text.

    Example:
        >>> grapheme_len("ma\\u0301ro")
        4
    """
    return len(_GRAPHEME_RE.findall(text))


def caret_line(source: str, start: int, end: int) -> str:
    """Build the marker line underlining source[start:end].

    An empty range still gets one caret, placed right after ``start``'s
    preceding text (used for "expected something here" mistakes).
    """
    padding = grapheme_len(source[:start])
    width = max(1, grapheme_len(source[start:end]))
    return " " * padding + "^" * width


def format_mistake(parsed: Parsed, mistake: Mistake) -> str:
    """Render one mistake as message, source line and caret line."""
    span = mistake_span(parsed, mistake)
    return "\n".join(
        (
            mistake.describe(),
            parsed.source,
            caret_line(parsed.source, span.start, span.end),
        )
    )


def format_report(parsed: Parsed) -> str:
    """Render every mistake of a result, separated by blank lines.

    Returns:
        The rendered mistakes, or a one-line notice for a valid segment
    """
    if parsed.ok:
        return "no mistakes"
    return "\n\n".join(format_mistake(parsed, mistake) for mistake in parsed.mistakes)


__all__ = ["caret_line", "format_mistake", "format_report", "grapheme_len"]
