"""Validated structural output nodes.

The node sequence is the "clean" reading of a segment: a node is appended
only when the corresponding input was judged legal. Rejected input appears
only in the mistake list.

Node Hierarchy:
Node (base)
├── TokenNode    accepted word
├── OpenNode     accepted opening bracket
├── CloseNode    accepted closing bracket
└── AttrList     attribute codes following an angle bracket

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from prepis.tokens import DelimKind, Token


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all output nodes."""


@dataclass(frozen=True, slots=True)
class TokenNode(Node):
    """An accepted non-delimiter span.

    Words with atom-coverage gaps are still emitted; only the gaps are
    reported as mistakes.

    """

    token: Token


@dataclass(frozen=True, slots=True)
class OpenNode(Node):
    delim: DelimKind


@dataclass(frozen=True, slots=True)
class CloseNode(Node):
    delim: DelimKind


@dataclass(frozen=True, slots=True)
class AttrList(Node):
    """Attribute codes after an angle bracket, sorted and deduplicated."""

    codes: tuple[str, ...]


__all__ = [
    "AttrList",
    "CloseNode",
    "Node",
    "OpenNode",
    "TokenNode",
]
