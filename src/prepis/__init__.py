"""
prepis: validating parser for transcribed speech segments

Checks one transcribed segment at a time against a constrained annotation
convention: balanced, non-nested ``( )``, ``[ ]`` and ``< >`` brackets,
controlled attribute codes after ``<``, an inventory of allowed graphemes,
explicit token whitelists/blacklists, and count markers inside ``( )``.
Every violation is reported, so a transcriber can fix a segment in one pass.

Quick Start:
    >>> from prepis import check, compile_config
    >>> config = compile_config(atoms=list("abcdefghijklmnopqrstuvwxyz"))
    >>> parsed = check("foo (bar", config)
    >>> parsed.ok
    False
    >>> parsed.mistakes
    (UnclosedDelim(at=1, delim=<DelimKind.ROUND: 1>),)

    >>> # Or keep the rules around with the Checker class
    >>> from prepis import Checker
    >>> checker = Checker(config)
    >>> checker("foo bar").ok
    True

Pipeline:
    raw text -> tokenize() -> Tokenized -> validate(config, ...) -> Parsed
"""

from collections.abc import Iterable

from prepis.cache import DictValidationCache, ValidationCache, hash_config, hash_content
from prepis.config import ParserConfig, compile_config
from prepis.errors import ConfigError, PrepisError
from prepis.highlighting import format_mistake, format_report
from prepis.lexer import Lexer, normalize_whitespace, tokenize
from prepis.location import Span, mistake_span
from prepis.mistakes import (
    BadAttr,
    BadSubstr,
    BadToken,
    ClosingUnopenedDelim,
    Mistake,
    MissingAttrs,
    NestedDelim,
    UnclosedDelim,
)
from prepis.nodes import AttrList, CloseNode, Node, OpenNode, TokenNode
from prepis.parser import Parsed, Parser, validate
from prepis.serialization import from_dict, from_json, to_dict, to_json
from prepis.tokens import DelimKind, Token, Tokenized, TokenKind
from prepis.utils.logger import get_logger

__version__ = "0.3.0"

logger = get_logger(__name__)


def check(
    source: str,
    config: ParserConfig,
    *,
    cache: ValidationCache | None = None,
) -> Parsed:
    """Tokenize and validate one raw segment.

    Args:
        source: Raw segment text
        config: Compiled validation rules
        cache: Optional content-addressed validation cache. When provided,
            checks cache before validating; on miss, validates and stores
            the result. For parallel validation, use a thread-safe cache
            implementation.

    Returns:
        Parsed result; ``mistakes`` is empty iff the segment is valid

    Example:
        >>> parsed = check("(12)", compile_config())
        >>> parsed.ok
        True
    """
    if cache is None:
        return validate(config, tokenize(source))

    content_hash = hash_content(source)
    config_hash = hash_config(config)
    cached = cache.get(content_hash, config_hash)
    if cached is not None:
        logger.debug("Validation cache hit for %s", content_hash[:12])
        return cached

    parsed = validate(config, tokenize(source))
    cache.put(content_hash, config_hash, parsed)
    return parsed


class Checker:
    """Validator bound to one set of rules.

    Usage:
        >>> checker = Checker.from_lists(after_angle=["SM", "SJ"])
        >>> parsed = checker("<SM_SJ (12)>")
        >>> parsed.nodes[1]
        AttrList(codes=('SJ', 'SM'))

        >>> # Batch validation
        >>> results = checker.check_many(["(1)", "2"])
        >>> [r.ok for r in results]
        [True, False]

    Thread Safety:
        The compiled config is immutable. Safe to use one Checker from
        many threads concurrently (the optional cache excepted).

    """

    __slots__ = ("_config",)

    def __init__(self, config: ParserConfig) -> None:
        """Initialize checker with compiled rules.

        Args:
            config: Compiled validation rules
        """
        self._config = config

    @classmethod
    def from_lists(
        cls,
        whitelist: Iterable[str] = (),
        blacklist: Iterable[str] = (),
        atoms: Iterable[str] = (),
        after_angle: Iterable[str] = (),
        *,
        whitelist_overrides_blacklist: bool = False,
    ) -> "Checker":
        """Compile rule lists and wrap them in a Checker.

        Raises:
            ConfigError: If any list is malformed
        """
        return cls(
            compile_config(
                whitelist,
                blacklist,
                atoms,
                after_angle,
                whitelist_overrides_blacklist=whitelist_overrides_blacklist,
            )
        )

    @property
    def config(self) -> ParserConfig:
        return self._config

    def __call__(self, source: str) -> Parsed:
        """Validate one raw segment."""
        return check(source, self._config)

    def check(self, source: str, *, cache: ValidationCache | None = None) -> Parsed:
        """Validate one raw segment, optionally through a cache."""
        return check(source, self._config, cache=cache)

    def check_many(
        self,
        sources: Iterable[str],
        *,
        cache: ValidationCache | None = None,
    ) -> list[Parsed]:
        """Validate multiple raw segments independently.

        Segments have no ordering dependency on each other; results are
        returned in input order. When cache is provided, duplicate
        segments within the batch hit cache.

        Args:
            sources: Iterable of raw segment strings
            cache: Optional content-addressed validation cache

        Returns:
            List of Parsed results
        """
        results = [check(source, self._config, cache=cache) for source in sources]
        logger.debug(
            "Checked %d segments, %d with mistakes",
            len(results),
            sum(1 for parsed in results if not parsed.ok),
        )
        return results


__all__ = [  # noqa: RUF022 grouped by category
    # Version
    "__version__",
    # Core API
    "check",
    "compile_config",
    "tokenize",
    "validate",
    "Checker",
    # Validation cache
    "DictValidationCache",
    "ValidationCache",
    "hash_config",
    "hash_content",
    # Configuration
    "ParserConfig",
    # Errors
    "ConfigError",
    "PrepisError",
    # Tokens
    "DelimKind",
    "Token",
    "TokenKind",
    "Tokenized",
    # Nodes
    "AttrList",
    "CloseNode",
    "Node",
    "OpenNode",
    "TokenNode",
    # Mistakes
    "BadAttr",
    "BadSubstr",
    "BadToken",
    "ClosingUnopenedDelim",
    "Mistake",
    "MissingAttrs",
    "NestedDelim",
    "UnclosedDelim",
    # Parser components
    "Lexer",
    "Parser",
    "Parsed",
    "normalize_whitespace",
    # Locations and display
    "Span",
    "mistake_span",
    "format_mistake",
    "format_report",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
