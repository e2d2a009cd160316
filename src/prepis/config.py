"""Validation rules compiled into fast matchers.

A ParserConfig is built once from the caller's string lists and is read-only
thereafter. It never references the segment being validated, so one config
can be shared by any number of threads validating different segments.

Usage:
    >>> from prepis.config import compile_config
    >>> config = compile_config(
    ...     whitelist=["OK"],
    ...     blacklist=["xxx"],
    ...     atoms=["a", "b", "ch", "c", "h"],
    ...     after_angle=["SM", "SJ"],
    ... )
    >>> config.atoms
    ('ch', 'a', 'b', 'c', 'h')
    >>> config.atom_gaps("ab%c")
    [(2, 3)]

Failure Semantics:
    Compilation is the only stage that can fail, and only on malformed rule
    lists (ConfigError). Content checked later never raises.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from prepis.errors import ConfigError
from prepis.lexer.core import WHITESPACE_RE
from prepis.tokens import DELIMITER_CHARS
from prepis.utils.logger import get_logger

logger = get_logger(__name__)

ATTR_SEPARATOR = "_"

# Count markers: optional minus, digits, optional single decimal separator
NUMERAL_RE = re.compile(r"-?[0-9]+(?:[.,][0-9]+)?")

# Keys accepted by from_dict, with aliases used by stored configurations
_DICT_KEYS = {
    "whitelist": "whitelist",
    "blacklist": "blacklist",
    "atoms": "atoms",
    "after_angle": "after_angle",
    "after-angle": "after_angle",
    "whitelist_overrides_blacklist": "whitelist_overrides_blacklist",
}

# Boolean spellings a storage layer may send as text
_BOOL_STRINGS = {
    "true": True,
    "yes": True,
    "1": True,
    "false": False,
    "no": False,
    "0": False,
}


def _coerce_bool(name: str, value: Any) -> bool:
    """Read a stored flag, accepting bools, 0/1 and their usual spellings."""
    if isinstance(value, bool):
        return value
    # SQL storage keeps flags as 0/1 integers
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        flag = _BOOL_STRINGS.get(value.strip().lower())
        if flag is not None:
            return flag
    raise ConfigError("expected a boolean", name, value)


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable validation rules.

    Any of the four lists may be empty, which disables the corresponding
    check: an empty whitelist or blacklist matches nothing, an empty
    after-angle set rejects every attribute code, and an empty atom
    inventory leaves every word uncovered.

    Attributes:
        whitelist: Exact tokens accepted verbatim, bypassing atom coverage
        blacklist: Exact tokens always rejected
        atoms: Allowed graphemes or grapheme sequences, longest first
        after_angle: Allowed attribute codes (matched one `_` piece at a time)
        whitelist_overrides_blacklist: Check the whitelist before the
            blacklist when classifying words
        atom_pattern: Compiled longest-first alternation of the atoms

    Thread Safety:
        Frozen dataclass; compiled patterns are safe to use concurrently.

    """

    whitelist: frozenset[str] = frozenset()
    blacklist: frozenset[str] = frozenset()
    atoms: tuple[str, ...] = ()
    after_angle: frozenset[str] = frozenset()
    whitelist_overrides_blacklist: bool = False
    atom_pattern: re.Pattern[str] | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        # Longest atoms first so that multi-grapheme atoms win over any
        # single-grapheme prefix; ties sorted for a stable pattern.
        atoms = tuple(sorted(set(self.atoms), key=lambda atom: (-len(atom), atom)))
        object.__setattr__(self, "atoms", atoms)
        object.__setattr__(self, "whitelist", frozenset(self.whitelist))
        object.__setattr__(self, "blacklist", frozenset(self.blacklist))
        object.__setattr__(self, "after_angle", frozenset(self.after_angle))
        if atoms:
            pattern = re.compile("|".join(re.escape(atom) for atom in atoms))
            object.__setattr__(self, "atom_pattern", pattern)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ParserConfig:
        """Create ParserConfig from a mapping.

        Useful when rules come from the caller's storage layer (database
        rows, YAML, JSON). Lists may be sequences of strings or a single
        whitespace-separated string. Unknown keys are ignored.

        Args:
            config_dict: Mapping with any of the keys ``whitelist``,
                ``blacklist``, ``atoms``, ``after_angle`` (or
                ``after-angle``) and ``whitelist_overrides_blacklist``.

        Returns:
            Compiled ParserConfig

        Raises:
            ConfigError: If any list is malformed, or the flag is not a
                bool, 0/1, or a string spelling of one

        Example:
            >>> config = ParserConfig.from_dict({
            ...     "atoms": "a b c",
            ...     "after-angle": ["SM"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.after_angle
            frozenset({'SM'})

        """
        kwargs: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _DICT_KEYS.get(key)
            if name is None:
                continue
            if name == "whitelist_overrides_blacklist":
                kwargs[name] = _coerce_bool(name, value)
            elif isinstance(value, str):
                kwargs[name] = [part for part in WHITESPACE_RE.split(value) if part]
            else:
                kwargs[name] = value
        return compile_config(**kwargs)

    def is_numeral(self, text: str) -> bool:
        """True if text is a count marker."""
        return NUMERAL_RE.fullmatch(text) is not None

    def is_whitelisted(self, text: str) -> bool:
        return text in self.whitelist

    def is_blacklisted(self, text: str) -> bool:
        return text in self.blacklist

    def is_allowed_attr(self, code: str) -> bool:
        """True if code is one allowed after-angle attribute."""
        return code in self.after_angle

    def atom_gaps(self, text: str) -> list[tuple[int, int]]:
        """Find the runs of text not covered by any atom.

        Atoms are matched greedily left to right, longest first, without
        overlap. Every maximal run between matches is one gap.

        Args:
            text: Token text

        Returns:
            (start, end) offsets relative to text, in order

        """
        if self.atom_pattern is None:
            return [(0, len(text))] if text else []
        gaps: list[tuple[int, int]] = []
        pos = 0
        for match in self.atom_pattern.finditer(text):
            if match.start() > pos:
                gaps.append((pos, match.start()))
            pos = match.end()
        if pos < len(text):
            gaps.append((pos, len(text)))
        return gaps


def _check_entries(
    list_name: str,
    entries: Iterable[str],
    forbidden: frozenset[str],
) -> list[str]:
    """Validate one rule list, returning its entries as a list."""
    if isinstance(entries, str):
        raise ConfigError(
            "expected a sequence of strings, got a single string", list_name
        )
    checked: list[str] = []
    for entry in entries:
        if not isinstance(entry, str):
            raise ConfigError(
                f"entries must be strings, got {type(entry).__name__}",
                list_name,
                entry,
            )
        if not entry:
            raise ConfigError("empty entry", list_name, entry)
        if WHITESPACE_RE.search(entry):
            raise ConfigError("entry contains whitespace", list_name, entry)
        bad = sorted(set(entry) & forbidden)
        if bad:
            raise ConfigError(
                f"entry contains reserved character(s) {''.join(bad)!r}",
                list_name,
                entry,
            )
        checked.append(entry)
    return checked


def compile_config(
    whitelist: Iterable[str] = (),
    blacklist: Iterable[str] = (),
    atoms: Iterable[str] = (),
    after_angle: Iterable[str] = (),
    *,
    whitelist_overrides_blacklist: bool = False,
) -> ParserConfig:
    """Compile caller-supplied rule lists into a ParserConfig.

    Args:
        whitelist: Exact tokens accepted verbatim
        blacklist: Exact tokens always rejected
        atoms: Allowed graphemes / grapheme sequences
        after_angle: Allowed attribute codes
        whitelist_overrides_blacklist: Classify whitelisted words before
            checking the blacklist

    Returns:
        Compiled, immutable ParserConfig

    Raises:
        ConfigError: If a list is a bare string, or holds a non-string,
            empty, whitespace-containing or reserved-character entry

    """
    whitelist = _check_entries("whitelist", whitelist, DELIMITER_CHARS)
    blacklist = _check_entries("blacklist", blacklist, DELIMITER_CHARS)
    atoms = _check_entries("atoms", atoms, DELIMITER_CHARS)
    after_angle = _check_entries(
        "after_angle", after_angle, DELIMITER_CHARS | {ATTR_SEPARATOR}
    )

    config = ParserConfig(
        whitelist=frozenset(whitelist),
        blacklist=frozenset(blacklist),
        atoms=tuple(atoms),
        after_angle=frozenset(after_angle),
        whitelist_overrides_blacklist=whitelist_overrides_blacklist,
    )
    logger.debug(
        "Compiled config: %d whitelisted, %d blacklisted, %d atoms, %d attribute codes",
        len(config.whitelist),
        len(config.blacklist),
        len(config.atoms),
        len(config.after_angle),
    )
    return config


__all__ = [
    "ATTR_SEPARATOR",
    "NUMERAL_RE",
    "ParserConfig",
    "compile_config",
]
