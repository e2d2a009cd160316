"""Exception classes for prepis.

Segment problems are never raised: they are returned as Mistake values.
Exceptions are reserved for malformed rule specifications, which are a
caller bug rather than a transcription error.
"""

from __future__ import annotations


class PrepisError(Exception):
    """Base exception for all prepis errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(PrepisError):
    """Malformed validation rules.

    Raised by config compilation when one of the rule lists cannot be
    turned into a matcher.
    """

    def __init__(
        self,
        message: str,
        list_name: str | None = None,
        entry: object = None,
    ) -> None:
        """Initialize config error with the offending list and entry.

        Args:
            message: Error description
            list_name: Rule list the entry came from (e.g. "atoms")
            entry: The offending entry (optional)
        """
        self.message = message
        self.list_name = list_name
        self.entry = entry

        location = ""
        if list_name:
            location = f"{list_name}"
            if entry is not None:
                location += f"[{entry!r}]"
            location += ": "

        super().__init__(f"{location}{message}")
