"""Regular expression wrapper with a fixed, capped set of capture groups."""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_MATCHES = 10


@dataclass(frozen=True)
class Match:
    """Captured groups of a successful match.

    Index 0 holds the whole matched text, index ``n`` the ``n``-th group of
    the original expression.  Groups that took no part in the match are
    empty strings.
    """

    groups: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.groups)

    def get(self, index: int) -> str:
        """Return group ``index``, or an empty string if there is none."""
        if 0 <= index < len(self.groups):
            return self.groups[index]
        return ""


class Pattern:
    """A compiled expression that matches anywhere within a string.

    An expression that fails to compile, or a pattern built without one,
    never matches.  At most ``MAX_MATCHES`` groups (the whole match included)
    are captured.
    """

    def __init__(self, pattern: str | None = None, case_sensitive: bool = True):
        self.pattern = pattern
        self.case_sensitive = case_sensitive
        self._regex: re.Pattern[str] | None = None
        self._group_count = 0
        if pattern is None:
            return

        flags = re.ASCII if case_sensitive else re.ASCII | re.IGNORECASE
        try:
            # The outer group captures the whole match as group 0.
            self._regex = re.compile(f"({pattern})", flags)
        except re.error:
            return
        self._group_count = min(self._regex.groups, MAX_MATCHES)

    def match(self, s: str) -> Match | None:
        """Search ``s`` and return the captured groups, or ``None``."""
        if self._regex is None:
            return None
        found = self._regex.search(s)
        if found is None:
            return None
        captured = found.groups()[: self._group_count]
        return Match(tuple(group or "" for group in captured))

    def __repr__(self) -> str:
        return (
            f"Pattern({self.pattern!r}, case_sensitive={self.case_sensitive!r})"
        )