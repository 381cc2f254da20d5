"""Replacement strings with ``$0`` to ``$9`` group placeholders."""

from __future__ import annotations

import re

from .pattern import Match

_PLACEHOLDER = re.compile(r"\$([0-9])")


class ReplaceTemplate:
    """A replacement text whose ``$n`` placeholders take match groups.

    A template built without text is empty and expands to an empty string;
    a template built from ``""`` is not empty.
    """

    def __init__(self, template: str | None = None):
        self.template = template
        if template is None:
            self._chunks: tuple[str, ...] = ()
            self._indices: tuple[int, ...] = ()
        else:
            parts = _PLACEHOLDER.split(template)
            self._chunks = tuple(parts[0::2])
            self._indices = tuple(int(digit) for digit in parts[1::2])

    @property
    def empty(self) -> bool:
        """True when no template text was given."""
        return not self._chunks

    def expand(self, match: Match) -> str:
        """Fill the placeholders from ``match``."""
        if not self._chunks:
            return ""
        if len(self._chunks) == 1:
            return self._chunks[0]
        pieces = [self._chunks[0]]
        for index, chunk in zip(self._indices, self._chunks[1:]):
            pieces.append(match.get(index))
            pieces.append(chunk)
        return "".join(pieces)

    def __repr__(self) -> str:
        return f"ReplaceTemplate({self.template!r})"