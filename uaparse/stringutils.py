"""Small scanning helpers shared by the regular-expression preprocessors."""

from __future__ import annotations

_CLOSING_CHARS = {"(": ")", "[": "]", "{": "}"}
_WHITESPACE = " \t\r\n"


def get_closing_parenthesis(
    text: str, start: int = 0, end: int | None = None
) -> tuple[int, bool] | None:
    """Find the character that closes the block opened at ``text[start]``.

    The block may be opened by ``(``, ``[`` or ``{``; only parentheses nest.
    Backslash-escaped characters are skipped, and a ``]`` directly after ``[``
    is taken as a literal.  Returns ``(position, has_alternatives)`` where
    ``has_alternatives`` tells whether the block offers a choice: a character
    class, or a top-level ``|`` inside parentheses.  Returns ``None`` when the
    block is not closed before ``end`` or ``text[start]`` opens no block.
    """
    if end is None:
        end = len(text)
    if start >= end:
        return None

    start_char = text[start]
    end_char = _CLOSING_CHARS.get(start_char)
    if end_char is None:
        return None

    nested = start_char == "("
    level = 1 if nested else 0
    has_alternatives = False

    pos = start + 1
    while pos < end:
        char = text[pos]
        if char == "\\":
            pos += 1
        elif char == end_char:
            if nested:
                level -= 1
            if level == 0:
                if start_char == "[":
                    has_alternatives = True
                if not (start_char == "[" and pos - start == 1):
                    return pos, has_alternatives
        elif char == start_char:
            if nested:
                level += 1
        elif start_char == "(" and char == "|" and level == 1:
            has_alternatives = True
        pos += 1
    return None


def is_optional_operator(text: str, pos: int, end: int | None = None) -> bool:
    """Tell whether the quantifier at ``text[pos]`` allows zero repetitions."""
    if end is None:
        end = len(text)
    if pos >= end:
        return False
    char = text[pos]
    if char == "{":
        return pos + 1 < end and text[pos + 1] in "0,"
    return char in "*?"


def trim(s: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return s.strip(_WHITESPACE)